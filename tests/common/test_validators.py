import pytest

from src.employee_directory.common.validators import parse_int
from src.employee_directory.core.constants import DB_INT_MAX, DB_INT_MIN
from src.employee_directory.core.exceptions import ValidationError


@pytest.mark.parametrize("raw, expected", [("7", 7), (" 42 ", 42), ("-3", -3), ("+5", 5), ("007", 7)])
def test_parse_int_accepts_plain_decimal(raw, expected):
    assert parse_int(raw, "n") == expected


@pytest.mark.parametrize("raw", ["1_0", "\u0663", "\uff11", "1.0", "0x10", "1e3", "--1"])
def test_parse_int_rejects_non_decimal_text(raw):
    with pytest.raises(ValidationError) as exc:
        parse_int(raw, "n")

    assert exc.value.message == "n must be an integer"
    assert exc.value.field == "n"


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_parse_int_requires_a_value(raw):
    with pytest.raises(ValidationError, match="n is required"):
        parse_int(raw, "n")


def test_parse_int_defaults_to_database_int_range():
    assert parse_int(str(DB_INT_MAX), "n") == DB_INT_MAX
    assert parse_int(str(DB_INT_MIN), "n") == DB_INT_MIN

    for raw in [str(DB_INT_MAX + 1), str(DB_INT_MIN - 1), "100000000000000000000"]:
        with pytest.raises(ValidationError, match="n is out of range"):
            parse_int(raw, "n")


def test_parse_int_custom_bounds():
    assert parse_int("5", "n", min_value=0, max_value=5) == 5

    with pytest.raises(ValidationError, match="out of range"):
        parse_int("6", "n", min_value=0, max_value=5)
