from __future__ import annotations

import math
from typing import Any, Dict, Sequence

from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = (
    "id, name, image, gender, hire_date, mail_address, zip_code, address, "
    "telephone, salary, characteristics, dependents_count"
)
_ORDER_BY = "ORDER BY hire_date ASC, id ASC"

# '!' is used instead of backslash so the ESCAPE clause reads the same in every SQL dialect.
_LIKE_ESCAPE = "!"


def _row_to_employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        id=int(row["id"]),
        name=row["name"],
        image=row.get("image"),
        gender=row.get("gender"),
        hire_date=normalize_mysql_date(row.get("hire_date")),
        mail_address=row.get("mail_address"),
        zip_code=row.get("zip_code"),
        address=row.get("address"),
        telephone=row.get("telephone"),
        salary=int(row.get("salary") or 0),
        characteristics=row.get("characteristics"),
        dependents_count=int(row.get("dependents_count") or 0),
    )


def contains_pattern(term: str) -> str:
    """Build a LIKE pattern matching ``term`` literally anywhere in the value."""
    escaped = (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def pages_for(total: int, size: int) -> int:
    if size < 1:
        return 0
    return math.ceil(total / size)


class MySQLEmployeeRepository(EmployeeRepository):
    """Employee accessor over the ``employees`` table.

    Every value reaches MySQL as a bound parameter. Name matching follows the
    column collation (case-insensitive for utf8mb4_unicode_ci).
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees {_ORDER_BY}")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def list_page(self, page: int, size: int) -> Sequence[Employee]:
        return self.find_page(offset=(int(page) - 1) * int(size), limit=int(size))

    def find_page(self, *, offset: int, limit: int) -> Sequence[Employee]:
        offset = max(int(offset), 0)
        limit = max(int(limit), 0)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees {_ORDER_BY} LIMIT %s OFFSET %s",
                (limit, offset),
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def count_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM employees")
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def count_pages(self, size: int) -> int:
        if int(size) < 1:
            return 0
        return pages_for(self.count_all(), int(size))

    def load(self, employee_id: int) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (int(employee_id),))
            row = fetchone(cur)
            if not row:
                raise NotFoundError(f"Employee {employee_id} not found")
            return _row_to_employee(row)

    def update(self, employee: Employee) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET dependents_count=%s WHERE id=%s",
                (int(employee.dependents_count), int(employee.id)),
            )
            if cur.rowcount > 0:
                return

            # MySQL reports 0 affected rows when the value did not change.
            cur.execute("SELECT id FROM employees WHERE id=%s", (int(employee.id),))
            if not fetchone(cur):
                raise NotFoundError(f"Employee {employee.id} not found")

    def find_by_name_containing(self, term: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE name LIKE %s ESCAPE '{_LIKE_ESCAPE}' {_ORDER_BY}",
                (contains_pattern(term),),
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def find_by_name_containing_page(self, term: str, *, offset: int, limit: int) -> Sequence[Employee]:
        offset = max(int(offset), 0)
        limit = max(int(limit), 0)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE name LIKE %s ESCAPE '{_LIKE_ESCAPE}'
                {_ORDER_BY}
                LIMIT %s OFFSET %s
                """,
                (contains_pattern(term), limit, offset),
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def count_by_name_containing(self, term: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT COUNT(*) AS total FROM employees WHERE name LIKE %s ESCAPE '{_LIKE_ESCAPE}'",
                (contains_pattern(term),),
            )
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def count_pages_for_name(self, term: str, size: int) -> int:
        if int(size) < 1:
            return 0
        return pages_for(self.count_by_name_containing(term), int(size))
