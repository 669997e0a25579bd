from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from ..common.validators import parse_int, require_non_negative
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class UpdateEmployeeForm:
    """Raw values posted by the detail page."""

    id: str = ""
    dependents_count: str = ""

    @classmethod
    def from_form(cls, form) -> "UpdateEmployeeForm":
        return cls(
            id=form.get("id", "") or "",
            dependents_count=form.get("dependentsCount", "") or "",
        )


@dataclass(frozen=True)
class FormResult:
    """Outcome of validating an UpdateEmployeeForm: parsed values or field errors."""

    employee_id: Optional[int] = None
    dependents_count: Optional[int] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_update_form(form: UpdateEmployeeForm) -> FormResult:
    errors: Dict[str, str] = {}
    employee_id: Optional[int] = None
    dependents_count: Optional[int] = None

    try:
        employee_id = parse_int(form.id, "id")
    except ValidationError as e:
        errors["id"] = e.message

    try:
        dependents_count = require_non_negative(
            parse_int(form.dependents_count, "dependentsCount"), "dependentsCount"
        )
    except ValidationError as e:
        errors["dependentsCount"] = e.message

    return FormResult(employee_id=employee_id, dependents_count=dependents_count, errors=errors)
