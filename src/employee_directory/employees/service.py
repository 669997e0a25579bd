from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from ..common.validators import require_non_negative, require_positive
from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE, MAX_PAGE_SIZE
from ..core.exceptions import ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: browse, search and update employees.

    Updates are single statements, so each write is atomic on its own and no
    rollback logic lives here.
    """

    def __init__(self, employees: EmployeeRepository, *, max_page_size: int = MAX_PAGE_SIZE):
        self._employees = employees
        self._max_page_size = max_page_size

    def _paging(self, page: Optional[int], size: Optional[int]) -> Tuple[int, int]:
        page = DEFAULT_PAGE if page is None else int(page)
        size = DEFAULT_PAGE_SIZE if size is None else int(size)
        require_positive(size, "size")
        if size > self._max_page_size:
            raise ValidationError(f"size must not exceed {self._max_page_size}", field="size")
        if page > MAX_PAGE:
            raise ValidationError(f"page must not exceed {MAX_PAGE}", field="page")
        return max(page, 1), size

    def show_list(self, page: Optional[int] = None, size: Optional[int] = None) -> Sequence[Employee]:
        """All employees, or one page of them when ``page``/``size`` is given."""
        if page is None and size is None:
            return self._employees.list_all()

        page, size = self._paging(page, size)
        offset = (page - 1) * size
        return self._employees.find_page(offset=offset, limit=size)

    def show_detail(self, employee_id: int) -> Employee:
        return self._employees.load(int(employee_id))

    def update(self, employee: Employee) -> None:
        self._employees.update(employee)

    def update_dependents_count(self, employee_id: int, dependents_count: int) -> Employee:
        require_non_negative(int(dependents_count), "dependentsCount")
        employee = self._employees.load(int(employee_id))
        updated = replace(employee, dependents_count=int(dependents_count))
        self._employees.update(updated)
        logger.info(
            "Employee %s dependents_count %s -> %s",
            employee.id,
            employee.dependents_count,
            updated.dependents_count,
        )
        return updated

    def find_by_name_containing(self, term: str) -> Sequence[Employee]:
        return self._employees.find_by_name_containing(term)

    def search_page(self, term: str, page: Optional[int] = None, size: Optional[int] = None) -> Sequence[Employee]:
        page, size = self._paging(page, size)
        offset = (page - 1) * size
        return self._employees.find_by_name_containing_page(term, offset=offset, limit=size)

    def get_total_pages(self, size: Optional[int] = None) -> int:
        _, size = self._paging(None, size)
        return self._employees.count_pages(size)

    def get_total_pages_for_name(self, term: str, size: Optional[int] = None) -> int:
        _, size = self._paging(None, size)
        return self._employees.count_pages_for_name(term, size)
