from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete database.
    All list operations order by hire date ascending (id breaks ties).
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_page(self, page: int, size: int) -> Sequence[Employee]:
        raise NotImplementedError

    def find_page(self, *, offset: int, limit: int) -> Sequence[Employee]:
        raise NotImplementedError

    def count_all(self) -> int:
        raise NotImplementedError

    def count_pages(self, size: int) -> int:
        raise NotImplementedError

    def load(self, employee_id: int) -> Employee:
        """Raises NotFoundError when no row has this id."""

        raise NotImplementedError

    def update(self, employee: Employee) -> None:
        """Persist ``employee.dependents_count``; other columns are left untouched."""

        raise NotImplementedError

    def find_by_name_containing(self, term: str) -> Sequence[Employee]:
        raise NotImplementedError

    def find_by_name_containing_page(self, term: str, *, offset: int, limit: int) -> Sequence[Employee]:
        raise NotImplementedError

    def count_by_name_containing(self, term: str) -> int:
        raise NotImplementedError

    def count_pages_for_name(self, term: str, size: int) -> int:
        raise NotImplementedError
