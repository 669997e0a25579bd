from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: one row of the ``employees`` table.

    Note: plain data object (no DB access). Frozen so one request can never
    mutate an instance another request holds; use ``dataclasses.replace``.
    """

    id: int
    name: str
    image: Optional[str]
    gender: Optional[str]
    hire_date: Optional[date]
    mail_address: Optional[str]
    zip_code: Optional[str]
    address: Optional[str]
    telephone: Optional[str]
    salary: int
    characteristics: Optional[str]
    dependents_count: int
