from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for directory errors."""


class ValidationError(DomainError):
    """Raised when request input is malformed or out of range."""

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class NotFoundError(DomainError):
    """Raised when an id does not match any stored row."""


class StoreError(DomainError):
    """Raised when the database cannot be reached or a query fails."""
