from __future__ import annotations

from typing import Iterable, Optional


class AdminPageError(Exception):
    """Base class for errors raised by the admin page."""


class ValidationError(AdminPageError):
    """A draft is missing one or more required fields. No store call is made."""

    def __init__(self, missing_fields: Iterable[str]) -> None:
        self.missing_fields = tuple(missing_fields)
        super().__init__(f"Missing required fields: {', '.join(self.missing_fields)}")


class StoreError(AdminPageError):
    """The data store rejected or failed an operation."""

    def __init__(self, operation: str, table: str, message: Optional[str] = None) -> None:
        self.operation = operation
        self.table = table
        detail = f": {message}" if message else ""
        super().__init__(f"{operation} on '{table}' failed{detail}")


class ConfirmationDeclined(AdminPageError):
    """The user declined a destructive action."""
