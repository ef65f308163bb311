from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, Sequence

from .models import ColumnFilter, OrderBy


Row = Dict[str, Any]


# ---- Data store protocol ----

class DataStore(Protocol):
    """
    Backend-agnostic table contract consumed by the admin controller.

    - Implementations MUST NOT cache results; every call goes to the
      underlying source so the page always shows what the store holds.
    - Any failure of the underlying source is raised as StoreError.
    """

    def select(
        self,
        table: str,
        columns: str = "*",
        filters: Sequence[ColumnFilter] = (),
        order: Optional[OrderBy] = None,
    ) -> List[Row]:
        """Return the rows of `table` matching every filter, optionally sorted."""
        ...

    def insert(self, table: str, rows: Sequence[Row]) -> List[Row]:
        """Insert rows and return them as stored, including assigned ids."""
        ...

    def update(self, table: str, patch: Row, filters: Sequence[ColumnFilter]) -> List[Row]:
        """Apply `patch` to every matching row and return the updated rows."""
        ...

    def delete(self, table: str, filters: Sequence[ColumnFilter]) -> List[Row]:
        """Delete every matching row and return the deleted rows."""
        ...
