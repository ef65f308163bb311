from __future__ import annotations

from typing import List, Optional, Sequence

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from ..interface import DataStore, Row
from ..models import ColumnFilter, OrderBy
from ...errors import StoreError
from ...logging import get_logger


class SupabaseDataStore(DataStore):
    """
    Supabase (PostgREST) implementation.
    - Each method builds one query on `client.table(...)` and executes it.
    - API and transport failures surface as StoreError with the cause chained.
    """

    def __init__(self, client: Client) -> None:
        self.client = client
        self.logger = get_logger(__name__)

    @staticmethod
    def _apply_filters(query, filters: Sequence[ColumnFilter]):
        for f in filters:
            if f.op == "eq":
                query = query.eq(f.column, f.value)
            else:
                query = query.not_.is_(f.column, "null")
        return query

    def _execute(self, query, operation: str, table: str) -> List[Row]:
        try:
            response = query.execute()
        except APIError as e:
            raise StoreError(operation, table, e.message) from e
        except httpx.HTTPError as e:
            raise StoreError(operation, table, str(e)) from e
        return list(response.data or [])

    # ---------- interface implementation ----------

    def select(
        self,
        table: str,
        columns: str = "*",
        filters: Sequence[ColumnFilter] = (),
        order: Optional[OrderBy] = None,
    ) -> List[Row]:
        self.logger.debug(f"select {columns} from {table} filters={list(filters)} order={order}")
        query = self._apply_filters(self.client.table(table).select(columns), filters)
        if order is not None:
            query = query.order(order.column, desc=not order.ascending)
        return self._execute(query, "select", table)

    def insert(self, table: str, rows: Sequence[Row]) -> List[Row]:
        self.logger.debug(f"insert {len(rows)} row(s) into {table}")
        query = self.client.table(table).insert(list(rows))
        return self._execute(query, "insert", table)

    def update(self, table: str, patch: Row, filters: Sequence[ColumnFilter]) -> List[Row]:
        self.logger.debug(f"update {table} set {sorted(patch)} filters={list(filters)}")
        query = self._apply_filters(self.client.table(table).update(patch), filters)
        return self._execute(query, "update", table)

    def delete(self, table: str, filters: Sequence[ColumnFilter]) -> List[Row]:
        self.logger.debug(f"delete from {table} filters={list(filters)}")
        query = self._apply_filters(self.client.table(table).delete(), filters)
        return self._execute(query, "delete", table)
