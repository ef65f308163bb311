from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Sequence

import pandas as pd

from ..interface import DataStore, Row
from ..models import ColumnFilter, OrderBy
from ...config import get_config
from ...errors import StoreError
from ...logging import get_logger


class CsvDataStore(DataStore):
    """
    CSV-backed implementation for local development and tests.
    - One `<table>.csv` per table under `data_dir`.
    - Every call re-reads the file and every mutation writes it back,
      so the page behaves as it would against a remote store.
    - CSV has no null: an empty cell is read back as "" and counts as
      null for `not_null` filters.
    """

    def __init__(self, data_dir: str | Path = None) -> None:
        if data_dir is None:
            config = get_config()
            data_dir = config.data_dir

        self.data_dir = Path(data_dir)
        self.logger = get_logger(__name__)

        # If the path is relative, make it relative to the repository root
        if not self.data_dir.is_absolute():
            current = Path.cwd()
            repo_root = None

            # Look up the directory tree for pyproject.toml
            for parent in [current] + list(current.parents):
                if (parent / "pyproject.toml").exists():
                    repo_root = parent
                    break

            if repo_root:
                self.data_dir = repo_root / self.data_dir
            else:
                # Fallback to current directory
                self.data_dir = current / self.data_dir

        if not self.data_dir.exists():
            raise FileNotFoundError(
                f"Data directory not found: {self.data_dir}\n"
                f"Please either:\n"
                f"  1. Generate sample data: python -m adminpage.seed_data\n"
                f"  2. Set DATA_DIR environment variable to point to your data directory\n"
                f"  3. Create a .env file with DATA_DIR=/path/to/your/data"
            )

    # ---------- file helpers ----------

    def _path(self, table: str) -> Path:
        return self.data_dir / f"{table}.csv"

    def _read(self, table: str, operation: str) -> pd.DataFrame:
        path = self._path(table)
        if not path.exists():
            return pd.DataFrame(columns=["id"])
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except Exception as e:
            raise StoreError(operation, table, f"could not read {path}: {e}") from e
        if "id" in df.columns and not df.empty:
            try:
                df["id"] = df["id"].astype(int)
            except ValueError as e:
                raise StoreError(operation, table, f"non-integer id in {path}") from e
        return df

    def _write(self, table: str, df: pd.DataFrame, operation: str) -> None:
        path = self._path(table)
        try:
            df.to_csv(path, index=False)
        except Exception as e:
            raise StoreError(operation, table, f"could not write {path}: {e}") from e

    @staticmethod
    def _cell(value: Any) -> str:
        return "" if value is None else str(value)

    @staticmethod
    def _records(df: pd.DataFrame) -> List[Row]:
        return df.to_dict(orient="records")

    def _mask(self, df: pd.DataFrame, filters: Sequence[ColumnFilter], table: str, operation: str) -> pd.Series:
        mask = pd.Series(True, index=df.index)
        for f in filters:
            if f.column not in df.columns:
                if df.empty:
                    return pd.Series(False, index=df.index)
                raise StoreError(operation, table, f"unknown column '{f.column}'")
            column = df[f.column].astype(str)
            if f.op == "eq":
                mask &= (column == self._cell(f.value))
            else:
                mask &= (column != "")
        return mask

    # ---------- interface implementation ----------

    def select(
        self,
        table: str,
        columns: str = "*",
        filters: Sequence[ColumnFilter] = (),
        order: Optional[OrderBy] = None,
    ) -> List[Row]:
        self.logger.debug(f"select {columns} from {table} filters={list(filters)} order={order}")
        df = self._read(table, "select")
        if df.empty:
            return []
        df = df.loc[self._mask(df, filters, table, "select")]

        if order is not None:
            if order.column not in df.columns:
                raise StoreError("select", table, f"unknown order column '{order.column}'")
            df = df.sort_values(order.column, ascending=order.ascending, kind="stable")

        if columns.strip() != "*":
            wanted = [c.strip() for c in columns.split(",") if c.strip()]
            unknown = [c for c in wanted if c not in df.columns]
            if unknown:
                raise StoreError("select", table, f"unknown columns {unknown}")
            df = df[wanted]

        return self._records(df)

    def insert(self, table: str, rows: Sequence[Row]) -> List[Row]:
        self.logger.debug(f"insert {len(rows)} row(s) into {table}")
        df = self._read(table, "insert")
        next_id = int(df["id"].max()) + 1 if not df.empty else 1

        new_rows = []
        for row in rows:
            record = {k: self._cell(v) for k, v in row.items() if k != "id"}
            record["id"] = next_id
            next_id += 1
            new_rows.append(record)

        new_df = pd.DataFrame(new_rows)
        combined = new_df if df.empty else pd.concat([df, new_df], ignore_index=True)
        combined = combined.fillna("")
        combined["id"] = combined["id"].astype(int)
        # Keep id as the leading column
        combined = combined[["id"] + [c for c in combined.columns if c != "id"]]
        self._write(table, combined, "insert")

        ids = [r["id"] for r in new_rows]
        return self._records(combined.loc[combined["id"].isin(ids)])

    def update(self, table: str, patch: Row, filters: Sequence[ColumnFilter]) -> List[Row]:
        self.logger.debug(f"update {table} set {sorted(patch)} filters={list(filters)}")
        if "id" in patch:
            raise StoreError("update", table, "id is immutable")
        df = self._read(table, "update")
        mask = self._mask(df, filters, table, "update")
        for column, value in patch.items():
            if column not in df.columns:
                df[column] = ""
            df.loc[mask, column] = self._cell(value)
        if mask.any():
            self._write(table, df, "update")
        return self._records(df.loc[mask])

    def delete(self, table: str, filters: Sequence[ColumnFilter]) -> List[Row]:
        self.logger.debug(f"delete from {table} filters={list(filters)}")
        df = self._read(table, "delete")
        mask = self._mask(df, filters, table, "delete")
        deleted = self._records(df.loc[mask])
        if deleted:
            self._write(table, df.loc[~mask], "delete")
        return deleted
