from __future__ import annotations

from typing import Literal, Optional

from .interface import DataStore
from ..config import get_config


def get_data_store(kind: Optional[Literal["csv", "supabase"]] = None) -> DataStore:
    config = get_config()
    kind = kind or config.store_backend
    if kind == "csv":
        from .backends.csv_backend import CsvDataStore
        # Reads from configured CSV folder
        return CsvDataStore(data_dir=config.data_dir)
    if kind == "supabase":
        from .backends.supabase_backend import SupabaseDataStore
        from ..supabase.auth import get_supabase_auth
        return SupabaseDataStore(get_supabase_auth().get_client())
    raise ValueError(f"Unknown data store kind: {kind}")
