from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. Defaults are provided where appropriate.
    """
    # Supabase
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    supabase_service_role_key: Optional[str] = None

    # Application
    app_env: str = "local"
    log_level: str = "DEBUG"

    # Data store
    store_backend: Literal["csv", "supabase"] = "csv"
    products_table: str = "products"
    data_dir: str = "sample_data"

    # Seed data settings
    seed_rows: int = 20
    seed_value: int = 42

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
