import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Repair Shop API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Storage: picked once at startup, never switched at runtime
    storage_backend: Literal["sql", "keyvalue"] = "sql"
    database_url: str = "sqlite:///data/repair_shop.db"
    keyvalue_path: str = "data/repair_shop.json"   # empty → in-memory only
    keyvalue_namespace: str = "repair_shop"
    seed_demo_data: bool = False

    # User-facing messages at the transport boundary (en, pt_BR)
    locale: str = "pt_BR"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL statements
    log_level_storage: str = "INFO"          # record stores and backends
    log_level_transport: str = "INFO"        # IPC dispatcher
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        if self.storage_backend == "keyvalue" and not self.keyvalue_path:
            _config_logger.warning(
                "KEYVALUE_PATH is empty; the key-value store will not persist across restarts"
            )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
