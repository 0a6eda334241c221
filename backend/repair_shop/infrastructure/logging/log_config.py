"""Logging setup for the repair-shop backend.

Each logger category (SQL, storage, transport, uvicorn) gets its own level
from Settings, so e.g. SQL echo can be turned up while the IPC dispatcher
stays at INFO.

Usage:
    from repair_shop.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from the FastAPI lifespan
"""

import logging
import sys

from repair_shop.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field → logger names it controls
CATEGORY_LOGGERS: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_storage": (
        "repair_shop.infrastructure.database",
        "repair_shop.infrastructure.keyvalue",
        "repair_shop.application",
    ),
    "log_level_transport": ("repair_shop.presentation",),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
}


def parse_level(raw: str | None) -> int:
    """Level name → logging constant; unknown names fall back to INFO."""
    numeric = getattr(logging, (raw or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply root and per-category levels; returns the level set per logger name."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(parse_level(settings.log_level))
    if not root.handlers:
        # uvicorn normally installs its own handler
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for field_name, logger_names in CATEGORY_LOGGERS.items():
        level = parse_level(getattr(settings, field_name, None))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug(
        "Log levels: root=%s sql=%s storage=%s transport=%s uvicorn=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_storage,
        settings.log_level_transport,
        settings.log_level_uvicorn,
    )
    return applied
