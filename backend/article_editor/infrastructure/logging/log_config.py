"""Centralized logging configuration.

One root handler on stderr, then per-category levels taken from Settings so
that SQL echo or uvicorn access lines can be turned down without touching
the export pipeline (and the other way round).

Usage:
    from article_editor.infrastructure.logging.log_config import setup_logging
    setup_logging(settings)   # once, from the FastAPI lifespan
"""

import logging
import sys

from article_editor.config import Settings, get_settings

LOG_FORMAT = "%(levelname)-8s %(name)s — %(message)s"

# Settings field → loggers whose level it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_export": (
        "ExportService",
        "article_editor.application.services.export_service",
        "article_editor.infrastructure.storage",
    ),
}


def _parse_level(raw: str) -> int:
    """Level name → logging constant; unknown names fall back to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO


def _configure_root(level: int) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    # uvicorn installs its own handlers; tests and scripts may have none
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply root and per-category levels. Returns the level set per logger name."""
    settings = settings or get_settings()
    _configure_root(_parse_level(settings.log_level))

    applied: dict[str, int] = {}
    for field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, field))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s sql=%s uvicorn=%s export=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_uvicorn,
        settings.log_level_export,
    )
    return applied
