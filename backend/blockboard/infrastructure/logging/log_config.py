"""Logging setup for the API process.

Each library category (database driver, outbound HTTP, object storage,
uvicorn) gets its own level from Settings, so chatty loggers such as
``botocore`` can be turned down without hiding application messages.

Call ``setup_logging(settings)`` once, from the application lifespan.
"""

import logging
import sys

from blockboard.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# (Settings field, loggers governed by it)
LOG_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("log_level_sql", ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg")),
    ("log_level_http", ("httpx", "httpcore")),
    ("log_level_storage", ("botocore", "aiobotocore", "aioboto3", "urllib3")),
    ("log_level_uvicorn", ("uvicorn", "uvicorn.access", "uvicorn.error")),
)


def _parse_level(raw: str) -> int:
    """Level name to ``logging`` constant; unknown names fall back to INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def category_levels(settings: Settings) -> dict[str, int]:
    """Logger name -> numeric level for every configured category."""
    levels: dict[str, int] = {}
    for field_name, logger_names in LOG_CATEGORIES:
        level = _parse_level(getattr(settings, field_name))
        levels.update(dict.fromkeys(logger_names, level))
    return levels


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # uvicorn installs its own handlers; plain scripts and tests do not
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for name, level in category_levels(settings).items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s %s",
        settings.log_level,
        " ".join(f"{field}={getattr(settings, field)}" for field, _ in LOG_CATEGORIES),
    )
