import logging
import sys

import structlog

from .config import get_config
from .errors import ConfigError


def _resolve_level(level) -> int:
    """Accept a level name ("debug") or number (10, "10")."""
    name = str(level).strip().upper()
    if name.isdigit():
        return int(name)
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ConfigError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level=None, fmt: str = None) -> None:
    """Route structlog through stdlib logging on stdout.

    Level and renderer default to the `logging` section of the config.
    `fmt` is either "json" or "console".
    """
    log_config = get_config().logging
    level = _resolve_level(level if level is not None else log_config.get('level', 'INFO'))
    fmt = fmt or log_config.get('format', 'json')

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    logging.getLogger().setLevel(level)

    renderer = structlog.dev.ConsoleRenderer() if fmt == "console" else structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
