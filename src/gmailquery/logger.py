import logging
from typing import Optional

from gmailquery.settings import settings as query_settings

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def resolve_level(level: Optional[str]) -> int:
    """Map a level name onto a `logging` level, falling back to INFO."""
    return _LEVELS.get((level or "").upper(), logging.INFO)


def setup_global_logging(level: str = "INFO") -> None:
    """Configure the root logger once for the whole package.

    Args:
        level: Log level name (e.g., "DEBUG", "INFO")
    """
    global _configured
    if _configured:
        return
    logging.basicConfig(level=resolve_level(level), format=_FORMAT)
    _configured = True


class Logger:
    """Thin wrapper over standard logging.

    `.message(text)` logs at whatever level LOG_LEVEL names, so progress
    messages show up without forcing DEBUG for the whole process.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        if not _configured:
            setup_global_logging(query_settings.LOG_LEVEL)
        self._logger = logging.getLogger(name or __name__)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def message(self, msg: str, *args, **kwargs) -> None:
        self._logger.log(resolve_level(query_settings.LOG_LEVEL), msg, *args, **kwargs)
