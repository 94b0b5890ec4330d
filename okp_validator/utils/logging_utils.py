import logging
import sys
from typing import Optional, TextIO


DEFAULT_LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def configure_logging(
    *,
    level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure root logging with a single stderr handler.

    stdout is reserved for status lines so that scripts grepping the
    validator output never see log records, whatever the level.
    """

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter(DEFAULT_LOG_FORMAT)

    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root.addHandler(handler)


def parse_log_level(name: str, default: int = logging.WARNING) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default
