import logging
import sys
from typing import Optional


DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _BelowLevelFilter(logging.Filter):
    def __init__(self, threshold: int) -> None:
        super().__init__()
        self._threshold = threshold

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._threshold


def configure_split_stream_logging(
    *,
    level: int = logging.WARNING,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
) -> None:
    """Route log records by severity:

    - records below ``stderr_level`` go to stdout
    - records at or above ``stderr_level`` go to stderr

    The validator writes its diagnostics to stderr and its summary line to
    stdout, so log output follows the same split.
    """

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter(DEFAULT_FORMAT)

    stderr_level = max(stderr_level, logging.DEBUG)

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_BelowLevelFilter(stderr_level))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    root.addHandler(stdout_handler)
    root.addHandler(stderr_handler)


def parse_level(name: str, default: int = logging.WARNING) -> int:
    """Translate a level name such as ``"debug"`` into a logging level."""
    value = getattr(logging, str(name).upper(), None)
    return value if isinstance(value, int) else default
