"""Logging setup from config (logging.level, logging.format or LOGGING_* env).

Merge decisions are logged at INFO: skip reasons per gate, merges and
branch deletions. Eligibility misses (unlabelled or unmergeable PRs) are
DEBUG since every PR event produces one. HTTP connection logs from
urllib3 are only shown at DEBUG.
"""

import logging
from typing import IO

from mergewhengreen.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names give INFO."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


def configure_logging(config: LoggingConfig, stream: IO[str] | None = None) -> None:
    """Apply config to the root logger, replacing existing handlers."""
    level = resolve_level(config.level)
    logging.basicConfig(
        level=level,
        format=config.format or DEFAULT_FORMAT,
        stream=stream,
        force=True,
    )
    logging.getLogger("urllib3").setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
