from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator, Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

logger = logging.getLogger("routewise")


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply level and format from the observability settings."""
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="RW_LOG_LEVEL",
            expected_type="DEBUG|INFO|WARNING|ERROR|CRITICAL",
        )
    logging.basicConfig(level=level, format=config.format)
    logger.setLevel(level)


@contextmanager
def timed(log: logging.Logger, label: str) -> Iterator[None]:
    """Log how long the wrapped block took, in milliseconds."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        log.debug(f"{label} took {elapsed_ms:.2f}ms", extra={"elapsed_ms": elapsed_ms})
