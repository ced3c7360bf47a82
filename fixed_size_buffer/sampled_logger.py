"""Sampled logger for high-frequency log messages.

Buffers that overwrite on every write would flood the log with one line per
dropped value, so drops are only reported at configurable intervals.
"""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


def make_sampled_logger(
    log_format: str,
    log_interval: int = 1000,
    target_logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> Callable[..., None]:
    """Create a sampled logger that logs the first event and every Nth event.

    Args:
        log_format: Format string for the log message. First placeholder receives
                    the event count, remaining placeholders receive format_args.
        log_interval: Log every Nth event (default 1000). Values below 1 are
                      treated as 1, so every event is logged.
        target_logger: Logger instance to use (default: module logger)
        level: Log level to use (default: DEBUG)

    Returns:
        A function: (event_count, *format_args) -> None
    """
    interval = max(1, log_interval)
    _logger = target_logger or logger

    def log_sampled(event_count: int, *format_args: object) -> None:
        if event_count != 1 and event_count % interval != 0:
            return
        if not _logger.isEnabledFor(level):
            return
        _logger.log(level, log_format, event_count, *format_args)

    return log_sampled
