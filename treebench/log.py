import logging
import sys
import structlog


def _stderr_logger(*_args) -> structlog.PrintLogger:
    """looks up sys.stderr on every call so redirected streams are picked up"""

    return structlog.PrintLogger(file=sys.stderr)


def configure(level: int = logging.INFO) -> None:
    """key/value events to stderr, filtered by level"""

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
    )
