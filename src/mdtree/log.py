"""structlog setup shared by the CLI"""

import logging
import sys

import structlog


def configure_logging(level: str = "WARNING") -> None:
    """Filter structlog output below the named level and keep stdout free for results."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
