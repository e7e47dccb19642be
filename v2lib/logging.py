"""structlog setup for applications embedding the library.

Library modules only call structlog.get_logger(); configuring output is
left to the application.
"""

import logging

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog console output.

    Args:
        verbose: Log at DEBUG (pair addresses, reserves, per-hop quotes)
                 instead of INFO
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )
