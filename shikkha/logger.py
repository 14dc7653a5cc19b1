"""
Application loggers
`logger` carries operational messages, `error_logger` is the channel failures are reported on
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("shikkha")
error_logger = logging.getLogger("shikkha.errors")

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once per process"""
    global _configured
    if _configured:
        return

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)

    # Reduce verbosity of third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    _configured = True
