"""
Logging configuration for the gateway.

One pipe-separated format on stdout for the whole process.
Rewrite decisions are logged by the normalization use case at DEBUG;
``log_rewrites`` turns them on without lowering the global level.
Never logs response bodies: they may carry caller data.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

REWRITE_LOGGER = "gateway.application.normalization"


def configure_logging(level: str = "INFO", log_rewrites: bool = False) -> None:
    """Configure logging for the gateway process.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        log_rewrites: Emit one DEBUG line per rewritten response.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger(REWRITE_LOGGER).setLevel(
        logging.DEBUG if log_rewrites else logging.NOTSET
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
