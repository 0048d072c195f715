"""Utility helpers for the blob ingestion service."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr at ``level``."""

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
