"""Polling loop: fetch the latest blob, store it, sleep, repeat."""

from __future__ import annotations

import enum
import logging
import signal
import threading
from typing import Optional

from pydantic import ValidationError

from .config import Settings
from .db import connect
from .errors import DatabaseConnectionError, FetchError, PersistError, SchemaError
from .fetcher import BlobFetcher
from .repository import BlobRepository
from .utils import configure_logging

logger = logging.getLogger(__name__)


class CycleOutcome(enum.Enum):
    INSERTED = "inserted"
    DUPLICATE = "duplicate"
    EMPTY = "empty"
    FETCH_FAILED = "fetch_failed"
    PERSIST_FAILED = "persist_failed"


class BlobIngestor:
    """Runs fetch-then-save cycles separated by a fixed pause.

    A failed fetch or save is logged and the cycle ends there; the next cycle
    starts after the usual pause.
    """

    def __init__(self, fetcher: BlobFetcher, repository: BlobRepository, poll_interval: float = 12.0) -> None:
        self.fetcher = fetcher
        self.repository = repository
        self.poll_interval = poll_interval

    def run_once(self) -> CycleOutcome:
        try:
            blobs = self.fetcher.fetch()
        except FetchError as exc:
            logger.error("Error fetching blobs: %s", exc)
            return CycleOutcome.FETCH_FAILED

        if not blobs:
            logger.debug("No blob returned")
            return CycleOutcome.EMPTY

        blob = blobs[0]
        try:
            inserted = self.repository.save(blob)
        except PersistError as exc:
            logger.error("Error saving blob to database: %s", exc)
            return CycleOutcome.PERSIST_FAILED

        if inserted:
            logger.info("Successfully saved blob ID %d (height %d)", blob.id, blob.height)
            return CycleOutcome.INSERTED
        logger.debug("Blob ID %d already stored", blob.id)
        return CycleOutcome.DUPLICATE

    def run(self, stop_event: Optional[threading.Event] = None) -> None:
        """Cycle until ``stop_event`` is set. Setting it also cuts the pause short."""

        stop_event = stop_event or threading.Event()
        logger.info("Starting ingestion loop (interval: %ss)", self.poll_interval)
        while not stop_event.is_set():
            self.run_once()
            stop_event.wait(self.poll_interval)
        logger.info("Ingestion loop stopped")


def _install_signal_handlers(stop_event: threading.Event) -> None:
    def _stop(signum, frame):
        logger.info("Received %s, shutting down", signal.Signals(signum).name)
        stop_event.set()

    signal.signal(signal.SIGINT, _stop)
    signal.signal(signal.SIGTERM, _stop)


def main(settings: Optional[Settings] = None) -> int:
    """Entrypoint for blob ingestion. Returns the process exit status."""

    if settings is None:
        try:
            settings = Settings()
        except ValidationError as exc:
            configure_logging()
            logger.critical("Invalid configuration: %s", exc)
            return 1
    configure_logging(settings.log_level)

    try:
        engine = connect(settings.sqlalchemy_url)
    except DatabaseConnectionError as exc:
        logger.critical("Could not connect to the database: %s", exc)
        return 1

    try:
        repository = BlobRepository(engine)
        repository.ensure_schema()
    except (SchemaError, ValueError) as exc:
        logger.critical("Could not create table: %s", exc)
        engine.dispose()
        return 1

    fetcher = BlobFetcher(settings)

    stop_event = threading.Event()
    _install_signal_handlers(stop_event)
    try:
        BlobIngestor(fetcher, repository, settings.poll_interval).run(stop_event)
    finally:
        fetcher.close()
        engine.dispose()
    return 0
