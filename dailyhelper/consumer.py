"""Endless loop that fetches events and hands them to a processor."""

from __future__ import annotations

import logging
import threading
import time
from typing import NoReturn

from dailyhelper.events import Event, Fetcher, Processor

log = logging.getLogger(__name__)

_IDLE_DELAY = 1


class Consumer:
    """Pulls events in batches and processes each batch concurrently."""

    def __init__(self, fetcher: Fetcher, processor: Processor, batch_size: int) -> None:
        self.fetcher = fetcher
        self.processor = processor
        self.batch_size = batch_size

    def start(self) -> NoReturn:
        """Run forever, fetching and processing events."""
        while True:
            try:
                events = self.fetcher.fetch(self.batch_size)
            except Exception as exc:
                log.error("[ERR] consumer: %s", exc)
                continue

            if not events:
                time.sleep(_IDLE_DELAY)
                continue

            self.handle_events(events)

    def handle_events(self, events: list[Event]) -> None:
        """Process every event in its own thread and wait for all of them."""
        threads = [
            threading.Thread(target=self._handle_event, args=(event,), daemon=True)
            for event in events
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    def _handle_event(self, event: Event) -> None:
        log.info("got new event: %s", event.text)
        try:
            self.processor.process(event)
        except Exception as exc:
            log.error("can't handle event: %s", exc)