"""Per-control loading flag: one outstanding AI request per initiating control."""
from __future__ import annotations
import logging
from contextlib import contextmanager
from threading import Lock

from grocer.utilities.errors import RequestInProgress

logger = logging.getLogger(__name__)


class InFlightGuard:
    def __init__(self, name: str):
        self.name = name
        self._lock = Lock()

    @property
    def loading(self) -> bool:
        return self._lock.locked()

    @contextmanager
    def hold(self):
        if not self._lock.acquire(blocking=False):
            logger.info("Rejected duplicate %s request while one is outstanding", self.name)
            raise RequestInProgress(f"A {self.name} request is already in progress.")
        try:
            yield self
        finally:
            # Loading state resets on success and on failure alike
            self._lock.release()


__all__ = ['InFlightGuard']
