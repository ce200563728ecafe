"""
Feedback Timer

Cancellable delayed callback used to auto-clear the invalid-guess flag.
At most one clear is pending per timer; scheduling again replaces it.
"""

import threading
from typing import Callable

Scheduler = Callable[[float, Callable[[], None]], object]
"""Starts ``callback`` after ``delay`` seconds and returns a handle with ``cancel()``."""


def threading_scheduler(delay: float, callback: Callable[[], None]) -> threading.Timer:
    """Default scheduler backed by a daemon ``threading.Timer``."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class FeedbackTimer:
    """Owns a single pending delayed callback."""

    def __init__(self, delay: float, scheduler: Scheduler = threading_scheduler):
        self.delay = delay
        self._scheduler = scheduler
        self._handle = None
        self._token = None
        self._lock = threading.RLock()

    @property
    def lock(self):
        """Held while a callback runs; hold it to change state the callback touches."""
        return self._lock

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start(self, callback: Callable[[], None]) -> None:
        """Schedules ``callback``, cancelling whatever was scheduled before."""
        with self._lock:
            self._cancel_locked()
            token = object()

            def fire():
                with self._lock:
                    # A cancelled or replaced timer must not fire
                    if self._token is not token:
                        return
                    self._handle = None
                    self._token = None
                    callback()

            self._token = token
            self._handle = self._scheduler(self.delay, fire)

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    def _cancel_locked(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._token = None
