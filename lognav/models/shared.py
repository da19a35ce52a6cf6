"""Exclusive access to the application state"""

import contextlib
import threading
from typing import Iterator

from lognav.models.app_state import AppState


class SharedState:
    """Guards the single AppState instance shared between threads.

    The state must only be touched inside `access()`, and the block must not
    sleep, wait on the network or wait on a subprocess.
    """

    def __init__(self, state: AppState | None = None) -> None:
        self._state = state if state is not None else AppState()
        self._lock = threading.Lock()

    @contextlib.contextmanager
    def access(self) -> Iterator[AppState]:
        """Hold the lock and yield the state"""
        with self._lock:
            yield self._state
