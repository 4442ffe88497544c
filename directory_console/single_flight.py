from __future__ import annotations

import threading
from concurrent.futures import Future
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class SingleFlight(Generic[T]):
    """Runs at most one call at a time; callers arriving mid-flight share its outcome."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._inflight: Future[T] | None = None
        self._waiters = 0

    @property
    def in_flight(self) -> bool:
        with self._lock:
            return self._inflight is not None

    @property
    def waiters(self) -> int:
        with self._lock:
            return self._waiters

    def run(self, fn: Callable[[], T]) -> T:
        with self._lock:
            future = self._inflight
            owner = future is None
            if owner:
                future = Future()
                self._inflight = future
            else:
                self._waiters += 1
        if not owner:
            try:
                return future.result()
            finally:
                with self._lock:
                    self._waiters -= 1

        try:
            result = fn()
        except BaseException as exc:
            future.set_exception(exc)
            raise
        else:
            future.set_result(result)
            return result
        finally:
            with self._lock:
                self._inflight = None
