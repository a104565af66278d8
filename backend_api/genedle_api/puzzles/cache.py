from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Hashable, Optional

logger = logging.getLogger(__name__)


class _Flight:
    """A computation in progress for one key; waiters block on ``done``."""

    __slots__ = ("done", "value", "error")

    def __init__(self) -> None:
        self.done = threading.Event()
        self.value: Any = None
        self.error: Optional[BaseException] = None


# PUBLIC_INTERFACE
class MemoCache:
    """Thread-safe keyed result cache with per-key call coalescing.

    ``get_or_compute(key, compute)`` returns the stored value for ``key`` or
    invokes ``compute`` exactly once, even when several threads ask for the
    same missing key at the same time. Every concurrent caller receives the
    single outcome, including a raised exception.

    Parameters:
        cache_failures: when true, an exception raised by ``compute`` is stored
            and re-raised on every later call for that key. When false (the
            default) the key is released after the failed flight so the next
            call computes again.
    """

    def __init__(self, cache_failures: bool = False) -> None:
        self.cache_failures = cache_failures
        self._lock = threading.Lock()
        self._values: Dict[Hashable, Any] = {}
        self._errors: Dict[Hashable, BaseException] = {}
        self._flights: Dict[Hashable, _Flight] = {}

    # PUBLIC_INTERFACE
    def get_or_compute(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        """Return the cached result for ``key``, computing it at most once."""
        with self._lock:
            if key in self._values:
                logger.debug("cache hit for %r", key)
                return self._values[key]
            if key in self._errors:
                logger.debug("cached failure for %r", key)
                raise self._errors[key]
            flight = self._flights.get(key)
            owner = flight is None
            if owner:
                flight = _Flight()
                self._flights[key] = flight

        if not owner:
            flight.done.wait()
            if flight.error is not None:
                raise flight.error
            return flight.value

        logger.debug("cache miss for %r", key)
        try:
            value = compute()
        except BaseException as exc:
            # Interrupts and cancellations release the key too, or waiters hang.
            with self._lock:
                flight.error = exc
                if self.cache_failures and isinstance(exc, Exception):
                    self._errors[key] = exc
                del self._flights[key]
            flight.done.set()
            raise

        with self._lock:
            flight.value = value
            self._values[key] = value
            del self._flights[key]
        flight.done.set()
        return value

    def invalidate(self, key: Hashable) -> None:
        """Drop a stored value or failure; an in-flight computation is unaffected."""
        with self._lock:
            self._values.pop(key, None)
            self._errors.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._values.clear()
            self._errors.clear()

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._values or key in self._errors

    def __len__(self) -> int:
        with self._lock:
            return len(self._values) + len(self._errors)
