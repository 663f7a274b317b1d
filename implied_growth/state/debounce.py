"""Timer-based call coalescing for bursty input"""

import threading
from typing import Any, Callable, Dict, Optional, Tuple


class Debouncer:
    """
    Delay calls to fn until wait_seconds pass without another call.

    Each call cancels the pending timer and schedules a new one with the
    latest arguments, so a burst of calls runs fn once.
    """

    def __init__(self, fn: Callable[..., Any], wait_seconds: float):
        if wait_seconds < 0:
            raise ValueError(f"wait_seconds must be non-negative, got {wait_seconds}")
        self._fn = fn
        self.wait_seconds = wait_seconds
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._pending_call: Optional[Tuple[Tuple[Any, ...], Dict[str, Any]]] = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        return self._pending_call is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending_call = (args, kwargs)
            self._timer = threading.Timer(self.wait_seconds, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            # A newer call or cancel() superseded this timer
            if generation != self._generation or self._pending_call is None:
                return
            args, kwargs = self._take_pending()
        self._fn(*args, **kwargs)

    def _take_pending(self) -> Tuple[Tuple[Any, ...], Dict[str, Any]]:
        call = self._pending_call
        self._pending_call = None
        self._timer = None
        return call

    def cancel(self) -> None:
        """Drop the pending call, if any"""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending_call = None
            self._timer = None

    def flush(self) -> bool:
        """Run the pending call now; returns False if nothing was pending"""
        with self._lock:
            if self._pending_call is None:
                return False
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            args, kwargs = self._take_pending()
        self._fn(*args, **kwargs)
        return True
