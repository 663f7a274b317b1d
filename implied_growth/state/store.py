"""Reactive calculator store - immutable snapshots plus explicit listeners"""

import threading
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Optional

from implied_growth.domain.models import GrowthMetrics, ModelInputs

VIEW_MODES = ("chart", "table")

DEFAULT_INPUTS = ModelInputs(market_price=100.0, current_dividend=5.0, required_return=7.0)


@dataclass(frozen=True)
class CalculatorSnapshot:
    """Complete calculator state at one point in time"""

    inputs: ModelInputs = field(default_factory=lambda: DEFAULT_INPUTS)
    view_mode: str = "chart"
    errors: Dict[str, str] = field(default_factory=dict)
    metrics: Optional[GrowthMetrics] = None

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0


Listener = Callable[[CalculatorSnapshot], None]


class CalculatorStore:
    """
    Holds the current snapshot and notifies listeners on every publish.

    Snapshots are replaced, never mutated. Listeners run synchronously on the
    publishing thread, in subscription order.
    """

    def __init__(self, initial: Optional[CalculatorSnapshot] = None):
        self._snapshot = initial or CalculatorSnapshot()
        self._listeners: List[Listener] = []
        self._lock = threading.Lock()

    @property
    def snapshot(self) -> CalculatorSnapshot:
        return self._snapshot

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it"""
        with self._lock:
            self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def publish(self, snapshot: CalculatorSnapshot) -> None:
        with self._lock:
            self._snapshot = snapshot
            listeners = list(self._listeners)

        self._notify(listeners, snapshot)

    def update(self, **changes) -> CalculatorSnapshot:
        """Publish a copy of the current snapshot with the given fields replaced"""
        return self.update_if_inputs(None, **changes)

    def update_if_inputs(self, expected_inputs: Optional[ModelInputs], **changes) -> Optional[CalculatorSnapshot]:
        """
        Like update(), but only while the snapshot still holds expected_inputs.

        Read, replace and swap happen under the lock; listeners run after it
        is released. Returns None (and publishes nothing) when the inputs
        changed in the meantime. expected_inputs=None skips the check.
        """
        if "errors" in changes:
            changes["errors"] = dict(changes["errors"])

        with self._lock:
            if expected_inputs is not None and self._snapshot.inputs is not expected_inputs:
                return None
            snapshot = replace(self._snapshot, **changes)
            self._snapshot = snapshot
            listeners = list(self._listeners)

        self._notify(listeners, snapshot)
        return snapshot

    @staticmethod
    def _notify(listeners: List[Listener], snapshot: CalculatorSnapshot) -> None:
        for listener in listeners:
            listener(snapshot)
