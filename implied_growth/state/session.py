"""Interactive calculator session - debounced inputs feeding the engine and the store"""

import logging
from dataclasses import fields, replace
from typing import Optional

from implied_growth.config import settings
from implied_growth.domain.exceptions import ComputationError, InputValidationError
from implied_growth.domain.metrics import calculate_growth_metrics
from implied_growth.domain.models import GrowthMetrics, ModelInputs, ModelVariant
from implied_growth.domain.validation import (
    FINANCIAL_ERROR_KEY,
    validate_all_inputs,
    validate_financial_logic,
)
from implied_growth.state.debounce import Debouncer
from implied_growth.state.store import VIEW_MODES, CalculatorSnapshot, CalculatorStore

logger = logging.getLogger(__name__)

INPUT_FIELDS = tuple(f.name for f in fields(ModelInputs))


class CalculatorSession:
    """
    Owns one calculator's store and recalculates after input settles.

    Flow per recalculation:
    1. Validate fields and financial logic for the configured variant
    2. On errors, publish them with metrics=None (no stale result survives)
    3. Otherwise compute GrowthMetrics from scratch and publish with no errors

    A published snapshot's metrics are always None or computed from that
    snapshot's inputs: changing an input discards the previous result, and a
    recalculation whose inputs were replaced mid-flight publishes nothing.
    """

    def __init__(
        self,
        store: Optional[CalculatorStore] = None,
        variant: Optional[ModelVariant] = None,
        debounce_seconds: Optional[float] = None,
        horizon_years: Optional[int] = None,
        initial_inputs: Optional[ModelInputs] = None,
    ):
        if store is None:
            initial = CalculatorSnapshot(inputs=initial_inputs) if initial_inputs else None
            store = CalculatorStore(initial)
        self.store = store
        self.variant = variant or settings.model_variant
        self.horizon_years = horizon_years if horizon_years is not None else settings.projection_years
        wait = debounce_seconds if debounce_seconds is not None else settings.debounce_seconds
        self._debounced_recalculate = Debouncer(self.recalculate, wait)

        # Initial calculation with the starting inputs
        self.recalculate()

    @property
    def snapshot(self) -> CalculatorSnapshot:
        return self.store.snapshot

    def set_input(self, field: str, value: Optional[float]) -> None:
        """Record a raw input, drop the previous result, schedule a recalculation"""
        if field not in INPUT_FIELDS:
            raise ValueError(f"Unknown input field: {field}")

        inputs = replace(self.store.snapshot.inputs, **{field: value})
        self.store.update(inputs=inputs, metrics=None)
        self._debounced_recalculate()

    def set_view_mode(self, view_mode: str) -> None:
        if view_mode not in VIEW_MODES:
            raise ValueError(f"view_mode must be one of {VIEW_MODES}, got {view_mode!r}")
        self.store.update(view_mode=view_mode)

    def recalculate(self) -> Optional[GrowthMetrics]:
        """
        Recalculate from the current inputs.

        Returns:
            The published metrics, or None when inputs are invalid or were
            replaced while calculating (the pending debounced call then wins)
        """
        inputs = self.store.snapshot.inputs

        errors = validate_all_inputs(inputs, self.variant, tolerance=settings.d1_tolerance)
        if errors:
            return self._withhold(inputs, errors)

        try:
            metrics = calculate_growth_metrics(
                inputs,
                variant=self.variant,
                horizon_years=self.horizon_years,
                tolerance=settings.d1_tolerance,
            )
        except InputValidationError as e:
            return self._withhold(inputs, e.errors)
        except ComputationError as e:
            return self._withhold(inputs, {"computation": str(e)})

        if not metrics.growth.is_valid:
            message = validate_financial_logic(
                metrics.growth.implied_growth_decimal, inputs.required_return_decimal
            )
            return self._withhold(inputs, {FINANCIAL_ERROR_KEY: message})

        if self.store.update_if_inputs(inputs, errors={}, metrics=metrics) is None:
            logger.debug("Stale calculation dropped")
            return None
        return metrics

    def _withhold(self, inputs: ModelInputs, errors) -> None:
        logger.debug("Calculation withheld", extra={"error_fields": sorted(errors)})
        self.store.update_if_inputs(inputs, errors=errors, metrics=None)
        return None

    def flush(self) -> bool:
        """Run a pending recalculation immediately"""
        return self._debounced_recalculate.flush()

    def close(self) -> None:
        self._debounced_recalculate.cancel()
