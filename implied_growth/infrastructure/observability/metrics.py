"""Prometheus metrics for calculation outcomes and request latency"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "implied_growth_calculations_total",
    "Total implied growth calculations",
    ["outcome"],  # valid | invalid | rejected
)

implied_growth_histogram = Histogram(
    "implied_growth_rate_percent",
    "Distribution of solved implied growth rates (percent)",
    buckets=[0.0, 1.0, 2.0, 3.0, 5.0, 7.5, 10.0, 15.0, 25.0],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(is_valid: bool, implied_growth: float) -> None:
    """Record the outcome of a calculation that reached the engine"""
    outcome = "valid" if is_valid else "invalid"
    calculation_counter.labels(outcome=outcome).inc()

    # Negative growth lands in the lowest bucket
    implied_growth_histogram.observe(implied_growth)


def record_rejection() -> None:
    """Record inputs blocked by validation"""
    calculation_counter.labels(outcome="rejected").inc()
