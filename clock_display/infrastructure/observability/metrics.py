"""Prometheus metrics."""

from prometheus_client import Counter

ticks_total = Counter(
    "clock_ticks_total",
    "Total number of clock ticks handled",
)

tick_failures_total = Counter(
    "clock_tick_failures_total",
    "Total number of clock ticks whose callback raised",
    ["error_code"],
)

renders_total = Counter(
    "clock_renders_total",
    "Total number of clock renders written",
)
