"""Prometheus metrics for upstream calls."""

from prometheus_client import Counter, Histogram

upstream_latency_ms = Histogram(
    "upstream_latency_ms",
    "Upstream API call latency in milliseconds",
    ["source", "outcome"],
    buckets=[10, 50, 100, 200, 500, 1000, 2000, 4000, 8000, 16000],
)

upstream_errors_total = Counter(
    "upstream_errors_total",
    "Total upstream API call errors",
    ["source", "reason"],
)


class PrometheusUpstreamMetrics:
    """Prometheus-based upstream metrics implementation."""

    def record_latency(self, source: str, outcome: str, latency_ms: float) -> None:
        """Record upstream call latency."""
        upstream_latency_ms.labels(source=source, outcome=outcome).observe(latency_ms)

    def inc_error(self, source: str, reason: str) -> None:
        """Increment error counter."""
        upstream_errors_total.labels(source=source, reason=reason).inc()
