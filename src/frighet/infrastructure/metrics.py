"""
Application Metrics.

In-process, Prometheus-compatible counters and histograms.
Values live only as long as the process.
"""

import time
from collections import defaultdict
from threading import Lock
from typing import Dict, List, Tuple

from flask import Flask, Response, g, request


LabelsKey = Tuple[Tuple[str, str], ...]


def _labels_key(labels: Dict[str, str]) -> LabelsKey:
    return tuple(sorted(labels.items()))


def _label_str(key: LabelsKey, **more: str) -> str:
    pairs = list(key) + sorted(more.items())
    if not pairs:
        return ""
    return "{" + ",".join(f'{k}="{v}"' for k, v in pairs) + "}"


class Counter:
    """A monotonically increasing counter metric."""

    kind = "counter"

    def __init__(self, name: str, description: str) -> None:
        self.name = name
        self.description = description
        self._values: Dict[LabelsKey, float] = defaultdict(float)
        self._lock = Lock()

    def inc(self, value: float = 1.0, **labels: str) -> None:
        """Increment the counter."""
        with self._lock:
            self._values[_labels_key(labels)] += value

    def samples(self) -> List[str]:
        with self._lock:
            return [
                f"{self.name}{_label_str(key)} {value}"
                for key, value in sorted(self._values.items())
            ]


class Histogram:
    """A histogram metric for tracking distributions."""

    kind = "histogram"

    DEFAULT_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)

    def __init__(
        self,
        name: str,
        description: str,
        buckets: tuple = DEFAULT_BUCKETS,
    ) -> None:
        self.name = name
        self.description = description
        self.buckets = buckets
        self._counts: Dict[LabelsKey, Dict[float, int]] = defaultdict(lambda: defaultdict(int))
        self._sums: Dict[LabelsKey, float] = defaultdict(float)
        self._totals: Dict[LabelsKey, int] = defaultdict(int)
        self._lock = Lock()

    def observe(self, value: float, **labels: str) -> None:
        """Record an observation."""
        key = _labels_key(labels)
        with self._lock:
            self._sums[key] += value
            self._totals[key] += 1
            for bucket in self.buckets:
                if value <= bucket:
                    self._counts[key][bucket] += 1

    def samples(self) -> List[str]:
        lines = []
        with self._lock:
            for key in sorted(self._totals):
                for bucket in self.buckets:
                    lines.append(
                        f"{self.name}_bucket{_label_str(key, le=str(bucket))} "
                        f"{self._counts[key][bucket]}"
                    )
                lines.append(f"{self.name}_bucket{_label_str(key, le='+Inf')} {self._totals[key]}")
                lines.append(f"{self.name}_sum{_label_str(key)} {self._sums[key]}")
                lines.append(f"{self.name}_count{_label_str(key)} {self._totals[key]}")
        return lines


class MetricsRegistry:
    """Registry for all application metrics."""

    def __init__(self) -> None:
        # HTTP metrics
        self.http_requests_total = Counter(
            "http_requests_total",
            "Total number of HTTP requests",
        )
        self.http_request_duration_seconds = Histogram(
            "http_request_duration_seconds",
            "HTTP request latency in seconds",
        )

        # Business metrics
        self.submissions_total = Counter(
            "submissions_total",
            "Contact form submissions by outcome",
        )
        self.estimates_total = Counter(
            "estimates_total",
            "Estimate previews served",
        )

        # External service metrics
        self.external_requests_total = Counter(
            "external_requests_total",
            "Total number of external service requests",
        )

    def all(self) -> list:
        return [
            self.http_requests_total,
            self.http_request_duration_seconds,
            self.submissions_total,
            self.estimates_total,
            self.external_requests_total,
        ]

    def to_prometheus_format(self) -> str:
        """Export metrics in Prometheus text format."""
        lines = []
        for metric in self.all():
            lines.append(f"# HELP {metric.name} {metric.description}")
            lines.append(f"# TYPE {metric.name} {metric.kind}")
            lines.extend(metric.samples())
        return "\n".join(lines) + "\n"


# Global metrics registry
_metrics = MetricsRegistry()


def get_metrics() -> MetricsRegistry:
    """Get global metrics registry."""
    return _metrics


def setup_metrics_middleware(app: Flask) -> None:
    """
    Setup Flask middleware for automatic HTTP metrics collection.

    Args:
        app: Flask application instance.
    """
    metrics = get_metrics()

    @app.before_request
    def before_request() -> None:
        g.metrics_start_time = time.time()

    @app.after_request
    def after_request(response):
        duration = time.time() - g.get("metrics_start_time", time.time())
        endpoint = request.endpoint or "unknown"

        metrics.http_requests_total.inc(
            method=request.method,
            endpoint=endpoint,
            status=str(response.status_code),
        )
        metrics.http_request_duration_seconds.observe(
            duration,
            method=request.method,
            endpoint=endpoint,
        )
        return response


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint handler."""
    return Response(
        get_metrics().to_prometheus_format(),
        mimetype="text/plain; charset=utf-8",
    )
