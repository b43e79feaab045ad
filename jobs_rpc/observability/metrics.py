"""
Prometheus metrics collection.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

from jobs_rpc.constants import (
    METRIC_PIPELINE_COMMANDS,
    METRIC_PIPELINES_DECLARED,
    METRIC_RPC_LATENCY,
    METRIC_RPC_REQUESTS,
)

# Global metrics instance
_metrics: "MetricsCollector | None" = None


class MetricsCollector:
    """
    Prometheus metrics collector for the jobs client.

    Collects metrics for:
    - RPC calls by method and outcome
    - RPC call latency
    - Pipeline declarations
    - Batch pipeline commands
    """

    def __init__(self, registry: CollectorRegistry | None = None):
        """
        Initialize the metrics collector.

        Args:
            registry: Optional custom registry. Uses default if not provided.
        """
        self._registry = registry or REGISTRY

        self.rpc_requests = Counter(
            METRIC_RPC_REQUESTS,
            "Total number of RPC calls issued",
            ["method", "status"],
            registry=self._registry,
        )

        self.rpc_latency = Histogram(
            METRIC_RPC_LATENCY,
            "RPC call latency in seconds",
            ["method"],
            buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
            registry=self._registry,
        )

        self.pipelines_declared = Counter(
            METRIC_PIPELINES_DECLARED,
            "Total number of pipelines declared",
            ["driver"],
            registry=self._registry,
        )

        self.pipeline_commands = Counter(
            METRIC_PIPELINE_COMMANDS,
            "Total number of pipelines targeted by batch commands",
            ["command"],
            registry=self._registry,
        )

    def record_rpc_call(self, method: str, status: str, duration_seconds: float) -> None:
        """Record an RPC call."""
        self.rpc_requests.labels(method=method, status=status).inc()
        self.rpc_latency.labels(method=method).observe(duration_seconds)

    def record_pipeline_declared(self, driver: str) -> None:
        """Record a pipeline declaration."""
        self.pipelines_declared.labels(driver=driver).inc()

    def record_pipeline_command(self, command: str, count: int = 1) -> None:
        """Record a batch command over ``count`` pipelines."""
        self.pipeline_commands.labels(command=command).inc(count)

    def get_metrics(self) -> bytes:
        """Get all metrics in Prometheus format."""
        return generate_latest(self._registry)

    def get_content_type(self) -> str:
        """Get the content type for metrics exposition."""
        return CONTENT_TYPE_LATEST


def setup_metrics() -> MetricsCollector:
    """
    Set up and return the metrics collector.

    Returns:
        MetricsCollector: The metrics collector instance.
    """
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics


def get_metrics() -> MetricsCollector:
    """
    Get the metrics collector instance, creating it on first use.

    Returns:
        MetricsCollector: The metrics collector instance.
    """
    if _metrics is None:
        return setup_metrics()
    return _metrics
