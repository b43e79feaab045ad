"""
Observability module.
Contains logging, metrics, and tracing setup.
"""

from jobs_rpc.observability.logging import bound_context, setup_logging
from jobs_rpc.observability.metrics import (
    MetricsCollector,
    get_metrics,
    setup_metrics,
)
from jobs_rpc.observability.tracing import create_span, get_tracer, setup_tracing

__all__ = [
    "setup_logging",
    "bound_context",
    "setup_metrics",
    "get_metrics",
    "MetricsCollector",
    "setup_tracing",
    "get_tracer",
    "create_span",
]
