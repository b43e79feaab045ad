"""
Pytest configuration and shared fixtures.
"""

from collections.abc import Callable
from typing import Any

import pytest
from prometheus_client import CollectorRegistry

from jobs_rpc.config import Settings
from jobs_rpc.exceptions import GatewayError
from jobs_rpc.jobs import Jobs
from jobs_rpc.observability.metrics import MetricsCollector


class FakeGateway:
    """
    In-process RPC gateway for tests.

    Each mapped method returns either a fixed value or the result of calling
    the mapped callable with the request payload. Unmapped methods fail the
    way an unknown remote service does.
    """

    def __init__(self, mapping: dict[str, Any] | None = None):
        self.mapping = mapping or {}
        self.calls: list[tuple[str, Any]] = []

    def call(self, method: str, payload: Any = None) -> Any:
        self.calls.append((method, payload))

        if method not in self.mapping:
            raise GatewayError(f"rpc: can't find service {method}")

        handler = self.mapping[method]
        if callable(handler):
            return handler(payload)
        return handler

    def methods(self) -> list[str]:
        """Names of the methods called so far, in order."""
        return [method for method, _ in self.calls]


@pytest.fixture
def registry() -> CollectorRegistry:
    """Create an isolated metrics registry."""
    return CollectorRegistry()


@pytest.fixture
def metrics(registry: CollectorRegistry) -> MetricsCollector:
    """Create a metrics collector bound to the isolated registry."""
    return MetricsCollector(registry=registry)


@pytest.fixture
def make_jobs(metrics: MetricsCollector) -> Callable[..., tuple[Jobs, FakeGateway]]:
    """Factory for a facade wired to a fake gateway."""

    def factory(mapping: dict[str, Any] | None = None) -> tuple[Jobs, FakeGateway]:
        gateway = FakeGateway(mapping)
        return Jobs(gateway, metrics=metrics), gateway

    return factory


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return Settings(
        rpc_url="http://rpc.test/rpc",
        rpc_timeout_seconds=1.0,
        log_level="DEBUG",
        log_format="console",
    )
