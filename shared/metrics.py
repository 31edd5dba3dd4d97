"""
Shared metrics configuration for the GraphQL gateway.

All collectors live on one ``CollectorRegistry`` owned by ``MetricsCollector``.
prometheus_client guards every counter increment and histogram observation
with a lock, so a single collector can be shared by every in-flight request.
"""

import time
from contextlib import contextmanager
from typing import Any, Dict, Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    GCCollector,
    Histogram,
    Info,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

UNNAMED_OPERATION = "UnnamedOperation"


class MetricsCollector:
    """Centralized metrics collector for the gateway."""

    def __init__(self, service_name: str, registry: Optional[CollectorRegistry] = None,
                 include_default_collectors: bool = True):
        self.service_name = service_name
        self.registry = registry if registry is not None else CollectorRegistry()
        self._metrics: Dict[str, Any] = {}
        if include_default_collectors:
            ProcessCollector(registry=self.registry)
            PlatformCollector(registry=self.registry)
            GCCollector(registry=self.registry)
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up common metrics for the service."""

        self._metrics["service_info"] = Info(
            "service",
            "Service information",
            registry=self.registry
        )
        self._metrics["service_info"].info({
            "service": self.service_name,
            "version": "1.0.0"
        })

        # HTTP metrics
        self._metrics["http_requests_total"] = Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["method", "endpoint", "status_code"],
            registry=self.registry
        )

        self._metrics["http_request_duration_seconds"] = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            registry=self.registry
        )

        self._metrics["health_check_total"] = Counter(
            "health_check_total",
            "Total health check requests",
            ["status"],
            registry=self.registry
        )

        self._setup_graphql_metrics()

    def _setup_graphql_metrics(self):
        """Set up GraphQL execution metrics."""
        self._metrics["graphql_requests_total"] = Counter(
            "graphql_requests_total",
            "Total number of GraphQL requests",
            ["operationName"],
            registry=self.registry
        )

        self._metrics["graphql_response_time_seconds"] = Histogram(
            "graphql_response_time_seconds",
            "Histogram of response times for GraphQL requests",
            ["operationName"],
            registry=self.registry
        )

        self._metrics["graphql_validation_errors_total"] = Counter(
            "graphql_validation_errors_total",
            "Total number of GraphQL validation errors",
            ["operationName"],
            registry=self.registry
        )

        self._metrics["graphql_execution_errors_total"] = Counter(
            "graphql_execution_errors_total",
            "Total number of GraphQL execution errors",
            ["operationName"],
            registry=self.registry
        )

        self._metrics["graphql_field_resolve_time_seconds"] = Histogram(
            "graphql_field_resolve_time_seconds",
            "Histogram of field resolve times",
            ["fieldName", "typeName"],
            registry=self.registry
        )

    def record_http_request(self, method: str, endpoint: str, status_code: int, duration: float):
        """Record HTTP request metrics."""
        self._metrics["http_requests_total"].labels(
            method=method,
            endpoint=endpoint,
            status_code=str(status_code)
        ).inc()

        self._metrics["http_request_duration_seconds"].labels(
            method=method,
            endpoint=endpoint
        ).observe(duration)

    def record_health_check(self, status: str):
        """Record health check metrics."""
        self._metrics["health_check_total"].labels(status=status).inc()

    def record_graphql_request(self, operation_name: Optional[str]):
        self._metrics["graphql_requests_total"].labels(
            operationName=operation_name or UNNAMED_OPERATION
        ).inc()

    def record_validation_error(self, operation_name: Optional[str]):
        self._metrics["graphql_validation_errors_total"].labels(
            operationName=operation_name or UNNAMED_OPERATION
        ).inc()

    def record_execution_error(self, operation_name: Optional[str]):
        self._metrics["graphql_execution_errors_total"].labels(
            operationName=operation_name or UNNAMED_OPERATION
        ).inc()

    def record_field_resolve_time(self, field_name: str, type_name: str, duration: float):
        self._metrics["graphql_field_resolve_time_seconds"].labels(
            fieldName=field_name,
            typeName=type_name
        ).observe(duration)

    @contextmanager
    def time_operation(self, operation_name: str, **labels):
        """Context manager to time an operation into a histogram."""
        start_time = time.perf_counter()
        try:
            yield
        finally:
            duration = time.perf_counter() - start_time
            if operation_name in self._metrics:
                self._metrics[operation_name].labels(**labels).observe(duration)

    def sample_value(self, name: str, labels: Optional[Dict[str, str]] = None) -> float:
        """Current value of a sample, 0.0 when it has not been observed yet."""
        value = self.registry.get_sample_value(name, labels or {})
        return value if value is not None else 0.0

    def exposition(self) -> bytes:
        """Render the registry in the Prometheus text format."""
        return generate_latest(self.registry)

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE_LATEST


def get_metrics_collector(service_name: str, registry: Optional[CollectorRegistry] = None) -> MetricsCollector:
    """Get a metrics collector for a service."""
    return MetricsCollector(service_name, registry)
