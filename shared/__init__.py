"""
Shared utilities for the GraphQL gateway.

This package aggregates the ambient building blocks the service is built on:

- config: Service configuration via pydantic-settings
- logging: Structured logging with request correlation
- metrics: Prometheus metrics registry and helpers
- tracing: OpenTelemetry tracing config
- errors: Canonical error types and responses
- base_service: FastAPI app skeleton with timing middleware and /metrics

Do not import from service_* packages into shared/.
"""
