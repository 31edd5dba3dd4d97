"""
Schema assembly for the gateway.
"""

from typing import List, Optional

import strawberry
from graphql import GraphQLError
from strawberry.types import ExecutionContext

from service_graphql.app.schema.instrumentation import build_metrics_extension
from service_graphql.app.schema.query import Query
from shared.logging import get_logger
from shared.metrics import MetricsCollector

logger = get_logger("gateway.schema")


class GatewaySchema(strawberry.Schema):
    """Schema whose execution errors are logged through structlog."""

    def process_errors(self, errors: List[GraphQLError],
                       execution_context: Optional[ExecutionContext] = None) -> None:
        for error in errors:
            extensions = error.extensions or {}
            logger.warning(
                "GraphQL error",
                message=error.message,
                path=error.path,
                code=extensions.get("code"),
                operation_name=execution_context.operation_name if execution_context else None,
            )


def create_schema(metrics: MetricsCollector, enable_tracing: bool = False) -> GatewaySchema:
    """Build the gateway schema instrumented with ``metrics``."""
    extensions = [build_metrics_extension(metrics)]
    if enable_tracing:
        from strawberry.extensions.tracing import OpenTelemetryExtension
        extensions.append(OpenTelemetryExtension)

    return GatewaySchema(query=Query, extensions=extensions)
