"""
Prometheus instrumentation for GraphQL execution.

``MetricsExtension`` hooks into three points of every operation:

- operation start: count the request and start the response timer
- each field resolution: time it, and count an execution error when the
  resolver raises
- operation end: observe the response time, whatever the outcome

Validation failures are counted separately. Every observation goes straight
to the injected ``MetricsCollector``; nothing is kept once the operation is
over.
"""

import time
from inspect import isawaitable
from typing import Any, Callable, Optional, Type

from graphql import GraphQLResolveInfo
from strawberry.extensions import SchemaExtension

from shared.logging import get_logger, set_operation_name
from shared.metrics import UNNAMED_OPERATION, MetricsCollector

logger = get_logger("gateway.instrumentation")


def _operation_label(info: GraphQLResolveInfo) -> str:
    operation = info.operation
    if operation is not None and operation.name is not None:
        return operation.name.value
    return UNNAMED_OPERATION


def _pre_execution_errors(execution_context: Any) -> Optional[list]:
    # Older Strawberry releases keep validation errors on ``errors``
    errors = getattr(execution_context, "pre_execution_errors", None)
    if errors is None:
        errors = getattr(execution_context, "errors", None)
    return errors


class MetricsExtension(SchemaExtension):
    """Schema extension that feeds operation and field metrics into a collector.

    Use ``build_metrics_extension`` to bind it to a collector; Strawberry
    creates one instance per operation.
    """

    metrics: MetricsCollector

    def on_operation(self):
        operation_name = self.execution_context.operation_name or UNNAMED_OPERATION
        set_operation_name(operation_name)
        self.metrics.record_graphql_request(operation_name)

        with self.metrics.time_operation("graphql_response_time_seconds", operationName=operation_name):
            yield

    def on_validate(self):
        yield

        errors = _pre_execution_errors(self.execution_context)
        if errors:
            operation_name = self.execution_context.operation_name or UNNAMED_OPERATION
            logger.info("GraphQL validation failed", errors=len(errors))
            self.metrics.record_validation_error(operation_name)

    def resolve(self, _next: Callable, root: Any, info: GraphQLResolveInfo, *args: Any, **kwargs: Any) -> Any:
        start = time.perf_counter()
        try:
            result = _next(root, info, *args, **kwargs)
        except Exception:
            self._finish_field(info, start, failed=True)
            raise

        if isawaitable(result):
            return self._await_field(result, info, start)

        self._finish_field(info, start, failed=False)
        return result

    async def _await_field(self, result: Any, info: GraphQLResolveInfo, start: float) -> Any:
        try:
            value = await result
        except Exception:
            self._finish_field(info, start, failed=True)
            raise

        self._finish_field(info, start, failed=False)
        return value

    def _finish_field(self, info: GraphQLResolveInfo, start: float, failed: bool) -> None:
        self.metrics.record_field_resolve_time(info.field_name, info.parent_type.name, time.perf_counter() - start)
        if failed:
            self.metrics.record_execution_error(_operation_label(info))


def build_metrics_extension(metrics: MetricsCollector) -> Type[MetricsExtension]:
    """Bind ``MetricsExtension`` to ``metrics`` for use in a schema."""
    return type("BoundMetricsExtension", (MetricsExtension,), {"metrics": metrics})
