"""
GraphQL schema, resolvers and execution instrumentation.
"""

from .context import GatewayContext, make_context_getter
from .instrumentation import MetricsExtension, build_metrics_extension
from .schema import GatewaySchema, create_schema

__all__ = [
    "GatewayContext",
    "GatewaySchema",
    "MetricsExtension",
    "build_metrics_extension",
    "create_schema",
    "make_context_getter",
]
