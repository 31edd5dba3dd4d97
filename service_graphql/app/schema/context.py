"""
Per-request GraphQL context.
"""

from fastapi import Request
from strawberry.fastapi import BaseContext

from service_graphql.app.adapters.registry import BackendRegistry
from service_graphql.app.domain.auth_context import (
    DELEGATED_TOKEN_COOKIE,
    RequestIdentity,
    build_request_identity,
)
from shared.config import GatewaySettings


class GatewayContext(BaseContext):
    """Everything a resolver may touch while serving one request.

    ``identity`` is built for this request only; ``backends`` is the
    process-wide registry shared by all requests.
    """

    def __init__(self, identity: RequestIdentity, backends: BackendRegistry, settings: GatewaySettings):
        super().__init__()
        self.identity = identity
        self.backends = backends
        self.settings = settings


def make_context_getter(backends: BackendRegistry, settings: GatewaySettings):
    """Build the ``context_getter`` for the GraphQL router."""

    async def get_context(request: Request) -> GatewayContext:
        identity = build_request_identity(
            request.headers.get("Authorization"),
            request.cookies.get(DELEGATED_TOKEN_COOKIE),
            settings.auth_shared_secret,
        )
        return GatewayContext(identity=identity, backends=backends, settings=settings)

    return get_context
