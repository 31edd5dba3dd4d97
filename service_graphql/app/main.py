"""
GraphQL gateway service.
"""

from typing import Optional
from urllib.parse import urlencode

from fastapi import Query
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse
from strawberry.fastapi import GraphQLRouter

from service_graphql.app.adapters.registry import BackendRegistry
from service_graphql.app.health.liveness import LivenessProber
from service_graphql.app.schema.context import make_context_getter
from service_graphql.app.schema.schema import create_schema
from shared.base_service import BaseService
from shared.config import GatewaySettings
from shared.errors import GatewayException, OAuthExchangeError
from shared.metrics import MetricsCollector


class GatewayService(BaseService):
    """GraphQL gateway service implementation."""

    def __init__(self, settings: Optional[GatewaySettings] = None,
                 metrics: Optional[MetricsCollector] = None,
                 backends: Optional[BackendRegistry] = None,
                 prober: Optional[LivenessProber] = None):
        super().__init__("gateway", settings, metrics)
        self.backends = backends or BackendRegistry.from_settings(self.config)
        self.prober = prober or LivenessProber(self.config.liveness_url)
        self.schema = create_schema(self.metrics, enable_tracing=self.config.enable_tracing)

        @self.app.on_event("startup")
        async def _startup():
            base = f"http://localhost:{self.config.port}"
            self.logger.info(
                "Gateway ready",
                graphql=f"{base}/graphql",
                metrics=f"{base}/metrics",
                health=f"{base}/health",
            )

        self._setup_graphql_routes()
        self._setup_health_routes()
        self._setup_github_routes()

        self.app.state.gateway_service = self

    def _setup_graphql_routes(self):
        graphql_router = GraphQLRouter(
            self.schema,
            context_getter=make_context_getter(self.backends, self.config),
            graphql_ide="graphiql" if self.config.graphiql else None,
        )
        self.app.include_router(graphql_router, prefix="/graphql")

    def _setup_health_routes(self):

        @self.app.get("/health", response_class=PlainTextResponse)
        async def health_check():
            """Liveness check through the GraphQL endpoint."""
            result = await self.prober.probe()
            self.metrics.record_health_check("ok" if result.healthy else "error")
            return PlainTextResponse(result.message, status_code=result.status_code)

    def _setup_github_routes(self):

        @self.app.get("/client-id")
        async def client_id():
            """GitHub OAuth client id for the browser login flow."""
            return {"clientId": self.config.github_client_id}

        @self.app.get("/callback")
        async def oauth_callback(code: Optional[str] = Query(default=None)):
            """Exchange the OAuth code and hand the token to the dashboard."""
            try:
                token = await self.backends.github_oauth.exchange_code(code)
            except OAuthExchangeError as e:
                self.logger.error("OAuth exchange failed", error=e.message)
                return PlainTextResponse("Error getting access token", status_code=500)

            return RedirectResponse(f"/dashboard.html?{urlencode({'token': token})}", status_code=302)

        @self.app.get("/repos")
        async def list_repos(token: Optional[str] = Query(default=None)):
            """Raw repository listing for a GitHub token."""
            if not token:
                return PlainTextResponse("Error fetching repositories", status_code=500)
            try:
                repos = await self.backends.github.fetch_repos(token)
            except GatewayException as e:
                self.logger.error("Repository listing failed", code=e.code, error=e.message)
                return PlainTextResponse("Error fetching repositories", status_code=500)

            return JSONResponse(repos)


def create_app(settings: Optional[GatewaySettings] = None,
               metrics: Optional[MetricsCollector] = None,
               backends: Optional[BackendRegistry] = None,
               prober: Optional[LivenessProber] = None):
    """Create FastAPI application."""
    service = GatewayService(settings=settings, metrics=metrics, backends=backends, prober=prober)
    return service.app


if __name__ == "__main__":
    GatewayService().run()
