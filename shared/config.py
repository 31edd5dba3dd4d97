"""
Shared configuration management for the GraphQL gateway.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="allow",
        populate_by_name=True,
    )

    # Environment
    env: str = Field(default="local", validation_alias="GATEWAY_ENV")
    log_level: str = Field(default="info", validation_alias="GATEWAY_LOG_LEVEL")

    # Observability
    enable_tracing: bool = Field(default=False, validation_alias="GATEWAY_ENABLE_TRACING")
    otel_exporter: Optional[str] = Field(default=None, validation_alias="GATEWAY_OTEL_EXPORTER")
    enable_console_tracing: bool = Field(
        default=False,
        validation_alias="GATEWAY_ENABLE_CONSOLE_TRACING",
    )


class GatewaySettings(BaseConfig):
    """GraphQL gateway configuration."""

    host: str = Field(default="0.0.0.0", validation_alias="GATEWAY_HOST")
    port: int = Field(default=4000, validation_alias="PORT")

    # GitHub OAuth app (used by /callback and /client-id only)
    github_client_id: Optional[str] = Field(default=None, validation_alias="GITHUB_CLIENT_ID")
    github_client_secret: Optional[str] = Field(
        default=None,
        validation_alias="GITHUB_CLIENT_SECRET",
    )

    # Backends
    azure_status_url: str = Field(
        default="https://status.dev.azure.com/_apis/status",
        validation_alias="GATEWAY_AZURE_STATUS_URL",
    )
    github_api_url: str = Field(
        default="https://api.github.com/user",
        validation_alias="GATEWAY_GITHUB_API_URL",
    )
    github_oauth_url: str = Field(
        default="https://github.com/login/oauth/access_token",
        validation_alias="GATEWAY_GITHUB_OAUTH_URL",
    )
    delegated_graphql_url: str = Field(
        default="http://localhost:4002/graphql",
        validation_alias="GATEWAY_DELEGATED_GRAPHQL_URL",
    )
    backend_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        validation_alias="GATEWAY_BACKEND_TIMEOUT_SECONDS",
    )

    # Security
    auth_shared_secret: str = Field(
        default="DevX",
        validation_alias="GATEWAY_AUTH_SHARED_SECRET",
    )

    # GraphQL endpoint
    graphiql: bool = Field(default=False, validation_alias="GATEWAY_GRAPHIQL")
    self_url: Optional[str] = Field(default=None, validation_alias="GATEWAY_SELF_URL")

    @property
    def liveness_url(self) -> str:
        """URL the liveness prober posts its synthetic query to."""
        return self.self_url or f"http://127.0.0.1:{self.port}/graphql"


@lru_cache()
def get_settings() -> GatewaySettings:
    """Get the process-wide gateway settings."""
    return GatewaySettings()
