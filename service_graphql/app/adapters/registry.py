"""
Process-wide backend registry.

Adapters are built once at startup and handed to every request context,
so requests never construct their own adapter instances.
"""

from dataclasses import dataclass

from service_graphql.app.adapters.azure_status_client import AzureStatusClient
from service_graphql.app.adapters.fixture_store import FixtureStore
from service_graphql.app.adapters.github_client import GitHubClient
from service_graphql.app.adapters.oauth_client import GitHubOAuthClient
from service_graphql.app.adapters.plain_graphql_client import PlainGraphQLClient
from shared.config import GatewaySettings


@dataclass(frozen=True)
class BackendRegistry:
    fixture: FixtureStore
    azure_status: AzureStatusClient
    github: GitHubClient
    plain_graphql: PlainGraphQLClient
    github_oauth: GitHubOAuthClient

    @classmethod
    def from_settings(cls, settings: GatewaySettings) -> "BackendRegistry":
        timeout = settings.backend_timeout_seconds
        return cls(
            fixture=FixtureStore(),
            azure_status=AzureStatusClient(settings.azure_status_url, timeout=timeout),
            github=GitHubClient(settings.github_api_url, timeout=timeout),
            plain_graphql=PlainGraphQLClient(settings.delegated_graphql_url, timeout=timeout),
            github_oauth=GitHubOAuthClient(
                settings.github_oauth_url,
                settings.github_client_id,
                settings.github_client_secret,
                timeout=timeout,
            ),
        )
