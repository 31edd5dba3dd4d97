"""
Adapters package for the GraphQL gateway.

One adapter per backend kind. Each one normalizes its backend's response
into the shapes the schema exposes:

- FixtureStore: in-process sample books and authors
- AzureStatusClient: Azure DevOps service health
- GitHubClient: repositories visible to a delegated GitHub token
- PlainGraphQLClient: sub-queries forwarded to the downstream GraphQL service
- GitHubOAuthClient: OAuth code exchange behind /callback

Remote adapters share HttpBackendClient, which bounds every call with a
deadline and maps failures onto shared.errors.
"""

from .azure_status_client import AzureStatusClient
from .base import HttpBackendClient
from .fixture_store import FixtureStore
from .github_client import GitHubClient
from .oauth_client import GitHubOAuthClient
from .plain_graphql_client import PlainGraphQLClient
from .registry import BackendRegistry

__all__ = [
    "AzureStatusClient",
    "BackendRegistry",
    "FixtureStore",
    "GitHubClient",
    "GitHubOAuthClient",
    "HttpBackendClient",
    "PlainGraphQLClient",
]
