"""
Shared fixtures for gateway tests.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from service_graphql.app.adapters.azure_status_client import AzureStatusClient
from service_graphql.app.adapters.fixture_store import FixtureStore
from service_graphql.app.adapters.github_client import GitHubClient
from service_graphql.app.adapters.oauth_client import GitHubOAuthClient
from service_graphql.app.adapters.plain_graphql_client import PlainGraphQLClient
from service_graphql.app.adapters.registry import BackendRegistry
from service_graphql.app.domain.sample_data import AuthorRecord, BookRecord
from shared.config import GatewaySettings
from shared.metrics import MetricsCollector


@pytest.fixture
def settings():
    """Gateway settings for tests."""
    return GatewaySettings(
        env="test",
        port=4000,
        github_client_id="client-123",
        github_client_secret="secret-456",
        backend_timeout_seconds=1.0,
    )


@pytest.fixture
def metrics():
    """Isolated metrics collector."""
    return MetricsCollector("gateway-test", include_default_collectors=False)


@pytest.fixture
def books():
    return [
        BookRecord(id=1, title="The Awakening", author="Kate Chopin"),
        BookRecord(id=2, title="City of Glass", author="Paul Auster"),
    ]


@pytest.fixture
def authors():
    return [
        AuthorRecord(id=1, name="Kate Chopin", book_ids=[1]),
        AuthorRecord(id=2, name="Paul Auster", book_ids=[2, 99]),
    ]


@pytest.fixture
def backends(books, authors):
    """Registry with the real fixture store and mocked remote adapters."""
    azure_status = MagicMock(spec=AzureStatusClient)
    azure_status.get_services = AsyncMock(return_value=[])

    github = MagicMock(spec=GitHubClient)
    github.list_repos = AsyncMock(return_value=[])
    github.fetch_repos = AsyncMock(return_value=[])

    plain_graphql = MagicMock(spec=PlainGraphQLClient)
    plain_graphql.get_book = AsyncMock(return_value=None)
    plain_graphql.list_all_books = AsyncMock(return_value=[])

    github_oauth = MagicMock(spec=GitHubOAuthClient)
    github_oauth.exchange_code = AsyncMock(return_value="gho_token")

    return BackendRegistry(
        fixture=FixtureStore(books=books, authors=authors),
        azure_status=azure_status,
        github=github,
        plain_graphql=plain_graphql,
        github_oauth=github_oauth,
    )
