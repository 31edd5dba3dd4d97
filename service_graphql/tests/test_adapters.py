"""
Unit tests for the remote backend adapters.
"""

import asyncio
import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from service_graphql.app.adapters.azure_status_client import AzureStatusClient
from service_graphql.app.adapters.github_client import GitHubClient
from service_graphql.app.adapters.oauth_client import GitHubOAuthClient
from service_graphql.app.adapters.plain_graphql_client import PlainGraphQLClient
from shared.errors import (
    BackendTimeoutError,
    ExternalServiceError,
    OAuthExchangeError,
    UpstreamQueryError,
)


def _response(method: str, url: str, body, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code=status_code,
        content=json.dumps(body),
        request=httpx.Request(method, url),
    )


class TestAzureStatusClient:
    """Test cases for AzureStatusClient."""

    @pytest.fixture
    def client(self):
        return AzureStatusClient("https://status.dev.azure.com/_apis/status")

    @pytest.mark.asyncio
    async def test_get_services_returns_services_unmodified(self, client):
        services = [
            {"id": "Artifacts", "geographies": [{"id": "IN", "name": "India", "health": "healthy"}]}
        ]

        with patch('httpx.AsyncClient') as mock_client:
            request = AsyncMock(return_value=_response(
                "GET", "https://status.dev.azure.com/_apis/status/health", {"services": services, "status": {}}
            ))
            mock_client.return_value.__aenter__.return_value.request = request

            result = await client.get_services()

        assert result == services
        method, url = request.call_args.args
        assert method == "GET"
        assert url == "https://status.dev.azure.com/_apis/status/health"
        assert request.call_args.kwargs["params"] == {"services": "Artifacts", "geographies": "IN"}

    @pytest.mark.asyncio
    async def test_get_services_upstream_error(self, client):
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.request = AsyncMock(return_value=_response(
                "GET", "https://status.dev.azure.com/_apis/status/health", {"message": "boom"}, status_code=503
            ))

            with pytest.raises(ExternalServiceError) as exc_info:
                await client.get_services()

        assert exc_info.value.details == {"status_code": 503}

    @pytest.mark.asyncio
    async def test_get_services_transport_error(self, client):
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.request = AsyncMock(
                side_effect=httpx.ConnectError("Connection failed")
            )

            with pytest.raises(ExternalServiceError):
                await client.get_services()

    @pytest.mark.asyncio
    async def test_get_services_malformed_body(self, client):
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.request = AsyncMock(return_value=httpx.Response(
                status_code=200,
                content=b"<html>not json</html>",
                request=httpx.Request("GET", "https://status.dev.azure.com/_apis/status/health"),
            ))

            with pytest.raises(ExternalServiceError):
                await client.get_services()

    @pytest.mark.asyncio
    async def test_slow_backend_hits_deadline(self):
        client = AzureStatusClient("https://status.dev.azure.com/_apis/status", timeout=0.05)

        async def _hang(*args, **kwargs):
            await asyncio.sleep(5)

        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.request = AsyncMock(side_effect=_hang)

            with pytest.raises(BackendTimeoutError) as exc_info:
                await client.get_services()

        assert exc_info.value.code == "BACKEND_TIMEOUT"
        assert exc_info.value.extensions == {"code": "BACKEND_TIMEOUT"}


class TestGitHubClient:
    """Test cases for GitHubClient."""

    @pytest.fixture
    def client(self):
        return GitHubClient("https://api.github.com/user")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["", None])
    async def test_list_repos_without_token_makes_no_call(self, client, token):
        with patch('httpx.AsyncClient') as mock_client:
            result = await client.list_repos(token)

        assert result == []
        mock_client.assert_not_called()

    @pytest.mark.asyncio
    async def test_list_repos_projects_full_name(self, client):
        upstream = [
            {"id": 1, "full_name": "octo/one", "private": False},
            {"id": 2, "full_name": "octo/two", "private": True},
        ]

        with patch('httpx.AsyncClient') as mock_client:
            request = AsyncMock(return_value=_response("GET", "https://api.github.com/user/repos", upstream))
            mock_client.return_value.__aenter__.return_value.request = request

            result = await client.list_repos("gho_abc")

        assert result == [{"repo_name": "octo/one"}, {"repo_name": "octo/two"}]
        assert request.call_args.args == ("GET", "https://api.github.com/user/repos")
        assert request.call_args.kwargs["headers"] == {"Authorization": "Bearer gho_abc"}

    @pytest.mark.asyncio
    async def test_list_repos_unauthorized(self, client):
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.request = AsyncMock(return_value=_response(
                "GET", "https://api.github.com/user/repos", {"message": "Bad credentials"}, status_code=401
            ))

            with pytest.raises(ExternalServiceError) as exc_info:
                await client.list_repos("expired")

        assert exc_info.value.message == "github: HTTP 401"


class TestPlainGraphQLClient:
    """Test cases for PlainGraphQLClient."""

    URL = "http://localhost:4002/graphql"

    @pytest.fixture
    def client(self):
        return PlainGraphQLClient(self.URL)

    @pytest.mark.asyncio
    async def test_query_returns_data(self, client):
        with patch('httpx.AsyncClient') as mock_client:
            request = AsyncMock(return_value=_response("POST", self.URL, {"data": {"books": []}}))
            mock_client.return_value.__aenter__.return_value.request = request

            result = await client.query("{ books { id } }", {"x": 1})

        assert result == {"books": []}
        assert request.call_args.args == ("POST", self.URL)
        assert request.call_args.kwargs["json"] == {"query": "{ books { id } }", "variables": {"x": 1}}

    @pytest.mark.asyncio
    async def test_query_collapses_upstream_errors(self, client):
        envelope = {"data": None, "errors": [{"message": "a"}, {"message": "b"}]}

        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.request = AsyncMock(
                return_value=_response("POST", self.URL, envelope)
            )

            with pytest.raises(UpstreamQueryError) as exc_info:
                await client.query("{ books { id } }")

        assert str(exc_info.value) == "a, b"
        assert exc_info.value.messages == ["a", "b"]

    @pytest.mark.asyncio
    async def test_empty_errors_array_is_not_an_error(self, client):
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.request = AsyncMock(
                return_value=_response("POST", self.URL, {"data": {"book": None}, "errors": []})
            )

            assert await client.get_book(5) is None

    @pytest.mark.asyncio
    async def test_get_book_sends_variables(self, client):
        book = {"id": 3, "title": "Dune", "email": "frank@example.com"}

        with patch('httpx.AsyncClient') as mock_client:
            request = AsyncMock(return_value=_response("POST", self.URL, {"data": {"book": book}}))
            mock_client.return_value.__aenter__.return_value.request = request

            result = await client.get_book(3)

        assert result == book
        payload = request.call_args.kwargs["json"]
        assert "GetBook" in payload["query"]
        assert payload["variables"] == {"bookId": 3}

    @pytest.mark.asyncio
    async def test_list_all_books(self, client):
        books = [{"id": 1, "title": "Dune", "author": "Frank Herbert", "email": "frank@example.com"}]

        with patch('httpx.AsyncClient') as mock_client:
            request = AsyncMock(return_value=_response("POST", self.URL, {"data": {"books": books}}))
            mock_client.return_value.__aenter__.return_value.request = request

            result = await client.list_all_books()

        assert result == books
        assert "GetAllBooks" in request.call_args.kwargs["json"]["query"]


class TestGitHubOAuthClient:
    """Test cases for GitHubOAuthClient."""

    URL = "https://github.com/login/oauth/access_token"

    @pytest.mark.asyncio
    async def test_exchange_code(self):
        client = GitHubOAuthClient(self.URL, "client-123", "secret-456")

        with patch('httpx.AsyncClient') as mock_client:
            request = AsyncMock(return_value=_response("POST", self.URL, {"access_token": "gho_new"}))
            mock_client.return_value.__aenter__.return_value.request = request

            token = await client.exchange_code("code-1")

        assert token == "gho_new"
        assert request.call_args.kwargs["json"] == {
            "client_id": "client-123",
            "client_secret": "secret-456",
            "code": "code-1",
        }
        assert request.call_args.kwargs["headers"] == {"Accept": "application/json"}

    @pytest.mark.asyncio
    async def test_exchange_code_rejected(self):
        client = GitHubOAuthClient(self.URL, "client-123", "secret-456")

        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.request = AsyncMock(
                return_value=_response("POST", self.URL, {"error": "bad_verification_code"})
            )

            with pytest.raises(OAuthExchangeError):
                await client.exchange_code("stale")

    @pytest.mark.asyncio
    async def test_exchange_code_unconfigured(self):
        client = GitHubOAuthClient(self.URL, None, None)

        with patch('httpx.AsyncClient') as mock_client:
            with pytest.raises(OAuthExchangeError):
                await client.exchange_code("code-1")

        mock_client.assert_not_called()
