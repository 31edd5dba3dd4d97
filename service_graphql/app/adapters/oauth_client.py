"""
GitHub OAuth code exchange client.
"""

from typing import Optional

from service_graphql.app.adapters.base import HttpBackendClient
from shared.errors import ExternalServiceError, OAuthExchangeError


class GitHubOAuthClient(HttpBackendClient):
    """Exchanges an OAuth authorization code for a GitHub access token."""

    service_name = "github_oauth"

    def __init__(self, token_url: str, client_id: Optional[str], client_secret: Optional[str],
                 timeout: float = 10.0):
        super().__init__(token_url, timeout=timeout)
        self.client_id = client_id
        self.client_secret = client_secret

    async def exchange_code(self, code: Optional[str]) -> str:
        """Return the access token for ``code``."""
        if not code:
            raise OAuthExchangeError("Missing authorization code")
        if not self.client_id or not self.client_secret:
            raise OAuthExchangeError("GitHub OAuth client is not configured")

        try:
            body = await self._post_json(
                payload={
                    "client_id": self.client_id,
                    "client_secret": self.client_secret,
                    "code": code,
                },
                headers={"Accept": "application/json"},
            )
        except ExternalServiceError as e:
            raise OAuthExchangeError(e.message, details=e.details)

        token = body.get("access_token") if isinstance(body, dict) else None
        if not token:
            error = body.get("error") if isinstance(body, dict) else None
            raise OAuthExchangeError("No access token in response", details={"error": error})

        self.logger.info("OAuth code exchanged")
        return token
