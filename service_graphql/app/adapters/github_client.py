"""
GitHub repository listing client for the gateway.
"""

from typing import Any, Dict, List, Optional

from service_graphql.app.adapters.base import HttpBackendClient
from shared.errors import ExternalServiceError


class GitHubClient(HttpBackendClient):
    """Lists the repositories of the user a delegated token belongs to."""

    service_name = "github"

    async def fetch_repos(self, token: str) -> List[Dict[str, Any]]:
        """Raw ``user/repos`` listing for ``token``."""
        body = await self._get_json(
            "repos",
            headers={"Authorization": f"Bearer {token}"},
        )
        if not isinstance(body, list):
            raise ExternalServiceError(self.service_name, "expected a list of repositories")
        return body

    async def list_repos(self, token: Optional[str]) -> List[Dict[str, str]]:
        """Repository names visible to ``token``.

        Without a token no request is made and the list is empty.
        """
        if not token:
            return []

        repos = await self.fetch_repos(token)
        return [{"repo_name": repo.get("full_name")} for repo in repos]
