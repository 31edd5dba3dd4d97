"""
Azure DevOps status client for the gateway.
"""

from typing import Any, Dict, List

from service_graphql.app.adapters.base import HttpBackendClient
from shared.errors import ExternalServiceError


class AzureStatusClient(HttpBackendClient):
    """Client for the public Azure DevOps service health API."""

    service_name = "azure_status"

    SERVICES = "Artifacts"
    GEOGRAPHIES = "IN"

    async def get_services(self) -> List[Dict[str, Any]]:
        """Fetch service health, returning the upstream ``services`` list as is."""
        body = await self._get_json(
            "health",
            params={
                "services": self.SERVICES,
                "geographies": self.GEOGRAPHIES,
            },
        )
        if not isinstance(body, dict) or "services" not in body:
            raise ExternalServiceError(self.service_name, "response has no services field")

        self.logger.debug("Service health retrieved", count=len(body["services"] or []))
        return body["services"]
