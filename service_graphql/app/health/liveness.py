"""
Liveness prober: runs a minimal query through the gateway's own endpoint.
"""

from dataclasses import dataclass

import httpx

from shared.logging import get_logger

LIVENESS_QUERY = "{ __typename }"


@dataclass(frozen=True)
class LivenessResult:
    healthy: bool
    status_code: int
    message: str


class LivenessProber:
    """Checks that the full GraphQL pipeline can serve a request."""

    def __init__(self, graphql_url: str, timeout: float = 5.0):
        self.graphql_url = graphql_url
        self.timeout = timeout
        self.logger = get_logger("gateway.liveness")

    async def probe(self) -> LivenessResult:
        """Never raises: transport failures become an unhealthy 500 result."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.graphql_url,
                    json={"query": LIVENESS_QUERY},
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as e:
            self.logger.error("Liveness probe failed", url=self.graphql_url, error=str(e))
            return LivenessResult(healthy=False, status_code=500, message="Health check failed")

        if 200 <= response.status_code < 300:
            return LivenessResult(healthy=True, status_code=200, message="OK")

        self.logger.warning("Liveness probe returned error status", status_code=response.status_code)
        return LivenessResult(healthy=False, status_code=response.status_code, message="Health check failed")
