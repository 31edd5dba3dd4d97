"""
Common HTTP plumbing for backend adapters.
"""

import asyncio
from typing import Any, Dict, Optional

import httpx

from shared.errors import BackendTimeoutError, ExternalServiceError
from shared.logging import get_logger
from shared.tracing import trace_operation


class HttpBackendClient:
    """Base class for adapters that talk to a remote HTTP backend.

    Every call opens its own ``httpx.AsyncClient`` and is bounded by
    ``timeout`` seconds. When the deadline passes, the pending request is
    cancelled and ``BackendTimeoutError`` is raised instead. Non-2xx
    responses and transport failures surface as ``ExternalServiceError``.
    Nothing is retried.
    """

    service_name = "backend"

    def __init__(self, base_url: str, timeout: float = 10.0):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.logger = get_logger(f"gateway.{self.service_name}_client")

    def _url(self, path: str) -> str:
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _send(self, method: str, path: str = "", **kwargs: Any) -> httpx.Response:
        url = self._url(path)

        async def _request() -> httpx.Response:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.request(method, url, **kwargs)

        with trace_operation(f"{self.service_name}.{method.lower()}", **{"http.url": url}):
            try:
                response = await asyncio.wait_for(_request(), timeout=self.timeout)
            except asyncio.TimeoutError:
                self.logger.warning("Backend call timed out", url=url, timeout=self.timeout)
                raise BackendTimeoutError(self.service_name, self.timeout)
            except httpx.HTTPError as e:
                self.logger.error("Backend HTTP error", url=url, error=str(e))
                raise ExternalServiceError(
                    self.service_name,
                    "unavailable",
                    details={"http_error": str(e)}
                )

        if response.status_code >= 400:
            self.logger.warning("Backend returned error status", url=url, status_code=response.status_code)
            raise ExternalServiceError(
                self.service_name,
                f"HTTP {response.status_code}",
                details={"status_code": response.status_code}
            )

        return response

    async def _get_json(self, path: str = "", params: Optional[Dict[str, Any]] = None,
                        headers: Optional[Dict[str, str]] = None) -> Any:
        response = await self._send("GET", path, params=params, headers=headers)
        return self._decode(response)

    async def _post_json(self, path: str = "", payload: Optional[Dict[str, Any]] = None,
                         headers: Optional[Dict[str, str]] = None) -> Any:
        response = await self._send("POST", path, json=payload, headers=headers)
        return self._decode(response)

    def _decode(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ExternalServiceError(
                self.service_name,
                "malformed response body",
                details={"error": str(e)}
            )
