"""
Shared error handling for the GraphQL gateway.
"""

from typing import Any, Dict, List, Optional

from opentelemetry import trace
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    trace_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class GatewayException(Exception):
    """Base exception for gateway errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    @property
    def extensions(self) -> Dict[str, Any]:
        """GraphQL error extensions, picked up by graphql-core for located errors."""
        return {"code": self.code}

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        trace_id = None
        current_span = trace.get_current_span()
        if current_span and current_span.is_recording():
            span_context = current_span.get_span_context()
            if span_context.trace_id != 0:
                trace_id = f"{span_context.trace_id:032x}"

        return ErrorResponse(
            trace_id=trace_id,
            code=self.code,
            message=self.message,
            details=self.details
        )


class ExternalServiceError(GatewayException):
    """External service errors."""

    def __init__(self, service: str, message: str = "External service error", details: Optional[Dict[str, Any]] = None):
        self.service = service
        super().__init__("EXTERNAL_SERVICE_ERROR", f"{service}: {message}", details)


class BackendTimeoutError(ExternalServiceError):
    """A backend call exceeded its deadline and was cancelled."""

    def __init__(self, service: str, timeout: float):
        super().__init__(service, f"timed out after {timeout:g}s", {"timeout_seconds": timeout})
        self.code = "BACKEND_TIMEOUT"


class UpstreamQueryError(GatewayException):
    """The delegated GraphQL service answered with an errors envelope."""

    def __init__(self, messages: List[str], details: Optional[Dict[str, Any]] = None):
        self.messages = list(messages)
        super().__init__("UPSTREAM_QUERY_ERROR", ", ".join(self.messages), details)


class OAuthExchangeError(GatewayException):
    """Exchanging an OAuth code for an access token failed."""

    def __init__(self, message: str = "OAuth exchange failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("OAUTH_EXCHANGE_ERROR", message, details)
