"""
Domain helpers for the gateway: request identity and sample records.
"""

from .auth_context import RequestIdentity, build_request_identity, format_invalid_identity_message

__all__ = [
    "RequestIdentity",
    "build_request_identity",
    "format_invalid_identity_message",
]
