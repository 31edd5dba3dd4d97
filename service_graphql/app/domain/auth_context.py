"""
Request identity construction for the gateway.

Authentication failures are represented as data: a request with the wrong
shared secret still executes, ``authUser`` reports the failure and fields
that need a delegated token resolve to empty results.
"""

from dataclasses import dataclass
from typing import Optional

from shared.logging import get_logger

logger = get_logger("gateway.auth_context")

VALID_USER_MESSAGE = "Valid user"
MISSING_HEADER_LITERAL = "undefined"
DELEGATED_TOKEN_COOKIE = "githubToken"


@dataclass(frozen=True)
class RequestIdentity:
    display_message: str
    delegated_token: str = ""

    @property
    def is_valid(self) -> bool:
        return self.display_message == VALID_USER_MESSAGE


def format_invalid_identity_message(raw_header: Optional[str]) -> str:
    """Message reported for a request whose Authorization header did not match.

    The header is echoed back verbatim; a missing header is rendered as
    ``undefined``.
    """
    value = MISSING_HEADER_LITERAL if raw_header is None else raw_header
    return f"Invalid user, token:{value}"


def build_request_identity(authorization: Optional[str], delegated_token_cookie: Optional[str],
                           shared_secret: str) -> RequestIdentity:
    """Derive the identity of a request from its credentials. Never raises."""
    if authorization != shared_secret:
        logger.debug("Request carries no valid credentials", header_present=authorization is not None)
        return RequestIdentity(format_invalid_identity_message(authorization), "")

    logger.debug("Request authenticated", has_delegated_token=bool(delegated_token_cookie))
    return RequestIdentity(VALID_USER_MESSAGE, delegated_token_cookie or "")
