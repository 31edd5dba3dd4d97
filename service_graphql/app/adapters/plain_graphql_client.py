"""
Delegated GraphQL client: forwards sub-queries to the downstream books service.
"""

from typing import Any, Dict, List, Optional

from service_graphql.app.adapters.base import HttpBackendClient
from shared.errors import ExternalServiceError, UpstreamQueryError

GET_BOOK_QUERY = """
  query GetBook($bookId: Int!) {
    book(bookId: $bookId) {
      id
      title
      email
    }
  }
"""

GET_ALL_BOOKS_QUERY = """
  query GetAllBooks {
    books {
      id
      title
      author
      email
    }
  }
"""


class PlainGraphQLClient(HttpBackendClient):
    """Client for the downstream GraphQL books service."""

    service_name = "plain_graphql"

    async def query(self, document: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Run ``document`` downstream and return its ``data`` object.

        An ``errors`` array in the envelope is collapsed into one
        ``UpstreamQueryError`` whose message joins the upstream messages.
        """
        envelope = await self._post_json(
            payload={
                "query": document,
                "variables": variables or {},
            },
            headers={"Content-Type": "application/json"},
        )
        if not isinstance(envelope, dict):
            raise ExternalServiceError(self.service_name, "malformed GraphQL envelope")

        errors = envelope.get("errors") or []
        if errors:
            messages = [str(error.get("message", "")) if isinstance(error, dict) else str(error) for error in errors]
            self.logger.warning("Delegated query returned errors", errors=messages)
            raise UpstreamQueryError(messages, details={"errors": errors})

        return envelope.get("data") or {}

    async def get_book(self, book_id: int) -> Optional[Dict[str, Any]]:
        data = await self.query(GET_BOOK_QUERY, {"bookId": book_id})
        return data.get("book")

    async def list_all_books(self) -> Optional[List[Dict[str, Any]]]:
        data = await self.query(GET_ALL_BOOKS_QUERY)
        return data.get("books")
