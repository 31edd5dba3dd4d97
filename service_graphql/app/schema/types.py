"""
GraphQL object types exposed by the gateway.
"""

from typing import Any, Dict, List, Optional

import strawberry
from strawberry.types import Info

from service_graphql.app.domain.sample_data import AuthorRecord, BookRecord


@strawberry.type
class Book:
    id: int
    title: Optional[str] = None
    author: Optional[str] = None

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        return cls(id=record.id, title=record.title, author=record.author)


@strawberry.type
class PlainGraphQLBook:
    """Book as served by the downstream GraphQL service."""

    id: int
    title: Optional[str] = None
    author: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "PlainGraphQLBook":
        return cls(
            id=payload.get("id"),
            title=payload.get("title"),
            author=payload.get("author"),
            email=payload.get("email"),
        )


@strawberry.type
class Author:
    id: int
    name: Optional[str] = None
    book_ids: Optional[List[Optional[int]]] = None

    @strawberry.field
    def books(self, info: Info) -> Optional[List[Optional[Book]]]:
        fixture = info.context.backends.fixture
        return [Book.from_record(book) for book in fixture.find_books(self.book_ids or [])]

    @classmethod
    def from_record(cls, record: AuthorRecord) -> "Author":
        return cls(id=record.id, name=record.name, book_ids=list(record.book_ids))


@strawberry.type
class Geographies:
    id: Optional[str] = None
    name: Optional[str] = None
    health: Optional[str] = None


@strawberry.type
class AzureService:
    id: Optional[str] = None
    geographies: Optional[List[Optional[Geographies]]] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "AzureService":
        geographies = payload.get("geographies")
        return cls(
            id=payload.get("id"),
            geographies=None if geographies is None else [
                Geographies(id=geo.get("id"), name=geo.get("name"), health=geo.get("health"))
                for geo in geographies
            ],
        )


@strawberry.type
class GithubRepo:
    repo_name: Optional[str] = strawberry.field(default=None, name="repo_name")
