"""
Root query resolvers.

Each field dispatches to exactly one source: a constant, the request
identity, the fixture, or one remote adapter. Remote calls raise on failure;
Strawberry turns that into a null field plus an entry in ``errors`` without
touching sibling fields.
"""

from typing import List, Optional

import strawberry
from strawberry.types import Info

from service_graphql.app.schema.types import (
    Author,
    AzureService,
    Book,
    GithubRepo,
    PlainGraphQLBook,
)


@strawberry.type
class Query:
    @strawberry.field
    def hello(self) -> Optional[str]:
        return "Hello World!"

    @strawberry.field
    def auth_user(self, info: Info) -> Optional[str]:
        return info.context.identity.display_message

    @strawberry.field
    def books(self, info: Info) -> Optional[List[Optional[Book]]]:
        return [Book.from_record(book) for book in info.context.backends.fixture.list_books()]

    @strawberry.field
    def book(self, info: Info, book_id: int) -> Optional[Book]:
        record = info.context.backends.fixture.find_book(book_id)
        return Book.from_record(record) if record is not None else None

    @strawberry.field
    def authors(self, info: Info) -> Optional[List[Optional[Author]]]:
        return [Author.from_record(author) for author in info.context.backends.fixture.list_authors()]

    @strawberry.field
    async def azure_services(self, info: Info) -> Optional[List[Optional[AzureService]]]:
        services = await info.context.backends.azure_status.get_services()
        if services is None:
            return None
        return [AzureService.from_payload(service) for service in services]

    @strawberry.field(name="plainGraphQLBook")
    async def plain_graphql_book(self, info: Info, book_id: int) -> Optional[PlainGraphQLBook]:
        payload = await info.context.backends.plain_graphql.get_book(book_id)
        return PlainGraphQLBook.from_payload(payload) if payload is not None else None

    @strawberry.field(name="plainGraphQLAllBooks")
    async def plain_graphql_all_books(self, info: Info) -> Optional[List[Optional[PlainGraphQLBook]]]:
        payloads = await info.context.backends.plain_graphql.list_all_books()
        if payloads is None:
            return None
        return [PlainGraphQLBook.from_payload(payload) for payload in payloads]

    @strawberry.field
    async def get_github_repos(self, info: Info) -> Optional[List[Optional[GithubRepo]]]:
        repos = await info.context.backends.github.list_repos(info.context.identity.delegated_token)
        return [GithubRepo(repo_name=repo["repo_name"]) for repo in repos]
