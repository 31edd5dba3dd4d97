"""
Fixture backend: synchronous lookups over the in-process sample records.
"""

from typing import Iterable, List, Optional

from service_graphql.app.domain.sample_data import AUTHORS, BOOKS, AuthorRecord, BookRecord


class FixtureStore:
    """Read-only view over the static book and author collections."""

    def __init__(self, books: Optional[Iterable[BookRecord]] = None,
                 authors: Optional[Iterable[AuthorRecord]] = None):
        self._books = list(BOOKS if books is None else books)
        self._authors = list(AUTHORS if authors is None else authors)

    def find_book(self, book_id: int) -> Optional[BookRecord]:
        """First book whose id matches, or None."""
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def list_books(self) -> List[BookRecord]:
        return list(self._books)

    def list_authors(self) -> List[AuthorRecord]:
        return list(self._authors)

    def find_books(self, book_ids: Iterable[Optional[int]]) -> List[BookRecord]:
        """Books for ``book_ids``, in order.

        Ids with no matching book are skipped, so the result may be shorter
        than the input.
        """
        books = []
        for book_id in book_ids:
            book = self.find_book(book_id)
            if book is not None:
                books.append(book)
        return books

    def books_for_author(self, author: AuthorRecord) -> List[BookRecord]:
        return self.find_books(author.book_ids)
