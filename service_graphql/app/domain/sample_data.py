"""
In-process sample records served by the fixture backend.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class BookRecord:
    id: int
    title: Optional[str]
    author: Optional[str]


@dataclass(frozen=True)
class AuthorRecord:
    id: int
    name: Optional[str]
    book_ids: List[int] = field(default_factory=list)


BOOKS: List[BookRecord] = [
    BookRecord(id=1, title="The Awakening", author="Kate Chopin"),
    BookRecord(id=2, title="City of Glass", author="Paul Auster"),
    BookRecord(id=3, title="The New York Trilogy", author="Paul Auster"),
    BookRecord(id=4, title="The Storm", author="Kate Chopin"),
]

AUTHORS: List[AuthorRecord] = [
    AuthorRecord(id=1, name="Kate Chopin", book_ids=[1, 4]),
    AuthorRecord(id=2, name="Paul Auster", book_ids=[2, 3]),
]
