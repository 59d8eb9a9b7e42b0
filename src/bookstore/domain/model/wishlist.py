"""Wishlist aggregate — books a user saved for later."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from bookstore.domain.exceptions import DuplicateEntryError, EntityNotFoundError
from bookstore.domain.model.book import Book


@dataclass
class Wishlist:
    """Insertion-ordered set of books keyed by book id.

    Never cleared automatically; only ``add`` and ``remove`` change it.
    """

    user_id: int
    books: list[Book] = field(default_factory=list)

    @staticmethod
    def empty(user_id: int) -> Wishlist:
        return Wishlist(user_id=user_id)

    def add(self, book: Book) -> None:
        if self.contains(book.id):
            raise DuplicateEntryError(f"Book '{book.id}' is already in the wishlist")
        self.books.append(copy.copy(book))

    def remove(self, book_id: str) -> Book:
        for index, book in enumerate(self.books):
            if book.id == book_id:
                return self.books.pop(index)
        raise EntityNotFoundError(f"Book '{book_id}' not found in wishlist")

    def contains(self, book_id: str) -> bool:
        return book_id in self.book_ids

    @property
    def book_ids(self) -> list[str]:
        return [book.id for book in self.books]
