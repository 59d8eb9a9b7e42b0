"""Application service: Search Books use case (query).

Catalog reads take no lock; the catalog is read-mostly and no cart or
wishlist operation writes to it.
"""

from __future__ import annotations

from bookstore.application.dto import BookDTO, book_to_dto
from bookstore.domain.model.book import BookSearchCriteria
from bookstore.domain.repository.book_repository import BookRepository


class SearchBooksHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(
        self,
        name: str | None = None,
        author: str | None = None,
        category: str | None = None,
    ) -> list[BookDTO]:
        """Return the books matching every given filter, in catalog order."""
        criteria = BookSearchCriteria(name=name, author=author, category=category)
        books = self._book_repo.list_all()
        if not criteria.is_empty:
            books = [book for book in books if criteria.matches(book)]
        return [book_to_dto(book) for book in books]
