"""Application service: List Books use case (query)."""

from __future__ import annotations

from bookstore.application.dto import BookDTO, book_to_dto
from bookstore.domain.repository.book_repository import BookRepository


class ListBooksHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(self) -> list[BookDTO]:
        return [book_to_dto(book) for book in self._book_repo.list_all()]
