"""JSON-file-backed implementation of BookRepository."""

from __future__ import annotations

import json
from pathlib import Path

from bookstore.domain.model.book import Book
from bookstore.domain.model.value_objects import Money
from bookstore.domain.repository.book_repository import BookRepository


class JsonBookRepository(BookRepository):
    """Catalog stored as a JSON list; seeded with *seed* when the file is missing."""

    def __init__(self, file_path: Path, seed: list[Book] | None = None) -> None:
        self._file_path = file_path
        self._ensure_file(seed or [])

    # --- BookRepository interface ---------------------------------------------

    def get_by_id(self, book_id: str) -> Book | None:
        return self._load().get(book_id)

    def list_all(self) -> list[Book]:
        return list(self._load().values())

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def to_raw(book: Book) -> dict:
        return {
            "id": book.id,
            "name": book.name,
            "author": book.author,
            "price": str(book.price.amount),
            "currency": book.price.currency,
            "stock": book.stock,
            "category": book.category,
            "description": book.description,
            "image": book.image,
        }

    @staticmethod
    def to_domain(raw: dict) -> Book:
        return Book(
            id=raw["id"],
            name=raw["name"],
            author=raw["author"],
            price=Money.of(raw["price"], raw.get("currency", "USD")),
            stock=raw["stock"],
            category=raw["category"],
            description=raw.get("description", ""),
            image=raw.get("image", ""),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, Book]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self.to_domain(item) for item in raw}

    def _persist(self, books: dict[str, Book]) -> None:
        raw = [self.to_raw(b) for b in books.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self, seed: list[Book]) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist({b.id: b for b in seed})
