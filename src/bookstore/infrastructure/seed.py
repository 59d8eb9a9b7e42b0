"""Sample catalog used when no books file exists yet."""

from __future__ import annotations

from bookstore.domain.model.book import Book
from bookstore.domain.model.value_objects import Money


def sample_books() -> list[Book]:
    return [
        Book(
            id="book1",
            name="Book 1",
            author="Author 1",
            price=Money.of("19.99"),
            stock=10,
            category="Fiction",
            description="A fascinating book about...",
            image="url_to_image",
        ),
        Book(
            id="book2",
            name="Book 2",
            author="Author 2",
            price=Money.of("25.99"),
            stock=5,
            category="Non-fiction",
            description="Another fascinating book...",
            image="url_to_image",
        ),
    ]
