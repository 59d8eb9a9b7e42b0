"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from bookstore.domain.model.book import Book
from bookstore.infrastructure.config import Settings
from bookstore.infrastructure.persistence.json_book_repository import (
    JsonBookRepository,
)
from bookstore.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from bookstore.infrastructure.persistence.json_wishlist_repository import (
    JsonWishlistRepository,
)
from bookstore.infrastructure.persistence.memory_repositories import (
    InMemoryBookRepository,
    InMemoryCartRepository,
    InMemoryWishlistRepository,
)
from bookstore.infrastructure.seed import sample_books
from bookstore.infrastructure.storefront import Storefront


def in_memory_storefront(books: list[Book] | None = None) -> Storefront:
    """Storefront over process-resident state, seeded with *books*."""
    return Storefront(
        book_repo=InMemoryBookRepository(sample_books() if books is None else books),
        cart_repo=InMemoryCartRepository(),
        wishlist_repo=InMemoryWishlistRepository(),
    )


def json_storefront(settings: Settings) -> Storefront:
    """Storefront whose state lives in JSON files under ``settings.data_dir``."""
    data_dir = settings.data_dir
    return Storefront(
        book_repo=JsonBookRepository(data_dir / "books.json", seed=sample_books()),
        cart_repo=JsonCartRepository(data_dir / "carts.json"),
        wishlist_repo=JsonWishlistRepository(data_dir / "wishlists.json"),
    )
