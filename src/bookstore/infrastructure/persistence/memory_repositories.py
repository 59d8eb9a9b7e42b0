"""In-memory repositories — process-resident state.

They implement the same abstract interfaces as the JSON repositories but
keep everything in a dict. The storefront uses these by default; tests
use them too.
"""

from __future__ import annotations

from bookstore.domain.model.book import Book
from bookstore.domain.model.cart import Cart
from bookstore.domain.model.wishlist import Wishlist
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.cart_repository import CartRepository
from bookstore.domain.repository.wishlist_repository import WishlistRepository


class InMemoryBookRepository(BookRepository):

    def __init__(self, books: list[Book] | None = None) -> None:
        self._store: dict[str, Book] = {}
        for book in books or []:
            self._store[book.id] = book

    def get_by_id(self, book_id: str) -> Book | None:
        return self._store.get(book_id)

    def list_all(self) -> list[Book]:
        return list(self._store.values())


class InMemoryCartRepository(CartRepository):

    def __init__(self) -> None:
        self._store: dict[int, Cart] = {}

    def get_for_user(self, user_id: int) -> Cart | None:
        return self._store.get(user_id)

    def save(self, cart: Cart) -> None:
        self._store[cart.user_id] = cart


class InMemoryWishlistRepository(WishlistRepository):

    def __init__(self) -> None:
        self._store: dict[int, Wishlist] = {}

    def get_for_user(self, user_id: int) -> Wishlist | None:
        return self._store.get(user_id)

    def save(self, wishlist: Wishlist) -> None:
        self._store[wishlist.user_id] = wishlist
