"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the storefront/CLI and application layers
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from bookstore.domain.model.book import Book
from bookstore.domain.model.cart import Cart, CartLine, CartSnapshot
from bookstore.domain.model.wishlist import Wishlist


@dataclass(frozen=True)
class BookDTO:
    id: str
    name: str
    author: str
    price: str  # formatted, e.g. "$19.99"
    stock: int
    category: str
    description: str
    image: str


@dataclass(frozen=True)
class CartLineDTO:
    id: int
    quantity: int
    book: BookDTO
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: a cart (or a checkout snapshot) as shown to the user."""

    user_id: int
    total_items: int
    total_price: str
    discount: str
    items: list[CartLineDTO]


@dataclass(frozen=True)
class WishlistDTO:
    user_id: int
    books: list[BookDTO]


# --- Mapping ------------------------------------------------------------------


def book_to_dto(book: Book) -> BookDTO:
    return BookDTO(
        id=book.id,
        name=book.name,
        author=book.author,
        price=str(book.price),
        stock=book.stock,
        category=book.category,
        description=book.description,
        image=book.image,
    )


def _line_to_dto(line: CartLine) -> CartLineDTO:
    return CartLineDTO(
        id=line.id,
        quantity=line.quantity.value,
        book=book_to_dto(line.book),
        line_total=str(line.line_total),
    )


def cart_to_dto(cart: Cart | CartSnapshot) -> CartDTO:
    return CartDTO(
        user_id=cart.user_id,
        total_items=cart.total_items,
        total_price=str(cart.total_price),
        discount=str(cart.discount),
        items=[_line_to_dto(line) for line in cart.items],
    )


def wishlist_to_dto(wishlist: Wishlist) -> WishlistDTO:
    return WishlistDTO(
        user_id=wishlist.user_id,
        books=[book_to_dto(book) for book in wishlist.books],
    )
