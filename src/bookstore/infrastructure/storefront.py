"""Storefront — the request/response layer over the core.

Each call runs exactly one use case and wraps the outcome in the
``status`` / ``message`` / ``data`` envelope the bookstore clients
expect. Domain errors are mapped to 4xx statuses with their message;
anything else becomes a 500 whose detail only goes to the log.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Callable

from bookstore.application.add_to_cart import AddToCartHandler
from bookstore.application.add_to_wishlist import AddToWishlistHandler
from bookstore.application.checkout_cart import CheckoutCartHandler
from bookstore.application.list_books import ListBooksHandler
from bookstore.application.locking import OwnerLocks
from bookstore.application.remove_from_cart import RemoveFromCartHandler
from bookstore.application.remove_from_wishlist import RemoveFromWishlistHandler
from bookstore.application.search_books import SearchBooksHandler
from bookstore.application.show_book import ShowBookHandler
from bookstore.application.show_cart import ShowCartHandler
from bookstore.application.show_wishlist import ShowWishlistHandler
from bookstore.domain.exceptions import DomainException, EntityNotFoundError
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.cart_repository import CartRepository
from bookstore.domain.repository.wishlist_repository import WishlistRepository

logger = logging.getLogger(__name__)

HTTP_OK = 200
HTTP_CREATED = 201
HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404
HTTP_INTERNAL_ERROR = 500

INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass(frozen=True)
class ApiResponse:
    status: int
    message: str
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.status < HTTP_BAD_REQUEST

    def to_dict(self) -> dict:
        return {"status": self.status, "message": self.message, "data": self.data}


def status_for(exc: Exception) -> int:
    """Map an exception raised by a use case to a transport status."""
    if isinstance(exc, EntityNotFoundError):
        return HTTP_NOT_FOUND
    if isinstance(exc, DomainException):
        return HTTP_BAD_REQUEST
    return HTTP_INTERNAL_ERROR


def _serialize(result: Any) -> Any:
    if isinstance(result, list):
        return [_serialize(r) for r in result]
    if is_dataclass(result) and not isinstance(result, type):
        return asdict(result)
    return result


class Storefront:

    def __init__(
        self,
        book_repo: BookRepository,
        cart_repo: CartRepository,
        wishlist_repo: WishlistRepository,
        locks: OwnerLocks | None = None,
    ) -> None:
        locks = OwnerLocks() if locks is None else locks
        self._list_books = ListBooksHandler(book_repo)
        self._search_books = SearchBooksHandler(book_repo)
        self._show_book = ShowBookHandler(book_repo)
        self._add_to_cart = AddToCartHandler(cart_repo, book_repo, locks)
        self._remove_from_cart = RemoveFromCartHandler(cart_repo, locks)
        self._show_cart = ShowCartHandler(cart_repo, locks)
        self._checkout = CheckoutCartHandler(cart_repo, locks)
        self._add_to_wishlist = AddToWishlistHandler(wishlist_repo, book_repo, locks)
        self._remove_from_wishlist = RemoveFromWishlistHandler(wishlist_repo, locks)
        self._show_wishlist = ShowWishlistHandler(wishlist_repo, locks)

    # --- Books ----------------------------------------------------------------

    def list_books(self) -> ApiResponse:
        return self._run("list_books", HTTP_OK, "Fetched all books",
                         self._list_books.handle)

    def search_books(
        self,
        name: str | None = None,
        author: str | None = None,
        category: str | None = None,
    ) -> ApiResponse:
        return self._run(
            "search_books", HTTP_OK, "Books fetched successfully",
            lambda: self._search_books.handle(name=name, author=author, category=category),
        )

    def get_book(self, book_id: str) -> ApiResponse:
        return self._run("get_book", HTTP_OK, "Book fetched",
                         lambda: self._show_book.handle(book_id))

    # --- Cart -----------------------------------------------------------------

    def add_to_cart(self, user_id: int, book_id: str, quantity: int) -> ApiResponse:
        return self._run(
            "add_to_cart", HTTP_CREATED, "Book added to cart",
            lambda: self._add_to_cart.handle(user_id, book_id, quantity),
        )

    def remove_from_cart(self, user_id: int, line_id: int) -> ApiResponse:
        return self._run(
            "remove_from_cart", HTTP_OK, "Item removed from cart",
            lambda: self._remove_from_cart.handle(user_id, line_id),
        )

    def get_cart(self, user_id: int) -> ApiResponse:
        return self._run("get_cart", HTTP_OK, "Cart details fetched",
                         lambda: self._show_cart.handle(user_id))

    def checkout(self, user_id: int) -> ApiResponse:
        return self._run("checkout", HTTP_OK, "Checkout successful",
                         lambda: self._checkout.handle(user_id))

    # --- Wishlist -------------------------------------------------------------

    def add_to_wishlist(self, user_id: int, book_id: str) -> ApiResponse:
        return self._run(
            "add_to_wishlist", HTTP_CREATED, "Book added to wishlist",
            lambda: self._add_to_wishlist.handle(user_id, book_id),
        )

    def remove_from_wishlist(self, user_id: int, book_id: str) -> ApiResponse:
        return self._run(
            "remove_from_wishlist", HTTP_OK, "Book removed from wishlist",
            lambda: self._remove_from_wishlist.handle(user_id, book_id),
        )

    def get_wishlist(self, user_id: int) -> ApiResponse:
        return self._run("get_wishlist", HTTP_OK, "Wishlist details fetched",
                         lambda: self._show_wishlist.handle(user_id))

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _run(
        operation: str,
        success_status: int,
        message: str,
        call: Callable[[], Any],
    ) -> ApiResponse:
        try:
            result = call()
        except DomainException as exc:
            status = status_for(exc)
            logger.warning("%s rejected (%s): %s", operation, status, exc)
            return ApiResponse(status=status, message=str(exc))
        except Exception:
            logger.exception("%s failed with an internal error", operation)
            return ApiResponse(status=HTTP_INTERNAL_ERROR, message=INTERNAL_ERROR_MESSAGE)

        logger.info("%s succeeded", operation)
        return ApiResponse(status=success_status, message=message, data=_serialize(result))
