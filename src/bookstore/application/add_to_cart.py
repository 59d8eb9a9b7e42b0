"""Application service: Add To Cart use case.

Coordinates the catalog (book lookup) with the user's Cart aggregate.
The admission check runs before anything is mutated, so a rejected
request leaves the cart exactly as it was.
"""

from __future__ import annotations

from bookstore.application.dto import CartDTO, cart_to_dto
from bookstore.application.locking import OwnerLocks
from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.model.cart import Cart
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.cart_repository import CartRepository


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        book_repo: BookRepository,
        locks: OwnerLocks | None = None,
    ) -> None:
        self._cart_repo = cart_repo
        self._book_repo = book_repo
        self._locks = OwnerLocks() if locks is None else locks

    def handle(self, user_id: int, book_id: str, quantity: int) -> CartDTO:
        """Add *quantity* copies of a book to the user's cart.

        Steps:
        1. Resolve the book (fail if not in the catalog).
        2. Let the Cart check stock and append a new line.
        3. Persist and return a DTO.
        """
        book = self._book_repo.get_by_id(book_id)
        if book is None:
            raise EntityNotFoundError(f"Book not found: '{book_id}'")

        with self._locks.for_owner(user_id):
            cart = self._cart_repo.get_for_user(user_id) or Cart.empty(user_id)
            cart.add_item(book, quantity)
            self._cart_repo.save(cart)
            return cart_to_dto(cart)
