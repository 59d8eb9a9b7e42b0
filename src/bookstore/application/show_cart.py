"""Application service: Show Cart use case (query).

A user who never added anything gets an empty cart back. The owner lock
is held while mapping so the totals and lines come from the same state.
"""

from __future__ import annotations

from bookstore.application.dto import CartDTO, cart_to_dto
from bookstore.application.locking import OwnerLocks
from bookstore.domain.model.cart import Cart
from bookstore.domain.repository.cart_repository import CartRepository


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        locks: OwnerLocks | None = None,
    ) -> None:
        self._cart_repo = cart_repo
        self._locks = OwnerLocks() if locks is None else locks

    def handle(self, user_id: int) -> CartDTO:
        with self._locks.for_owner(user_id):
            cart = self._cart_repo.get_for_user(user_id) or Cart.empty(user_id)
            return cart_to_dto(cart)
