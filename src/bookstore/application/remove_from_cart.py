"""Application service: Remove From Cart use case."""

from __future__ import annotations

from bookstore.application.dto import CartDTO, cart_to_dto
from bookstore.application.locking import OwnerLocks
from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.repository.cart_repository import CartRepository


class RemoveFromCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        locks: OwnerLocks | None = None,
    ) -> None:
        self._cart_repo = cart_repo
        self._locks = OwnerLocks() if locks is None else locks

    def handle(self, user_id: int, line_id: int) -> CartDTO:
        with self._locks.for_owner(user_id):
            cart = self._cart_repo.get_for_user(user_id)
            if cart is None:
                raise EntityNotFoundError(f"Item #{line_id} not found in cart")
            cart.remove_item(line_id)
            self._cart_repo.save(cart)
            return cart_to_dto(cart)
