"""Application service: Checkout use case.

Returns the cart as it stood at checkout time, while the stored cart is
reset to empty in the same critical section. Stock is not touched:
checkout does not reserve or deduct copies.
"""

from __future__ import annotations

from bookstore.application.dto import CartDTO, cart_to_dto
from bookstore.application.locking import OwnerLocks
from bookstore.domain.exceptions import EmptyCartError
from bookstore.domain.repository.cart_repository import CartRepository


class CheckoutCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        locks: OwnerLocks | None = None,
    ) -> None:
        self._cart_repo = cart_repo
        self._locks = OwnerLocks() if locks is None else locks

    def handle(self, user_id: int) -> CartDTO:
        with self._locks.for_owner(user_id):
            cart = self._cart_repo.get_for_user(user_id)
            if cart is None:
                raise EmptyCartError("Cart is empty")
            snapshot = cart.checkout()
            self._cart_repo.save(cart)
        return cart_to_dto(snapshot)
