"""Application service: Show Wishlist use case (query)."""

from __future__ import annotations

from bookstore.application.dto import WishlistDTO, wishlist_to_dto
from bookstore.application.locking import OwnerLocks
from bookstore.domain.model.wishlist import Wishlist
from bookstore.domain.repository.wishlist_repository import WishlistRepository


class ShowWishlistHandler:

    def __init__(
        self,
        wishlist_repo: WishlistRepository,
        locks: OwnerLocks | None = None,
    ) -> None:
        self._wishlist_repo = wishlist_repo
        self._locks = OwnerLocks() if locks is None else locks

    def handle(self, user_id: int) -> WishlistDTO:
        with self._locks.for_owner(user_id):
            wishlist = (
                self._wishlist_repo.get_for_user(user_id) or Wishlist.empty(user_id)
            )
            return wishlist_to_dto(wishlist)
