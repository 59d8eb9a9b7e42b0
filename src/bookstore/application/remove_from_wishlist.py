"""Application service: Remove From Wishlist use case."""

from __future__ import annotations

from bookstore.application.dto import WishlistDTO, wishlist_to_dto
from bookstore.application.locking import OwnerLocks
from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.repository.wishlist_repository import WishlistRepository


class RemoveFromWishlistHandler:

    def __init__(
        self,
        wishlist_repo: WishlistRepository,
        locks: OwnerLocks | None = None,
    ) -> None:
        self._wishlist_repo = wishlist_repo
        self._locks = OwnerLocks() if locks is None else locks

    def handle(self, user_id: int, book_id: str) -> WishlistDTO:
        with self._locks.for_owner(user_id):
            wishlist = self._wishlist_repo.get_for_user(user_id)
            if wishlist is None:
                raise EntityNotFoundError(f"Book '{book_id}' not found in wishlist")
            wishlist.remove(book_id)
            self._wishlist_repo.save(wishlist)
            return wishlist_to_dto(wishlist)
