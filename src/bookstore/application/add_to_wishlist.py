"""Application service: Add To Wishlist use case."""

from __future__ import annotations

from bookstore.application.dto import WishlistDTO, wishlist_to_dto
from bookstore.application.locking import OwnerLocks
from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.model.wishlist import Wishlist
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.wishlist_repository import WishlistRepository


class AddToWishlistHandler:

    def __init__(
        self,
        wishlist_repo: WishlistRepository,
        book_repo: BookRepository,
        locks: OwnerLocks | None = None,
    ) -> None:
        self._wishlist_repo = wishlist_repo
        self._book_repo = book_repo
        self._locks = OwnerLocks() if locks is None else locks

    def handle(self, user_id: int, book_id: str) -> WishlistDTO:
        book = self._book_repo.get_by_id(book_id)
        if book is None:
            raise EntityNotFoundError(f"Book not found: '{book_id}'")

        with self._locks.for_owner(user_id):
            wishlist = (
                self._wishlist_repo.get_for_user(user_id) or Wishlist.empty(user_id)
            )
            wishlist.add(book)
            self._wishlist_repo.save(wishlist)
            return wishlist_to_dto(wishlist)
