"""Abstract repository for the Wishlist aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookstore.domain.model.wishlist import Wishlist


class WishlistRepository(ABC):

    @abstractmethod
    def get_for_user(self, user_id: int) -> Wishlist | None:
        """Return the user's wishlist, or None if they never had one."""

    @abstractmethod
    def save(self, wishlist: Wishlist) -> None:
        """Persist a new or updated wishlist."""
