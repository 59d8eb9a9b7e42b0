"""JSON-file-backed implementation of WishlistRepository."""

from __future__ import annotations

import json
from pathlib import Path

from bookstore.domain.model.wishlist import Wishlist
from bookstore.domain.repository.wishlist_repository import WishlistRepository
from bookstore.infrastructure.persistence.json_book_repository import (
    JsonBookRepository,
)


class JsonWishlistRepository(WishlistRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- WishlistRepository interface -----------------------------------------

    def get_for_user(self, user_id: int) -> Wishlist | None:
        raw = self._load_raw().get(str(user_id))
        if raw is None:
            return None
        return Wishlist(
            user_id=raw["user_id"],
            books=[JsonBookRepository.to_domain(b) for b in raw["books"]],
        )

    def save(self, wishlist: Wishlist) -> None:
        records = self._load_raw()
        records[str(wishlist.user_id)] = {
            "user_id": wishlist.user_id,
            "books": [JsonBookRepository.to_raw(b) for b in wishlist.books],
        }
        self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: dict[str, dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
