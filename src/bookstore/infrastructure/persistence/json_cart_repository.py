"""JSON-file-backed implementation of CartRepository.

Carts are stored as an object keyed by user id. Each line keeps its own
copy of the book, and ``next_line_id`` is persisted so line ids stay
unique across CLI invocations.
"""

from __future__ import annotations

import json
from pathlib import Path

from bookstore.domain.model.cart import Cart, CartLine
from bookstore.domain.model.value_objects import Money, Quantity
from bookstore.domain.repository.cart_repository import CartRepository
from bookstore.infrastructure.persistence.json_book_repository import (
    JsonBookRepository,
)


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CartRepository interface ---------------------------------------------

    def get_for_user(self, user_id: int) -> Cart | None:
        raw = self._load_raw().get(str(user_id))
        if raw is None:
            return None
        return self._to_domain(raw)

    def save(self, cart: Cart) -> None:
        carts = self._load_raw()
        carts[str(cart.user_id)] = self._to_raw(cart)
        self._persist_raw(carts)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "user_id": cart.user_id,
            "discount": str(cart.discount.amount),
            "currency": cart.discount.currency,
            "next_line_id": cart.next_line_id,
            "items": [
                {
                    "id": line.id,
                    "quantity": line.quantity.value,
                    "book": JsonBookRepository.to_raw(line.book),
                }
                for line in cart.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        items = [
            CartLine(
                id=i["id"],
                book=JsonBookRepository.to_domain(i["book"]),
                quantity=Quantity(i["quantity"]),
            )
            for i in raw["items"]
        ]
        return Cart(
            user_id=raw["user_id"],
            items=items,
            discount=Money.of(raw["discount"], raw.get("currency", "USD")),
            next_line_id=raw["next_line_id"],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, carts: dict[str, dict]) -> None:
        self._file_path.write_text(
            json.dumps(carts, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
