"""Cart aggregate — one user's pending order.

The Cart owns its lines. ``total_items`` and ``total_price`` are always
derived from the lines, so they cannot drift from ``items`` no matter
which sequence of add/remove/checkout calls produced the cart.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from bookstore.domain.exceptions import (
    EmptyCartError,
    EntityNotFoundError,
    InsufficientStockError,
)
from bookstore.domain.model.book import Book
from bookstore.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    """A quantity of one book, with the book copied at insertion time."""

    id: int
    book: Book
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.book.price * self.quantity.value


@dataclass(frozen=True)
class CartSnapshot:
    """Read-only picture of a cart, returned by ``Cart.checkout()``."""

    user_id: int
    items: tuple[CartLine, ...]
    discount: Money

    @property
    def total_items(self) -> int:
        return sum(line.quantity.value for line in self.items)

    @property
    def total_price(self) -> Money:
        return _sum_lines(self.items)


@dataclass
class Cart:
    """Aggregate root for a user's shopping cart.

    Line ids come from ``next_line_id``, a per-cart counter that only
    ever moves forward, so an id is never handed out twice even after
    removals or a checkout.
    """

    user_id: int
    items: list[CartLine] = field(default_factory=list)
    discount: Money = field(default_factory=Money.zero)
    next_line_id: int = 1

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def empty(user_id: int) -> Cart:
        return Cart(user_id=user_id)

    # --- Mutations ------------------------------------------------------------

    def add_item(self, book: Book, quantity: int) -> CartLine:
        """Append a line for *quantity* copies of *book*.

        The admission check compares the requested quantity with the
        book's stock; copies already in the cart are not counted.
        """
        qty = Quantity(quantity)
        if not book.has_stock_for(qty.value):
            raise InsufficientStockError(
                f"Insufficient stock for '{book.name}' "
                f"(requested {qty.value}, {book.stock} in stock)"
            )

        line = CartLine(id=self.next_line_id, book=copy.copy(book), quantity=qty)
        self.items.append(line)
        self.next_line_id += 1
        return line

    def remove_item(self, line_id: int) -> CartLine:
        """Remove the line with *line_id* and return it."""
        line = self._find_line(line_id)
        self.items.remove(line)
        return line

    def checkout(self) -> CartSnapshot:
        """Snapshot the cart, then reset it to empty.

        The owner and the line counter survive the reset.
        """
        if self.is_empty:
            raise EmptyCartError("Cart is empty")

        snapshot = CartSnapshot(
            user_id=self.user_id,
            items=tuple(self.items),
            discount=self.discount,
        )
        self.items = []
        self.discount = Money.zero(self.discount.currency)
        return snapshot

    # --- Computed properties --------------------------------------------------

    @property
    def total_items(self) -> int:
        return sum(line.quantity.value for line in self.items)

    @property
    def total_price(self) -> Money:
        return _sum_lines(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    # --- Internal helpers -----------------------------------------------------

    def _find_line(self, line_id: int) -> CartLine:
        for line in self.items:
            if line.id == line_id:
                return line
        raise EntityNotFoundError(f"Item #{line_id} not found in cart")


def _sum_lines(lines) -> Money:
    result = Money.zero()
    for line in lines:
        result = result + line.line_total
    return result
