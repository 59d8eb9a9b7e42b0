"""Book aggregate and catalog search criteria.

Books live in the catalog independently of carts and wishlists, which
only ever hold copies of them.
"""

from __future__ import annotations

from dataclasses import dataclass

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.value_objects import Money


@dataclass
class Book:
    """A purchasable book in the catalog.

    ``stock`` is read by the cart admission check but never changed by
    cart or wishlist operations.
    """

    id: str
    name: str
    author: str
    price: Money
    stock: int
    category: str
    description: str = ""
    image: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Book id is required")
        if self.stock < 0:
            raise ValidationError(
                f"Stock cannot be negative for book '{self.id}', got {self.stock}"
            )

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock >= quantity


@dataclass(frozen=True)
class BookSearchCriteria:
    """Filters for a catalog search, combined with logical AND.

    ``name`` and ``author`` are case-sensitive substring filters,
    ``category`` must match exactly. A filter that is ``None`` or an
    empty string imposes no constraint.
    """

    name: str | None = None
    author: str | None = None
    category: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.name or self.author or self.category)

    def matches(self, book: Book) -> bool:
        if self.name and self.name not in book.name:
            return False
        if self.author and self.author not in book.author:
            return False
        if self.category and book.category != self.category:
            return False
        return True
