"""Unit tests for the Wishlist aggregate."""

import pytest

from bookstore.domain.exceptions import (
    DuplicateEntryError,
    EntityNotFoundError,
    PreconditionFailedError,
)
from bookstore.domain.model.wishlist import Wishlist
from tests.fakes import make_book


class TestWishlist:

    def test_add_then_duplicate_then_remove(self):
        wishlist = Wishlist.empty(1)
        wishlist.add(make_book("book1"))

        with pytest.raises(DuplicateEntryError, match="already in the wishlist"):
            wishlist.add(make_book("book1"))
        assert wishlist.book_ids == ["book1"]

        removed = wishlist.remove("book1")
        assert removed.id == "book1"
        assert wishlist.books == []

    def test_duplicate_is_a_precondition_failure(self):
        wishlist = Wishlist.empty(1)
        wishlist.add(make_book("book1"))
        with pytest.raises(PreconditionFailedError):
            wishlist.add(make_book("book1"))

    def test_remove_missing_is_not_found(self):
        wishlist = Wishlist.empty(1)
        wishlist.add(make_book("book1"))
        with pytest.raises(EntityNotFoundError, match="not found in wishlist"):
            wishlist.remove("book2")
        assert wishlist.book_ids == ["book1"]

    def test_insertion_order_preserved(self):
        wishlist = Wishlist.empty(1)
        for book_id in ("c", "a", "b"):
            wishlist.add(make_book(book_id))
        wishlist.remove("a")
        assert wishlist.book_ids == ["c", "b"]

    def test_contains(self):
        wishlist = Wishlist.empty(1)
        wishlist.add(make_book("book1"))
        assert wishlist.contains("book1")
        assert not wishlist.contains("book2")
