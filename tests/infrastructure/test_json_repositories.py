"""Tests for the JSON-file repositories (uses pytest's tmp_path)."""

import json

from bookstore.domain.model.cart import Cart
from bookstore.domain.model.value_objects import Money
from bookstore.domain.model.wishlist import Wishlist
from bookstore.infrastructure.persistence.json_book_repository import JsonBookRepository
from bookstore.infrastructure.persistence.json_cart_repository import JsonCartRepository
from bookstore.infrastructure.persistence.json_wishlist_repository import (
    JsonWishlistRepository,
)
from bookstore.infrastructure.seed import sample_books
from tests.fakes import make_book


class TestJsonBookRepository:

    def test_seeds_missing_file(self, tmp_path):
        path = tmp_path / "data" / "books.json"
        repo = JsonBookRepository(path, seed=sample_books())

        assert path.exists()
        assert [b.id for b in repo.list_all()] == ["book1", "book2"]
        book1 = repo.get_by_id("book1")
        assert book1.price == Money.of("19.99")
        assert book1.stock == 10
        assert book1.category == "Fiction"

    def test_existing_file_not_reseeded(self, tmp_path):
        path = tmp_path / "books.json"
        path.write_text("[]", encoding="utf-8")
        repo = JsonBookRepository(path, seed=sample_books())
        assert repo.list_all() == []

    def test_missing_book(self, tmp_path):
        repo = JsonBookRepository(tmp_path / "books.json")
        assert repo.get_by_id("book1") is None

    def test_hand_written_float_price_is_exact(self, tmp_path):
        path = tmp_path / "books.json"
        path.write_text(
            json.dumps([{
                "id": "book1", "name": "Book 1", "author": "Author 1",
                "price": 19.99, "stock": 10, "category": "Fiction",
            }]),
            encoding="utf-8",
        )
        book = JsonBookRepository(path).get_by_id("book1")
        assert book.price == Money.of("19.99")

        cart = Cart.empty(1)
        cart.add_item(book, 3)
        assert cart.total_price == Money.of("59.97")


class TestJsonCartRepository:

    def test_round_trips_lines_and_counter(self, tmp_path):
        repo = JsonCartRepository(tmp_path / "carts.json")
        cart = Cart.empty(1)
        cart.add_item(make_book("a", price="19.99"), 3)
        cart.add_item(make_book("b", price="1.00"), 1)
        cart.remove_item(2)
        repo.save(cart)

        loaded = repo.get_for_user(1)

        assert loaded.user_id == 1
        assert [line.id for line in loaded.items] == [1]
        assert loaded.next_line_id == 3
        assert loaded.total_items == 3
        assert loaded.total_price == Money.of("59.97")
        assert loaded.discount == Money.zero()

    def test_unknown_user(self, tmp_path):
        repo = JsonCartRepository(tmp_path / "carts.json")
        assert repo.get_for_user(1) is None

    def test_float_discount_is_exact(self, tmp_path):
        path = tmp_path / "carts.json"
        path.write_text(
            json.dumps({"1": {
                "user_id": 1, "discount": 0.1, "next_line_id": 1, "items": [],
            }}),
            encoding="utf-8",
        )
        assert JsonCartRepository(path).get_for_user(1).discount == Money.of("0.10")

    def test_file_keyed_by_user(self, tmp_path):
        path = tmp_path / "carts.json"
        repo = JsonCartRepository(path)
        repo.save(Cart.empty(1))
        repo.save(Cart.empty(2))
        assert sorted(json.loads(path.read_text(encoding="utf-8"))) == ["1", "2"]


class TestJsonWishlistRepository:

    def test_round_trip(self, tmp_path):
        repo = JsonWishlistRepository(tmp_path / "wishlists.json")
        wishlist = Wishlist.empty(3)
        wishlist.add(make_book("b"))
        wishlist.add(make_book("a"))
        repo.save(wishlist)

        loaded = repo.get_for_user(3)
        assert loaded.book_ids == ["b", "a"]

    def test_unknown_user(self, tmp_path):
        repo = JsonWishlistRepository(tmp_path / "wishlists.json")
        assert repo.get_for_user(3) is None
