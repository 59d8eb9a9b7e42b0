"""End-to-end tests for the click CLI against JSON files in tmp_path."""

import json

from click.testing import CliRunner

from bookstore.infrastructure.cli.main import cli


def _run(tmp_path, *args):
    runner = CliRunner()
    return runner.invoke(
        cli,
        ["--data-dir", str(tmp_path), *args],
        env={"LOG_LEVEL": "ERROR", "LOG_TO_FILE": "false"},
    )


def _run_json(tmp_path, *args):
    result = _run(tmp_path, "--json", *args)
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


class TestBooksCommands:

    def test_list(self, tmp_path):
        result = _run(tmp_path, "books", "list")
        assert result.exit_code == 0
        assert "Fetched all books" in result.output
        assert "book1" in result.output
        assert "book2" in result.output

    def test_search_json(self, tmp_path):
        envelope = _run_json(tmp_path, "books", "search", "--category", "Non-fiction")
        assert [b["id"] for b in envelope["data"]] == ["book2"]

    def test_show_missing_fails(self, tmp_path):
        result = _run(tmp_path, "books", "show", "--id", "nope")
        assert result.exit_code != 0
        assert "Book not found" in result.output


class TestCartCommands:

    def test_state_persists_between_invocations(self, tmp_path):
        _run_json(tmp_path, "cart", "add", "--book", "book1", "--quantity", "3")
        envelope = _run_json(tmp_path, "cart", "show")
        assert envelope["data"]["total_items"] == 3
        assert envelope["data"]["total_price"] == "$59.97"

    def test_checkout_then_empty(self, tmp_path):
        _run_json(tmp_path, "cart", "add", "--book", "book2")
        envelope = _run_json(tmp_path, "cart", "checkout")
        assert envelope["message"] == "Checkout successful"
        assert envelope["data"]["total_items"] == 1

        result = _run(tmp_path, "cart", "checkout")
        assert result.exit_code != 0
        assert "Cart is empty" in result.output

    def test_remove_line(self, tmp_path):
        _run_json(tmp_path, "cart", "add", "--book", "book1")
        _run_json(tmp_path, "cart", "add", "--book", "book2")
        envelope = _run_json(tmp_path, "cart", "remove", "--line", "1")
        assert [line["id"] for line in envelope["data"]["items"]] == [2]

    def test_users_are_isolated(self, tmp_path):
        _run_json(tmp_path, "--user", "2", "cart", "add", "--book", "book1")
        envelope = _run_json(tmp_path, "--user", "3", "cart", "show")
        assert envelope["data"]["items"] == []

    def test_table_output(self, tmp_path):
        result = _run(tmp_path, "cart", "add", "--book", "book1", "--quantity", "2")
        assert result.exit_code == 0
        assert "Book added to cart" in result.output
        assert "$39.98" in result.output


class TestWishlistCommands:

    def test_add_duplicate_remove(self, tmp_path):
        _run_json(tmp_path, "wishlist", "add", "--book", "book1")

        duplicate = _run(tmp_path, "wishlist", "add", "--book", "book1")
        assert duplicate.exit_code != 0
        assert "already in the wishlist" in duplicate.output

        envelope = _run_json(tmp_path, "wishlist", "remove", "--book", "book1")
        assert envelope["data"]["books"] == []
