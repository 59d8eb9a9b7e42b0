"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from bookstore.infrastructure.cli.output import CliState, echo_books, emit


@click.command("list")
@click.pass_obj
def books_list(state: CliState) -> None:
    """List every book in the catalog."""
    emit(state, state.storefront.list_books(), echo_books)


@click.command("search")
@click.option("--name", default=None, help="Substring of the book name.")
@click.option("--author", default=None, help="Substring of the author.")
@click.option("--category", default=None, help="Exact category.")
@click.pass_obj
def books_search(
    state: CliState,
    name: str | None,
    author: str | None,
    category: str | None,
) -> None:
    """Search books; filters are combined with AND."""
    response = state.storefront.search_books(name=name, author=author, category=category)
    emit(state, response, echo_books)


@click.command("show")
@click.option("--id", "book_id", required=True, help="Book ID.")
@click.pass_obj
def books_show(state: CliState, book_id: str) -> None:
    """Show a single book."""
    emit(state, state.storefront.get_book(book_id), lambda book: echo_books([book]))
