"""CLI commands for the wishlist."""

from __future__ import annotations

import click

from bookstore.infrastructure.cli.output import CliState, echo_books, emit


def _echo_wishlist(wishlist: dict) -> None:
    click.echo(f"User: {wishlist['user_id']}")
    echo_books(wishlist["books"])


@click.command("show")
@click.pass_obj
def wishlist_show(state: CliState) -> None:
    """Show the wishlist."""
    emit(state, state.storefront.get_wishlist(state.user_id), _echo_wishlist)


@click.command("add")
@click.option("--book", "book_id", required=True, help="Book ID.")
@click.pass_obj
def wishlist_add(state: CliState, book_id: str) -> None:
    """Save a book to the wishlist."""
    emit(state, state.storefront.add_to_wishlist(state.user_id, book_id), _echo_wishlist)


@click.command("remove")
@click.option("--book", "book_id", required=True, help="Book ID.")
@click.pass_obj
def wishlist_remove(state: CliState, book_id: str) -> None:
    """Remove a book from the wishlist."""
    emit(state, state.storefront.remove_from_wishlist(state.user_id, book_id), _echo_wishlist)
