"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from bookstore.infrastructure.cli.output import CliState, echo_cart, emit


@click.command("show")
@click.pass_obj
def cart_show(state: CliState) -> None:
    """Show the current cart."""
    emit(state, state.storefront.get_cart(state.user_id), echo_cart)


@click.command("add")
@click.option("--book", "book_id", required=True, help="Book ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Number of copies.")
@click.pass_obj
def cart_add(state: CliState, book_id: str, quantity: int) -> None:
    """Add copies of a book to the cart."""
    emit(state, state.storefront.add_to_cart(state.user_id, book_id, quantity), echo_cart)


@click.command("remove")
@click.option("--line", "line_id", required=True, type=int, help="Cart line ID.")
@click.pass_obj
def cart_remove(state: CliState, line_id: int) -> None:
    """Remove a line from the cart."""
    emit(state, state.storefront.remove_from_cart(state.user_id, line_id), echo_cart)


@click.command("checkout")
@click.pass_obj
def cart_checkout(state: CliState) -> None:
    """Check out the cart; prints the order and empties the cart."""
    emit(state, state.storefront.checkout(state.user_id), echo_cart)
