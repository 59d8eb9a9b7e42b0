"""Shared CLI plumbing: per-invocation state and response rendering."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable

import click

from bookstore.infrastructure.storefront import ApiResponse, Storefront


@dataclass
class CliState:
    storefront: Storefront
    user_id: int
    as_json: bool = False


def emit(state: CliState, response: ApiResponse, render: Callable[[Any], None]) -> None:
    """Print *response*, or fail the command if it carries an error."""
    if not response.ok:
        raise click.ClickException(response.message)

    if state.as_json:
        click.echo(json.dumps(response.to_dict(), indent=2))
        return

    click.echo(response.message)
    render(response.data)


def echo_books(books: list[dict]) -> None:
    if not books:
        click.echo("No books found.")
        return

    click.echo(f"{'ID':<8} {'Name':<20} {'Author':<16} {'Category':<12} {'Price':>8} {'Stock':>6}")
    click.echo("-" * 75)
    for b in books:
        click.echo(
            f"{b['id']:<8} {b['name']:<20} {b['author']:<16} "
            f"{b['category']:<12} {b['price']:>8} {b['stock']:>6}"
        )


def echo_cart(cart: dict) -> None:
    click.echo(f"User: {cart['user_id']}")
    click.echo()

    if not cart["items"]:
        click.echo("  Cart is empty.")
        return

    click.echo(f"  {'Line':<6} {'Book':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*55}")
    for line in cart["items"]:
        book = line["book"]
        click.echo(
            f"  {line['id']:<6} {book['name']:<20} {line['quantity']:>5} "
            f"{book['price']:>10} {line['line_total']:>10}"
        )
    click.echo(f"  {'-'*55}")
    click.echo(f"  {'Items':<27} {cart['total_items']:>28}")
    click.echo(f"  {'Discount':<27} {cart['discount']:>28}")
    click.echo(f"  {'Cart Total':<27} {cart['total_price']:>28}")
