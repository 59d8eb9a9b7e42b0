from __future__ import annotations

import dataclasses
from pathlib import Path

import click

from bookstore.infrastructure.bootstrap import json_storefront
from bookstore.infrastructure.cli.book_commands import books_list, books_search, books_show
from bookstore.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_remove,
    cart_show,
)
from bookstore.infrastructure.cli.output import CliState
from bookstore.infrastructure.cli.wishlist_commands import (
    wishlist_add,
    wishlist_remove,
    wishlist_show,
)
from bookstore.infrastructure.config import Settings
from bookstore.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--user", "user_id", type=int, default=None, help="Acting user ID.")
@click.option("--data-dir", type=click.Path(file_okay=False, path_type=Path),
              default=None, help="Directory holding the JSON data files.")
@click.option("--json", "as_json", is_flag=True, default=False,
              help="Print the raw status/message/data envelope.")
@click.pass_context
def cli(ctx: click.Context, user_id: int | None, data_dir: Path | None, as_json: bool) -> None:
    """Bookstore — catalog, cart and wishlist"""
    settings = Settings.from_env()
    if data_dir is not None:
        settings = dataclasses.replace(settings, data_dir=data_dir)
    setup_logging(settings)

    ctx.obj = CliState(
        storefront=json_storefront(settings),
        user_id=settings.default_user_id if user_id is None else user_id,
        as_json=as_json,
    )


@cli.group()
def books() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def wishlist() -> None:
    """Manage the wishlist."""


# Register subcommands
books.add_command(books_list)
books.add_command(books_search)
books.add_command(books_show)
cart.add_command(cart_add)
cart.add_command(cart_checkout)
cart.add_command(cart_remove)
cart.add_command(cart_show)
wishlist.add_command(wishlist_add)
wishlist.add_command(wishlist_remove)
wishlist.add_command(wishlist_show)
