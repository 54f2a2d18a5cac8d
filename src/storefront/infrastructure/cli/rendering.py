"""Console tables for catalog, cart and order contents."""

from __future__ import annotations

import click

from storefront.application.dto import CartDTO, CartLineDTO, ItemDTO, OrderDTO


def _line_table(lines: list[CartLineDTO]) -> None:
    click.echo(f"  {'Product ID':<12} {'Name':<20} {'Price':>10} {'Qty':>5} {'Total':>10}")
    click.echo(f"  {'-'*61}")
    for line in lines:
        click.echo(
            f"  {line.item_id:<12} {line.item_name:<20} {line.unit_price:>10} "
            f"{line.quantity:>5} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*61}")


def render_catalog(items: list[ItemDTO]) -> None:
    click.echo("\n----- Available Products -----")
    if not items:
        click.echo("No products found.")
        return
    click.echo(f"{'Product ID':<12} {'Name':<20} {'Price':>10}")
    click.echo("-" * 44)
    for item in items:
        click.echo(f"{item.id:<12} {item.name:<20} {item.unit_price:>10}")


def render_cart(cart: CartDTO) -> None:
    click.echo(f"\n----- Shopping Cart ({len(cart.lines)}/{cart.capacity}) -----")
    _line_table(cart.lines)
    click.echo(f"  {'Total Amount':<40} {cart.total:>20}")


def render_order(order: OrderDTO) -> None:
    click.echo(f"\nOrder ID: {order.id}")
    click.echo(f"Created:  {order.created_at}")
    click.echo(f"Payment Method: {order.payment_method}")
    _line_table(order.lines)
    click.echo(f"  {'Total Amount':<40} {order.total:>20}")
