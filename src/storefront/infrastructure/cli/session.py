"""Interactive shopping session: the menu loop around the use cases.

Every domain error is shown as one line and the session carries on.
"""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import to_order_dto
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException, InvalidInputError
from storefront.domain.model.cart import Cart
from storefront.domain.model.catalog import Catalog
from storefront.domain.model.payment import PaymentMethod
from storefront.domain.repository.audit_log import AuditLog
from storefront.domain.repository.order_ledger import OrderLedger
from storefront.infrastructure.cli.prompts import (
    request_integer,
    request_string,
    request_yes_no,
)
from storefront.infrastructure.cli.rendering import (
    render_cart,
    render_catalog,
    render_order,
)

MAIN_MENU = ("View Products", "View Shopping Cart", "View Orders", "Exit")


class ShopSession:

    def __init__(
        self,
        catalog: Catalog,
        cart: Cart,
        ledger: OrderLedger,
        audit_log: AuditLog,
    ) -> None:
        self._cart = cart
        self._add_to_cart = AddToCartHandler(catalog)
        self._list_products = ListProductsHandler(catalog)
        self._show_cart = ShowCartHandler()
        self._checkout = CheckoutHandler(ledger, audit_log)
        self._list_orders = ListOrdersHandler(ledger)

    def run(self) -> None:
        click.echo("===== Welcome to the Storefront =====")
        actions = (self.view_products, self.view_cart, self.view_orders)

        while True:
            click.echo("\n===== Main Menu =====")
            for number, label in enumerate(MAIN_MENU, start=1):
                click.echo(f"{number}. {label}")

            choice = request_integer(f"Enter your choice (1-{len(MAIN_MENU)})")
            if choice == len(MAIN_MENU):
                click.echo("Thank you for shopping with us. Goodbye!")
                return
            if choice > len(MAIN_MENU):
                click.echo(f"Invalid choice. Please enter a number between 1 and {len(MAIN_MENU)}.")
                continue

            try:
                actions[choice - 1]()
            except DomainException as exc:
                click.echo(f"An error occurred: {exc}")

    # --- Screens --------------------------------------------------------------

    def view_products(self) -> None:
        render_catalog(self._list_products.handle())

        while True:
            try:
                item_id = request_string(
                    "\nEnter the ID of the product you want to add to the shopping cart"
                )
                self._add_to_cart.find(item_id)
                quantity = request_integer("Enter quantity")
                self._add_to_cart.handle(self._cart, item_id, quantity)
                click.echo("Product added successfully!")

                if not request_yes_no("Do you want to add another product?"):
                    return
            except DomainException as exc:
                click.echo(str(exc))
                if not request_yes_no("Do you want to try again?"):
                    return

    def view_cart(self) -> None:
        cart = self._show_cart.handle(self._cart)
        if cart.is_empty:
            click.echo("Your shopping cart is empty. Please add products before checking out.")
            return

        render_cart(cart)
        if not request_yes_no("\nDo you want to check out all the products?"):
            return

        payment = self._select_payment()
        click.echo(payment.settlement_message(self._cart.total()))
        try:
            order = self._checkout.handle(self._cart, payment)
        except DomainException as exc:
            click.echo(f"Error: {exc}")
            return

        self._cart.clear()
        click.echo("\nYou have successfully checked out the products!")
        render_order(to_order_dto(order))

    def view_orders(self) -> None:
        orders = self._list_orders.handle()
        if not orders:
            click.echo("No orders to display.")
            return

        click.echo("\n----- Order History -----")
        for order in orders:
            render_order(order)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _select_payment() -> PaymentMethod:
        while True:
            click.echo("\nSelect payment method:")
            for number, method in enumerate(PaymentMethod, start=1):
                click.echo(f"{number}. {method.label}")
            choice = request_integer(f"Enter your choice (1-{len(PaymentMethod)})")
            try:
                return PaymentMethod.from_choice(choice)
            except InvalidInputError as exc:
                click.echo(str(exc))
