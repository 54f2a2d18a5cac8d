"""CLI commands for browsing and shopping."""

from __future__ import annotations

import click

from storefront.application.list_products import ListProductsHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.catalog import Catalog
from storefront.infrastructure import bootstrap
from storefront.infrastructure.bootstrap import Settings
from storefront.infrastructure.cli.rendering import render_catalog
from storefront.infrastructure.cli.session import ShopSession


def _load_catalog(settings: Settings) -> Catalog:
    try:
        return bootstrap.catalog(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except OSError as exc:
        raise click.ClickException(
            f"Cannot load catalog seed {settings.catalog_path}: {exc.strerror or exc}"
        )


@click.command("shop")
@click.pass_obj
def shop(settings: Settings) -> None:
    """Start an interactive shopping session."""
    session = ShopSession(
        catalog=_load_catalog(settings),
        cart=bootstrap.cart(settings),
        ledger=bootstrap.order_ledger(settings),
        audit_log=bootstrap.audit_log(settings),
    )
    session.run()


@click.command("products")
@click.pass_obj
def products(settings: Settings) -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(_load_catalog(settings))
    render_catalog(handler.handle())
