import click
import pydantic

from storefront.infrastructure.bootstrap import Settings
from storefront.infrastructure.cli.shop_commands import products, shop
from storefront.infrastructure.logging_config import setup_logging


def _describe_config_errors(exc: pydantic.ValidationError) -> str:
    problems = [
        f"STOREFRONT_{'_'.join(str(part) for part in error['loc']).upper()}: {error['msg']}"
        for error in exc.errors()
    ]
    return "Invalid configuration: " + "; ".join(problems)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Storefront - browse, fill a cart and check out."""
    setup_logging(verbose)
    try:
        ctx.obj = Settings()
    except pydantic.ValidationError as exc:
        raise click.ClickException(_describe_config_errors(exc)) from exc


cli.add_command(shop)
cli.add_command(products)
