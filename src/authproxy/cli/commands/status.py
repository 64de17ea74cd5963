"""Proxy configuration status command."""

import logging
from typing import List, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from authproxy import acp, gap
from authproxy.core.config import ProxyProduct, load_settings, resolve_token
from authproxy.exceptions import ConfigurationError
from authproxy.infrastructure.http import ProxyClientFactory

console = Console()
logger = logging.getLogger(__name__)

FACTORIES = {
    ProxyProduct.ACP: acp.factory,
    ProxyProduct.GAP: gap.factory,
}


def _selected_products(product: str) -> List[ProxyProduct]:
    if product == "all":
        return list(ProxyProduct)
    return [ProxyProduct(product)]


def _status_row(factory: ProxyClientFactory) -> Tuple[List[str], bool]:
    """Table row for one product and whether the product is usable."""
    product = factory.product
    problems = []

    try:
        settings = load_settings(product, factory.env_file)
        proxy_url = escape(settings.proxy_url)
        resolution = resolve_token(product, settings=settings)
    except ConfigurationError as e:
        logger.debug(f"{product.display_name} settings invalid: {e.message}")
        settings = None
        proxy_url = "[red]invalid[/red]"
        resolution = None
        problems.append(e.message)

    if resolution is None:
        token_cell, source_cell = "[red]missing[/red]", "-"
        if settings is not None:
            problems.append(f"{product.token_env_var} not set")
    else:
        token_cell, source_cell = resolution.masked, resolution.source.value

    ca_path = factory.ca_cert_path
    if ca_path.is_file():
        ca_cell = escape(str(ca_path))
    else:
        ca_cell = f"[red]{escape(str(ca_path))} (missing)[/red]"
        problems.append("CA certificate missing")

    status_cell = "[green]OK[/green]" if not problems else f"[red]{escape('; '.join(problems))}[/red]"
    row = [product.display_name, token_cell, source_cell, proxy_url, ca_cell, status_cell]
    return row, not problems


@click.command()
@click.option(
    "--product", "-p",
    type=click.Choice(["acp", "gap", "all"]),
    default="all",
    show_default=True,
    help="Proxy product to check",
)
def status(product: str) -> None:
    """Show token, proxy URL and CA certificate status.

    Exits with status 1 when a listed product is not usable.
    """
    table = Table(title="Proxy configuration")
    for column in ("Product", "Token", "Source", "Proxy URL", "CA certificate", "Status"):
        table.add_column(column)

    healthy = True
    for selected in _selected_products(product):
        row, usable = _status_row(FACTORIES[selected])
        healthy = healthy and usable
        table.add_row(*row)

    console.print(table)
    if not healthy:
        raise SystemExit(1)
