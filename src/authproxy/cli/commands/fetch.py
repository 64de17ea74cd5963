"""Send a single request through the proxy."""

import logging
from typing import Optional

import click
import requests
from rich.console import Console
from rich.markup import escape

from authproxy import acp, gap
from authproxy.constants import DEFAULT_TIMEOUT_SECONDS
from authproxy.exceptions import AuthProxyError

console = Console()
logger = logging.getLogger(__name__)

MODULES = {"acp": acp, "gap": gap}


@click.command()
@click.argument("url")
@click.option(
    "--product", "-p",
    type=click.Choice(["acp", "gap"]),
    required=True,
    help="Proxy product to route through",
)
@click.option("--token", type=str, default=None, help="Proxy token (defaults to <PRODUCT>_TOKEN)")
@click.option(
    "--timeout",
    type=float,
    default=DEFAULT_TIMEOUT_SECONDS,
    show_default=True,
    help="Request timeout in seconds",
)
def fetch(url: str, product: str, token: Optional[str], timeout: float) -> None:
    """GET URL through the proxy and report the response status."""
    try:
        with MODULES[product].create(token=token, timeout=timeout) as client:
            response = client.get(url)
    except AuthProxyError as e:
        e.add_context(url=url)
        logger.debug("Proxy client setup failed", extra={"extra_context": {"error": e.to_dict()}})
        console.print(str(e), style="red", markup=False, highlight=False)
        raise SystemExit(1)
    except requests.RequestException as e:
        logger.debug(f"Request to {url} failed", exc_info=True)
        console.print(f"[red]Request failed:[/red] {escape(str(e))}", highlight=False)
        raise SystemExit(1)

    style = "green" if response.ok else "yellow"
    console.print(
        f"[{style}]{response.status_code} {response.reason}[/{style}] "
        f"{len(response.content)} bytes"
    )
    if not response.ok:
        raise SystemExit(1)
