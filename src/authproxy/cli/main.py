"""authproxy CLI entry point."""

import logging

import click

from authproxy import __version__
from authproxy.logging import LoggingConfig, configure_logging, level_from_verbosity

from .commands.fetch import fetch
from .commands.status import status

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="authproxy")
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)"
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json", "rich"]),
    default="console",
    show_default=True,
    help="Log output format",
)
@click.pass_context
def cli(ctx: click.Context, verbose: int, log_format: str) -> None:
    """Route HTTP clients through the local ACP or GAP proxy.

    \b
    Examples:
        authproxy status
        authproxy status --product gap
        authproxy fetch https://api.example.com/health --product acp
    """
    configure_logging(
        LoggingConfig(
            level=level_from_verbosity(verbose),
            format_type=log_format,
            service_name="authproxy-cli",
            version=__version__,
        )
    )
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    logger.debug(f"authproxy CLI {__version__} started")


cli.add_command(status)
cli.add_command(fetch)


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
