"""This module initializes the CLI application."""

import click
from portfolio.cli.i18n import i18n_group
from portfolio.cli.site import site_group
from portfolio.cli.web import web_group
from portfolio.providers.logging import LoggingProvider


def create_cli() -> click.Group:
    """Create and configure the main CLI group with all subcommands.

    Returns:
        The main Click command group for the application.
    """

    @click.group()
    @click.option(
        "--log-level",
        type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
        help="Override the default log level for this command.",
    )
    def cli(log_level: str | None) -> None:
        """Serve, build and check the bilingual portfolio site.

        Args:
            log_level: The desired logging level.
        """
        LoggingProvider().get_logger(level_override=log_level)

    cli.add_command(web_group)
    cli.add_command(site_group)
    cli.add_command(i18n_group)

    return cli
