"""This module defines the 'i18n' command group for the portfolio CLI."""

import click
from rich.console import Console
from rich.table import Table


@click.group("i18n")
def i18n_group() -> None:
    """Groups commands related to the translation table."""
    pass


@i18n_group.command("check")
@click.option("--strict", is_flag=True, help="Exit with an error if any key is missing.")
def check(strict: bool) -> None:
    """Reports translation keys used in markup but absent from the table.

    Missing keys are silently left untranslated at runtime; this command is
    the place to catch them before publishing.

    Args:
        strict: If True, missing keys make the command fail.
    """
    from portfolio.services.site import SiteService

    missing = SiteService().missing_translations()
    if not missing:
        click.secho("All referenced keys are translated in every language.", fg="green")
        return

    table = Table(title="Missing translations")
    table.add_column("Language")
    table.add_column("Key")
    for language, keys in sorted(missing.items()):
        for key in sorted(keys):
            table.add_row(language, key)
    Console().print(table)

    if strict:
        click.secho(f"{sum(len(keys) for keys in missing.values())} missing translations.", fg="red")
        raise click.Abort()


@i18n_group.command("keys")
def keys() -> None:
    """Lists every translation key referenced by the shell and fragments."""
    from portfolio.services.site import SiteService

    for key in sorted(SiteService().used_keys()):
        click.echo(key)
