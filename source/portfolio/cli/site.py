"""This module defines the 'site' command group for the portfolio CLI."""

import asyncio
from pathlib import Path

import click
from portfolio.exceptions.site import SiteError
from rich.progress import Progress, SpinnerColumn, TextColumn


@click.group("site")
def site_group() -> None:
    """Groups commands that render the site."""
    pass


@site_group.command("build")
@click.option(
    "--out",
    "out_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("dist"),
    help="Directory to write the static site to.",
)
@click.option("--language", "languages", multiple=True, help="Language to build. Repeat for several.")
def build(out_dir: Path, languages: tuple[str, ...]) -> None:
    """Renders every view in every language as static HTML.

    Args:
        out_dir: Directory to write the static site to.
        languages: Languages to build. All supported ones if empty.
    """
    from portfolio.services.build import StaticSiteBuilder
    from portfolio.services.site import SiteService

    try:
        builder = StaticSiteBuilder(SiteService())
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Building site...", total=None)
            written = asyncio.run(builder.build(out_dir, list(languages) or None))
    except SiteError as e:
        click.secho(f"Build failed: {e}", fg="red")
        raise click.Abort() from e

    click.secho(f"Wrote {len(written)} pages to {out_dir}", fg="green")


@site_group.command("views")
def views() -> None:
    """Lists the views that can be rendered."""
    from portfolio.services.site import SiteService

    for name in SiteService().views():
        click.echo(name)
