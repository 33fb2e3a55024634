"""This module provides the service that writes the site out as static files."""

import shutil
from pathlib import Path

from portfolio.providers.logging import Logger, LoggingProvider
from portfolio.services.site import CASE_VIEW_PREFIX, HOME_VIEW, SiteService

STATIC_PATH = Path(__file__).resolve().parent.parent / "web" / "static"


class StaticSiteBuilder:
    """Renders every view in every language into a directory tree.

    The layout is ``<out>/<language>/index.html`` for the home view,
    ``<out>/<language>/cases/<slug>.html`` for case views and
    ``<out>/static`` for the assets.
    """

    logger: Logger
    site: SiteService

    def __init__(self, site: SiteService) -> None:
        """Initializes the builder.

        Args:
            site: The site service used to render views.
        """
        self.logger = LoggingProvider().get_logger()
        self.site = site

    def output_path(self, out_dir: Path, language: str, view: str) -> Path:
        """Computes where a rendered view is written.

        Args:
            out_dir: The build root.
            language: The language code.
            view: The view name.

        Returns:
            The file path for the view.
        """
        if view == HOME_VIEW:
            return out_dir / language / "index.html"
        return out_dir / language / "cases" / f"{view.removeprefix(CASE_VIEW_PREFIX)}.html"

    async def build(self, out_dir: Path, languages: list[str] | None = None) -> list[Path]:
        """Renders all views and copies the static assets.

        Args:
            out_dir: The build root. Created if missing.
            languages: The languages to build. Defaults to all supported ones.

        Returns:
            The paths of the written HTML files.
        """
        languages = languages or list(self.site.config.SUPPORTED_LANGUAGES)
        written = []
        for language in languages:
            context = self.site.context_for(language)
            if context.language != language:
                self.logger.warning(f"Skipping unsupported language '{language}'.")
                continue
            for view in self.site.views():
                page = await self.site.render(view, context)
                path = self.output_path(out_dir, language, view)
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(page.html, encoding="utf-8")
                written.append(path)
                self.logger.debug(f"Wrote {path}")

        if STATIC_PATH.is_dir():
            shutil.copytree(STATIC_PATH, out_dir / "static", dirs_exist_ok=True)
        self.logger.info(f"Built {len(written)} pages into {out_dir}")
        return written
