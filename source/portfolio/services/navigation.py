"""This module provides the service that resolves in-page navigation.

A target present in the current view is scrolled to directly. A target the
current view replaced (a section of the home view while a case page is
shown) is remembered in the transient preference slot and the client is
asked to reload; the next full render waits for its fragments to load and
then scrolls to the remembered target once.
"""

import asyncio

from bs4 import BeautifulSoup
from portfolio.models.enums import NavigationAction
from portfolio.models.views import NavigationOutcome
from portfolio.providers.config import Config, ConfigProvider
from portfolio.providers.logging import Logger, LoggingProvider
from portfolio.providers.preferences import PreferenceStore


class NavigationHelper:
    """Decides between scrolling and reloading for an anchor target."""

    config: Config
    logger: Logger

    def __init__(self, config: Config | None = None) -> None:
        """Initializes the service.

        Args:
            config: The configuration to use. A fresh one is loaded if omitted.
        """
        self.config = config or ConfigProvider.get_config()
        self.logger = LoggingProvider().get_logger()

    def navigate(self, document: BeautifulSoup, target: str, preferences: PreferenceStore) -> NavigationOutcome:
        """Resolves a navigation request against the current view.

        Args:
            document: The current view.
            target: The id of the element to reach.
            preferences: The visitor's preference slots.

        Returns:
            A SCROLL outcome if the target is in the view, otherwise a
            RELOAD outcome after storing the target as pending.
        """
        target = target.lstrip("#")
        if document.find(id=target) is not None:
            return NavigationOutcome(action=NavigationAction.SCROLL, target=target)

        self.logger.info(f"Target '#{target}' not in current view, reloading.")
        preferences.set_pending_scroll(target)
        return NavigationOutcome(action=NavigationAction.RELOAD, target=target)

    async def resume(self, preferences: PreferenceStore, loaded: asyncio.Event) -> NavigationOutcome | None:
        """Consumes a pending scroll target once the fragments have loaded.

        Args:
            preferences: The visitor's preference slots.
            loaded: The fragment loader's completion event.

        Returns:
            A SCROLL outcome for the pending target, or None if nothing was
            pending. The pending slot is cleared either way.
        """
        target = preferences.get_pending_scroll()
        if not target:
            return None

        preferences.clear_pending_scroll()
        try:
            await asyncio.wait_for(loaded.wait(), timeout=self.config.SCROLL_WAIT_TIMEOUT_SECONDS)
        except asyncio.TimeoutError:
            self.logger.warning(f"Fragments did not finish loading, dropping scroll to '#{target}'.")
            return None
        return NavigationOutcome(action=NavigationAction.SCROLL, target=target)
