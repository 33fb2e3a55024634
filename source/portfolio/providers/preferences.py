"""This module provides the visitor preference slots backed by cookies.

Two slots exist: a persistent one holding the active language and a
transient one holding a pending scroll target. Reads come from the incoming
request cookies; writes are queued and flushed onto the outgoing response.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from fastapi.responses import Response
from portfolio.providers.config import Config, ConfigProvider


@dataclass
class _CookieWrite:
    name: str
    value: str | None
    max_age: int | None = None


@dataclass
class PreferenceStore:
    """Reads and queues writes for the language and scroll-target cookies."""

    cookies: Mapping[str, str]
    config: Config = field(default_factory=ConfigProvider.get_config)
    _writes: list[_CookieWrite] = field(default_factory=list, init=False)

    def get_language(self) -> str | None:
        """Returns the stored language, if any.

        Returns:
            The language code stored in the persistent slot, or None.
        """
        return self.cookies.get(self.config.LANGUAGE_COOKIE_NAME) or None

    def set_language(self, language: str) -> None:
        """Queues a write of the persistent language slot.

        Args:
            language: The language code to persist.
        """
        self._writes.append(
            _CookieWrite(
                self.config.LANGUAGE_COOKIE_NAME,
                language,
                max_age=self.config.LANGUAGE_COOKIE_MAX_AGE_SECONDS,
            )
        )

    def get_pending_scroll(self) -> str | None:
        """Returns the pending scroll target, if one was stored.

        A target cleared earlier in the same request is reported as absent.

        Returns:
            The element id waiting to be scrolled to, or None.
        """
        for write in reversed(self._writes):
            if write.name == self.config.SCROLL_COOKIE_NAME:
                return write.value
        return self.cookies.get(self.config.SCROLL_COOKIE_NAME) or None

    def set_pending_scroll(self, target: str) -> None:
        """Queues a write of the transient scroll slot (session cookie).

        Args:
            target: The element id to scroll to after the next full load.
        """
        self._writes.append(_CookieWrite(self.config.SCROLL_COOKIE_NAME, target))

    def clear_pending_scroll(self) -> None:
        """Queues the removal of the transient scroll slot."""
        self._writes.append(_CookieWrite(self.config.SCROLL_COOKIE_NAME, None))

    def apply_to(self, response: Response) -> Response:
        """Flushes queued writes onto a response.

        Args:
            response: The response that will carry the Set-Cookie headers.

        Returns:
            The same response, for chaining.
        """
        for write in self._writes:
            if write.value is None:
                response.delete_cookie(write.name, path="/")
            else:
                response.set_cookie(
                    write.name,
                    write.value,
                    max_age=write.max_age,
                    path="/",
                    samesite="lax",
                )
        self._writes.clear()
        return response
