"""This module defines the data models used while composing views."""

from __future__ import annotations

from dataclasses import dataclass, field

from portfolio.models.enums import NavigationAction, SlotMode
from portfolio.models.translations import TranslationTable
from pydantic import BaseModel, Field


@dataclass(frozen=True)
class RenderContext:
    """The language and translation table a render call works with.

    It is passed explicitly to every rendering call so that no component
    reads the active language from global state.
    """

    language: str
    table: TranslationTable

    def with_language(self, language: str) -> RenderContext:
        """Returns a copy of the context for another language.

        Args:
            language: The new language code.

        Returns:
            A new RenderContext sharing the same table.
        """
        return RenderContext(language=language, table=self.table)


class FragmentSlot(BaseModel):
    """A placeholder in the shell and the fragment that fills it."""

    placeholder: str
    fragment: str
    mode: SlotMode = SlotMode.OUTER


class ViewSpec(BaseModel):
    """A named arrangement of fragment slots."""

    name: str
    slots: list[FragmentSlot]


class NavigationOutcome(BaseModel):
    """The result of resolving a navigation request."""

    action: NavigationAction
    target: str
    smooth: bool = True

    @property
    def reload(self) -> bool:
        """Whether the client must reload the page to reach the target."""
        return self.action == NavigationAction.RELOAD


@dataclass
class ApplyReport:
    """What a translation pass changed."""

    applied: int = 0
    missing: set[str] = field(default_factory=set)


@dataclass
class LoadReport:
    """Which fragments a load batch spliced in and which failed."""

    loaded: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


class RenderedPage(BaseModel):
    """A fully composed and translated page."""

    view: str
    language: str
    html: str
    scroll_target: str | None = None
    failed_fragments: list[str] = Field(default_factory=list)
