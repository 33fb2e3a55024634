"""This module defines the enumerations for the application."""

from enum import StrEnum


class SlotMode(StrEnum):
    """How a fragment is spliced into its placeholder."""

    OUTER = "outer"
    INNER = "inner"

    def __str__(self) -> str:
        """Returns the string representation of the enum member."""
        return self.value


class NavigationAction(StrEnum):
    """What the client must do to reach a navigation target."""

    SCROLL = "scroll"
    RELOAD = "reload"

    def __str__(self) -> str:
        """Returns the string representation of the enum member."""
        return self.value
