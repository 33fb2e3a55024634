"""This module defines custom exceptions raised while composing the site."""


class SiteError(Exception):
    """Base exception for errors that occur while composing or serving the site."""

    pass


class TranslationLoadError(SiteError):
    """Raised when the translation table cannot be read or is malformed."""

    pass


class FragmentNotFoundError(SiteError):
    """Raised when a named fragment cannot be fetched from its source."""

    def __init__(self, name: str, reason: str = "not found") -> None:
        """Initializes the exception.

        Args:
            name: The fragment name that could not be fetched.
            reason: A short description of the failure.
        """
        super().__init__(f"Fragment '{name}' {reason}")
        self.name = name


class InvalidFragmentNameError(SiteError):
    """Raised when a fragment name contains characters outside of [a-z0-9-]."""

    pass


class UnknownViewError(SiteError):
    """Raised when a view name does not match any known view."""

    pass
