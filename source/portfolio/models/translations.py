"""This module defines the translation table model."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import RootModel


class TranslationTable(RootModel[dict[str, dict[str, str]]]):
    """A two-level mapping of language code to key to localized string.

    Strings may contain markup; whether they are inserted as text or as
    markup is decided by the attribute that tags the element, not by the
    table.
    """

    @property
    def languages(self) -> list[str]:
        """The language codes present in the table."""
        return list(self.root)

    def supports(self, language: str) -> bool:
        """Checks whether the table has an entry for a language.

        Args:
            language: The language code.

        Returns:
            True if the language exists in the table.
        """
        return language in self.root

    def lookup(self, language: str, key: str) -> str | None:
        """Looks up a localized string.

        Args:
            language: The language code.
            key: The translation key.

        Returns:
            The localized string, or None if the language or key is absent.
        """
        return self.root.get(language, {}).get(key)

    def keys(self, language: str) -> set[str]:
        """Returns the keys defined for a language.

        Args:
            language: The language code.

        Returns:
            The set of keys, empty for an unknown language.
        """
        return set(self.root.get(language, {}))

    def missing_keys(self, keys: Iterable[str]) -> dict[str, set[str]]:
        """Reports which of the given keys are absent per language.

        Args:
            keys: The keys that are expected in every language.

        Returns:
            A mapping of language code to missing keys. Languages with full
            coverage are omitted.
        """
        expected = set(keys)
        missing = {language: expected - set(entries) for language, entries in self.root.items()}
        return {language: absent for language, absent in missing.items() if absent}
