"""This module provides the service that applies translations to markup.

Elements opt in to translation with one of three attributes:

- ``data-i18n="key"`` replaces the element's content with the string as
  plain text;
- ``data-i18n-html="key"`` replaces the element's content with the string
  parsed as markup, for the few keys that intentionally carry tags;
- ``data-i18n-attr="alt:key;aria-label:other"`` sets attributes, used for
  accessibility labels.
"""

from bs4 import BeautifulSoup, NavigableString, Tag
from portfolio.models.views import ApplyReport, RenderContext
from portfolio.providers.logging import Logger, LoggingProvider

TEXT_ATTRIBUTE = "data-i18n"
MARKUP_ATTRIBUTE = "data-i18n-html"
ATTRIBUTES_ATTRIBUTE = "data-i18n-attr"


def parse_attribute_pairs(value: str) -> list[tuple[str, str]]:
    """Parses a ``data-i18n-attr`` value into (attribute, key) pairs.

    Args:
        value: A value such as ``"alt:hero.photo;title:hero.photo.title"``.

    Returns:
        The pairs in declaration order. Malformed entries are skipped.
    """
    pairs = []
    for entry in value.split(";"):
        attribute, sep, key = entry.partition(":")
        if sep and attribute.strip() and key.strip():
            pairs.append((attribute.strip(), key.strip()))
    return pairs


class TranslationApplier:
    """Replaces the content of tagged elements with localized strings."""

    logger: Logger

    def __init__(self) -> None:
        """Initializes the service."""
        self.logger = LoggingProvider().get_logger()

    def apply(self, document: BeautifulSoup | Tag, context: RenderContext) -> ApplyReport:
        """Applies the context's language to every tagged element of a document.

        The call is synchronous and idempotent. A key missing from the table
        leaves its element untouched. An unsupported language leaves the whole
        document untouched.

        Args:
            document: The parsed document or fragment to translate in place.
            context: The render context carrying the language and table.

        Returns:
            A report of how many elements were translated and which keys
            were missing.
        """
        report = ApplyReport()
        language = context.language
        table = context.table

        if not table.supports(language):
            self.logger.warning(f"Unsupported language '{language}', leaving content unchanged.")
            return report

        html = document if isinstance(document, Tag) and document.name == "html" else document.find("html")
        if isinstance(html, Tag):
            html["lang"] = language

        for element in document.find_all(attrs={TEXT_ATTRIBUTE: True}):
            key = element[TEXT_ATTRIBUTE]
            value = table.lookup(language, key)
            if value is None:
                report.missing.add(key)
                continue
            element.clear()
            element.append(NavigableString(value))
            report.applied += 1

        for element in document.find_all(attrs={MARKUP_ATTRIBUTE: True}):
            key = element[MARKUP_ATTRIBUTE]
            value = table.lookup(language, key)
            if value is None:
                report.missing.add(key)
                continue
            element.clear()
            for child in list(BeautifulSoup(value, "html.parser").contents):
                element.append(child.extract())
            report.applied += 1

        for element in document.find_all(attrs={ATTRIBUTES_ATTRIBUTE: True}):
            for attribute, key in parse_attribute_pairs(element[ATTRIBUTES_ATTRIBUTE]):
                value = table.lookup(language, key)
                if value is None:
                    report.missing.add(key)
                    continue
                element[attribute] = value
                report.applied += 1

        if report.missing:
            self.logger.debug(f"Missing '{language}' translations: {', '.join(sorted(report.missing))}")
        return report

    @staticmethod
    def tagged_keys(document: BeautifulSoup | Tag) -> set[str]:
        """Collects every translation key referenced by a document.

        Args:
            document: The parsed document or fragment.

        Returns:
            The set of keys used by text, markup and attribute tags.
        """
        keys = {element[TEXT_ATTRIBUTE] for element in document.find_all(attrs={TEXT_ATTRIBUTE: True})}
        keys |= {element[MARKUP_ATTRIBUTE] for element in document.find_all(attrs={MARKUP_ATTRIBUTE: True})}
        for element in document.find_all(attrs={ATTRIBUTES_ATTRIBUTE: True}):
            keys |= {key for _, key in parse_attribute_pairs(element[ATTRIBUTES_ATTRIBUTE])}
        return keys
