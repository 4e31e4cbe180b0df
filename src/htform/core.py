"""
Markup primitives and the pluggable rendering capabilities.

Helpers never build attribute strings or escape text directly; they go
through an AttributeRenderer, an HtmlEscaper and a Translator so callers
can swap any of them.
"""

from __future__ import annotations

import gettext
from collections.abc import Mapping
from dataclasses import dataclass
from html import escape
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class SafeHTML:
    """
    Marks content as already escaped/safe.
    Immutable and hashable for use as cache keys.
    """

    content: str

    def __html__(self) -> str:
        return self.content

    def __str__(self) -> str:
        return self.content

    def __bool__(self) -> bool:
        return bool(self.content)

    def __add__(self, other: SafeHTML | str) -> SafeHTML:
        """Concatenate; plain strings on the right are escaped first."""
        if isinstance(other, SafeHTML):
            return SafeHTML(self.content + other.content)
        return SafeHTML(self.content + escape(str(other)))


def raw(content: str) -> SafeHTML:
    """Wrap markup a helper has already rendered."""
    return SafeHTML(content)


def attr(name: str, value: Any) -> SafeHTML:
    """
    Build a safe HTML attribute.

    - None or False: returns empty (attribute omitted)
    - True: returns just the attribute name (boolean attribute)
    - anything else: returns name="escaped_value"
    """
    if value is None or value is False:
        return SafeHTML("")
    if value is True:
        return SafeHTML(name)
    return SafeHTML(f'{name}="{escape(str(value))}"')


def render_attributes(attrs: Mapping[str, Any]) -> str:
    """Render attributes dict to string."""
    parts = []
    for key, value in attrs.items():
        # class_ -> class, for_ -> for
        if key.endswith("_"):
            key = key[:-1]
        # snake_case -> kebab-case
        key = key.replace("_", "-")

        result = attr(key, value)
        if result.content:
            parts.append(result.content)

    return " ".join(parts)


@runtime_checkable
class AttributeRenderer(Protocol):
    """Serializes an attribute mapping to `key="value"` pairs."""

    def __call__(self, attrs: Mapping[str, Any]) -> str: ...


@runtime_checkable
class HtmlEscaper(Protocol):
    """Escapes text for use in HTML content."""

    def __call__(self, text: str) -> str: ...


@runtime_checkable
class Translator(Protocol):
    """Translates a message under a text domain."""

    def translate(self, message: str, text_domain: str = "default") -> str: ...


class NullTranslator:
    """Returns every message untouched."""

    def translate(self, message: str, text_domain: str = "default") -> str:
        return message


class GettextTranslator:
    """
    Translator backed by stdlib gettext catalogues.

    Usage:
        catalog = gettext.translation("forms", localedir="locale", languages=["de"])
        translator = GettextTranslator({"forms": catalog})
        translator.translate("Please select", "forms")
    """

    def __init__(
        self,
        catalogs: Mapping[str, gettext.NullTranslations] | None = None,
        fallback: gettext.NullTranslations | None = None,
    ):
        self.catalogs = dict(catalogs or {})
        self.fallback = fallback or gettext.NullTranslations()

    def translate(self, message: str, text_domain: str = "default") -> str:
        catalog = self.catalogs.get(text_domain, self.fallback)
        return catalog.gettext(message)
