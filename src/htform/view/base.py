"""Shared plumbing for view helpers."""

from __future__ import annotations

from collections.abc import Mapping
from html import escape
from typing import Any

from ..attributes import filter_attributes
from ..core import (
    AttributeRenderer,
    HtmlEscaper,
    NullTranslator,
    SafeHTML,
    Translator,
    render_attributes,
)
from ..elements import Element
from ..exceptions import ValidationError


class FormHelper:
    """
    Base class for helpers turning an element into markup.

    Calling a helper with an element renders it; calling it with nothing
    returns the helper itself so it can be configured inline.
    """

    def __init__(
        self,
        *,
        escaper: HtmlEscaper | None = None,
        translator: Translator | None = None,
        text_domain: str = "default",
        attribute_renderer: AttributeRenderer | None = None,
    ):
        self.escaper = escaper or escape
        self.translator = translator or NullTranslator()
        self.text_domain = text_domain
        self.attribute_renderer = attribute_renderer or render_attributes

    def __call__(self, element: Element | None = None):
        if element is None:
            return self
        return self.render(element)

    def render(self, element: Element) -> str:
        raise NotImplementedError

    def escape(self, text: Any) -> SafeHTML:
        return SafeHTML(self.escaper(str(text)))

    def translate(self, message: Any) -> str:
        return self.translator.translate(str(message), self.text_domain)

    def attributes_string(self, role: str, attributes: Mapping[str, Any]) -> SafeHTML:
        """Filter `attributes` for `role` and serialize them."""
        return SafeHTML(self.attribute_renderer(filter_attributes(role, attributes)))

    def require_name(self, element: Element) -> str | int:
        """The element's name; 0 counts as a name."""
        name = element.name
        if name is None or name == "":
            raise ValidationError(
                f"{type(self).__name__}.render requires that the element has an "
                "assigned name; none discovered"
            )
        return name
