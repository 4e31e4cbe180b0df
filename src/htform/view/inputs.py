"""
<input> helpers, one per input type.

The rendered type is fixed by the helper, never taken from the element's
own `type` attribute.
"""

from __future__ import annotations

from typing import Any, ClassVar

from ..elements import Element
from ..markup import input_
from .base import FormHelper

RESERVED = frozenset({"name", "type", "value"})


class FormInput(FormHelper):
    """Renders an element as a single <input>."""

    input_type: ClassVar[str] = "text"
    role: ClassVar[str] = "text"

    def render(self, element: Element) -> str:
        name = self.require_name(element)

        attributes: dict[str, Any] = {
            "name": self.render_name(name, element),
            "type": self.input_type,
        }
        attributes.update(
            (key, value) for key, value in element.attributes.items() if key not in RESERVED
        )
        value = self.render_value(element)
        if value is not None:
            attributes["value"] = value

        return input_(attrs=self.attributes_string(self.role, attributes)).__html__()

    def render_name(self, name: str | int, element: Element) -> str | int:
        return name

    def render_value(self, element: Element) -> Any:
        return element.value


class FormText(FormInput):
    input_type = "text"
    role = "text"


class FormEmail(FormInput):
    input_type = "email"
    role = "email"


class FormHidden(FormInput):
    input_type = "hidden"
    role = "hidden"


class FormRange(FormInput):
    input_type = "range"
    role = "range"


class FormNumber(FormInput):
    input_type = "number"
    role = "number"


class FormDate(FormInput):
    input_type = "date"
    role = "date"


class FormWeek(FormInput):
    input_type = "week"
    role = "week"


class FormMonth(FormInput):
    input_type = "month"
    role = "month"


class FormFile(FormInput):
    """File input; never echoes a value back."""

    input_type = "file"
    role = "file"

    def render_name(self, name: str | int, element: Element) -> str | int:
        if element.attributes.get("multiple"):
            return f"{name}[]"
        return name

    def render_value(self, element: Element) -> Any:
        return None
