"""
<select> rendering with options and nested optgroups.

Usage:
    from htform.elements import Select
    from htform.view import FormSelect

    element = Select(
        name="country",
        value="de",
        empty_option="Please select",
        value_options={
            "us": "United States",
            "europe": {"label": "Europe", "options": {"de": "Germany", "fr": "France"}},
        },
    )
    FormSelect()(element)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..core import SafeHTML
from ..elements import Element, Select
from ..exceptions import InvalidArgumentError, ValidationError
from ..markup import option, optgroup, select
from ..options import OptionGroup, OptionsInput, iter_options, normalize_option
from ..validators import loose_equals
from .base import FormHelper

logger = logging.getLogger(__name__)


class FormSelect(FormHelper):
    """Renders a Select element."""

    def render(self, element: Element) -> str:
        if not isinstance(element, Select):
            raise InvalidArgumentError(
                f"{type(self).__name__}.render requires a Select element; "
                f"got {type(element).__name__}"
            )

        name = self.require_name(element)

        if not element.value_options:
            raise ValidationError(
                f'{type(self).__name__}.render requires that the element has "value_options"; '
                "none found"
            )
        options = element.options_with_empty()

        attributes = dict(element.attributes)
        selected = self.validate_multi_value(element.value, attributes)

        attributes.pop("name", None)
        if attributes.get("multiple"):
            name = f"{name}[]"
        attributes = {"name": name, **attributes}

        return select(
            SafeHTML(self.render_options(options, selected)),
            attrs=self.attributes_string("select", attributes),
        ).__html__()

    def render_options(self, options: OptionsInput, selected: Iterable[Any] = ()) -> str:
        """
        Render option specs as newline separated <option>/<optgroup> tags.

        Values found in `selected` are marked selected whatever the spec says.
        """
        selected = list(selected)
        rendered = []

        for key, spec in iter_options(options):
            resolved = normalize_option(key, spec)

            if isinstance(resolved, OptionGroup):
                rendered.append(self.render_optgroup(resolved, selected))
                continue

            is_selected = resolved.selected or any(
                loose_equals(resolved.value, value) for value in selected
            )
            label = self.translate(resolved.label)
            attributes = {
                "value": resolved.value,
                "selected": is_selected,
                "disabled": resolved.disabled,
            }
            rendered.append(
                option(
                    self.escape(label),
                    attrs=self.attributes_string("option", attributes),
                ).__html__()
            )

        return "\n".join(rendered)

    def render_optgroup(
        self, group: OptionGroup | Mapping[str, Any], selected: Iterable[Any] = ()
    ) -> str:
        """Render an <optgroup> wrapping its nested options."""
        if not isinstance(group, OptionGroup):
            group = OptionGroup(
                label=group.get("label"),
                disabled=bool(group.get("disabled", False)),
                options=group.get("options") or [],
            )

        return optgroup(
            SafeHTML(self.render_options(group.options, selected)),
            attrs=self.attributes_string("optgroup", group.attributes()),
        ).__html__()

    def validate_multi_value(self, value: Any, attributes: Mapping[str, Any]) -> list[Any]:
        """
        Selected values for `value`.

        A sequence of values is only allowed when the multiple attribute is set
        and truthy.
        """
        if value is None:
            return []

        if isinstance(value, Mapping):
            values = list(value.values())
        elif isinstance(value, (Sequence, set, frozenset)) and not isinstance(value, (str, bytes)):
            values = list(value)
        else:
            return [value]

        if not attributes.get("multiple"):
            raise ValidationError(
                f"{type(self).__name__}: multiple selection requires the multiple attribute "
                "set to a true value"
            )
        logger.debug(f"{len(values)} values selected")
        return values
