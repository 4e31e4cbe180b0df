"""
Per-tag attribute whitelists.

Elements carry a superset of HTML attributes; each tag only renders the
ones valid for it. Anything else is dropped without complaint.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Literal

from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

Role = Literal[
    "select",
    "option",
    "optgroup",
    "text",
    "email",
    "file",
    "hidden",
    "range",
    "number",
    "date",
    "week",
    "month",
]

_DATE_INPUT = frozenset(
    {
        "type",
        "name",
        "autocomplete",
        "autofocus",
        "disabled",
        "form",
        "list",
        "max",
        "min",
        "readonly",
        "required",
        "step",
        "value",
    }
)

VALID_ATTRIBUTES: dict[str, frozenset[str]] = {
    "select": frozenset(
        {"name", "autofocus", "disabled", "form", "multiple", "required", "size"}
    ),
    "option": frozenset({"disabled", "selected", "label", "value"}),
    "optgroup": frozenset({"disabled", "label"}),
    "text": frozenset(
        {
            "type",
            "name",
            "autocomplete",
            "autofocus",
            "dirname",
            "disabled",
            "form",
            "list",
            "maxlength",
            "minlength",
            "pattern",
            "placeholder",
            "readonly",
            "required",
            "size",
            "value",
        }
    ),
    "email": frozenset(
        {
            "type",
            "name",
            "autocomplete",
            "autofocus",
            "disabled",
            "form",
            "list",
            "maxlength",
            "minlength",
            "multiple",
            "pattern",
            "placeholder",
            "readonly",
            "required",
            "size",
            "value",
        }
    ),
    "file": frozenset(
        {"type", "name", "accept", "autofocus", "disabled", "form", "multiple", "required"}
    ),
    "hidden": frozenset({"type", "name", "disabled", "form", "value"}),
    "range": frozenset(
        {
            "type",
            "name",
            "autocomplete",
            "autofocus",
            "disabled",
            "form",
            "list",
            "max",
            "min",
            "step",
            "required",
            "value",
        }
    ),
    "number": _DATE_INPUT,
    "date": _DATE_INPUT,
    "week": _DATE_INPUT,
    "month": _DATE_INPUT,
}


def filter_attributes(role: Role | str, attributes: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only the attributes valid for `role`, in their original order."""
    try:
        valid = VALID_ATTRIBUTES[role]
    except KeyError:
        raise InvalidArgumentError(f"Unknown attribute role: {role!r}") from None

    kept = {key: value for key, value in attributes.items() if key in valid}
    if dropped := [key for key in attributes if key not in valid]:
        logger.debug(f"dropping attributes {dropped} not valid for <{role}>")
    return kept
