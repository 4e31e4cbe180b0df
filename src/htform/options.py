"""
Option specifications for choice elements.

Value options may be given as a mapping or a sequence. Each entry is one of:

- a scalar label, keyed by its value: {"us": "United States"}
- a leaf option: {"value": "us", "label": "United States", "disabled": True}
- a group: {"label": "Europe", "options": {"de": "Germany", "fr": "France"}}

`normalize_option` resolves every entry to an `Option` or `OptionGroup`
before anything renders it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from pydantic import BaseModel

OptionSpec = Any
OptionsInput = Mapping[Any, OptionSpec] | Sequence[OptionSpec]


class Option(BaseModel):
    """A single <option>."""

    value: Any = ""
    label: Any = ""
    selected: bool = False
    disabled: bool = False


class OptionGroup(BaseModel):
    """A labelled <optgroup> of nested option specs."""

    label: Any = None
    disabled: bool = False
    options: dict[Any, Any] | list[Any]

    def attributes(self) -> dict[str, Any]:
        """Fields rendered on the <optgroup> tag itself."""
        attrs: dict[str, Any] = {}
        if self.label is not None:
            attrs["label"] = self.label
        if self.disabled:
            attrs["disabled"] = True
        return attrs


def _is_scalar(spec: Any) -> bool:
    return spec is None or isinstance(spec, (str, int, float, bool))


def _is_options_collection(value: Any) -> bool:
    return isinstance(value, Mapping) or (
        isinstance(value, Sequence) and not isinstance(value, (str, bytes))
    )


def _label(label: Any) -> Any:
    # Booleans print the way form data submits them
    if label is None or label is False:
        return ""
    if label is True:
        return "1"
    return label


def iter_options(options: OptionsInput) -> Iterator[tuple[Any, OptionSpec]]:
    """Yield (key, spec) pairs; sequences are keyed by position."""
    if isinstance(options, Mapping):
        yield from options.items()
    else:
        yield from enumerate(options)


def normalize_option(key: Any, spec: OptionSpec) -> Option | OptionGroup:
    """Resolve a raw option entry to its variant."""
    if isinstance(spec, (Option, OptionGroup)):
        return spec
    if _is_scalar(spec):
        return Option(value=key, label=_label(spec))
    if not isinstance(spec, Mapping):
        raise TypeError(f"Unsupported option specification for {key!r}: {spec!r}")

    # Anything carrying nested options is a group; value/selected mean nothing there
    if _is_options_collection(spec.get("options")):
        nested = spec["options"]
        return OptionGroup(
            label=spec.get("label"),
            disabled=bool(spec.get("disabled", False)),
            options=dict(nested) if isinstance(nested, Mapping) else list(nested),
        )

    value = spec.get("value")
    return Option(
        value="" if value is None else value,
        label=_label(spec.get("label")),
        selected=bool(spec.get("selected", False)),
        disabled=bool(spec.get("disabled", False)),
    )


def option_values(options: OptionsInput) -> list[Any]:
    """Flatten every leaf value, descending into groups."""
    values: list[Any] = []
    for key, spec in iter_options(options):
        resolved = normalize_option(key, spec)
        if isinstance(resolved, OptionGroup):
            values.extend(option_values(resolved.options))
        else:
            values.append(resolved.value)
    return values
