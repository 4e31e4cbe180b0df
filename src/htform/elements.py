"""
Form element models.

Each element type declares its HTML attributes and derives the validators
that check submitted input against them.

Usage:
    from htform.elements import Range, Week

    Range(name="volume", attributes={"min": 2, "max": 102, "step": 2}).get_validators()
    Week(name="sprint", attributes={"min": "1970-W01", "step": "2"}).input_specification()

    derive_validators("week", {"step": 1})
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, Field

from .captcha import CaptchaChallenge
from .exceptions import InvalidArgumentError, ValidationError
from .options import OptionsInput, iter_options, option_values
from .validators import (
    DATE_PATTERN,
    EMAIL_PATTERN,
    MONTH_PATTERN,
    WEEK_PATTERN,
    CaptchaWord,
    DateStep,
    Explode,
    Float,
    GreaterThan,
    InArray,
    IntervalUnit,
    LessThan,
    Regex,
    Step,
    UploadFile,
    ValidatorSpec,
    parse_interval,
    parse_step,
)

logger = logging.getLogger(__name__)


class Element(BaseModel):
    """A form field: name, value and HTML attributes."""

    type: ClassVar[str] = "text"

    name: str | int | None = None
    value: Any = None
    attributes: dict[str, Any] = Field(default_factory=dict)

    def get_attribute(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    def get_validators(self) -> list[ValidatorSpec]:
        return []

    def input_specification(self) -> dict[str, Any]:
        """Name, required flag and validators for an input filter."""
        validators = self.get_validators()
        logger.debug(f"{self.type} element {self.name!r}: {[v.kind for v in validators]}")
        return {
            "name": self.name,
            "required": bool(self.attributes.get("required", False)),
            "validators": validators,
        }


def _flag(value: Any, default: bool) -> bool:
    """Attribute flag; the strings "false", "0", "off" and "no" read as False."""
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() not in {"", "false", "0", "off", "no"}
    return bool(value)


def _range_validators(attributes: Mapping[str, Any]) -> list[ValidatorSpec]:
    """GreaterThan/LessThan for whichever of min and max is present."""
    inclusive = _flag(attributes.get("inclusive"), True)

    validators: list[ValidatorSpec] = []
    if attributes.get("min") is not None:
        validators.append(GreaterThan(min=attributes["min"], inclusive=inclusive))
    if attributes.get("max") is not None:
        validators.append(LessThan(max=attributes["max"], inclusive=inclusive))
    return validators


def _has_step(attributes: Mapping[str, Any]) -> bool:
    step = attributes.get("step")
    return step is not None and step != "any"


class Text(Element):
    type: ClassVar[str] = "text"


class Number(Element):
    """Numeric input: locale-aware float format plus range and step."""

    type: ClassVar[str] = "number"
    defaults: ClassVar[dict[str, Any]] = {}

    decimal_separator: str = "."
    group_separator: str = ","

    def effective_attributes(self) -> dict[str, Any]:
        """Declared attributes over the type's defaults."""
        attrs = dict(self.defaults)
        attrs.update({k: v for k, v in self.attributes.items() if v is not None})
        return attrs

    def get_validators(self) -> list[ValidatorSpec]:
        attrs = self.effective_attributes()
        validators: list[ValidatorSpec] = [
            Float(decimal_separator=self.decimal_separator, group_separator=self.group_separator)
        ]
        validators.extend(_range_validators(attrs))
        if _has_step(attrs):
            step = parse_step(attrs["step"])
            validators.append(Step(step=step, base_value=attrs.get("min", 0)))
        return validators


class Range(Number):
    """Numeric slider; defaults to 0..100 in steps of 1."""

    type: ClassVar[str] = "range"
    defaults: ClassVar[dict[str, Any]] = {"min": 0, "max": 100, "step": 1, "inclusive": True}


class Date(Element):
    """Calendar input validated by its canonical text format."""

    type: ClassVar[str] = "date"
    format_pattern: ClassVar[str] = DATE_PATTERN
    step_unit: ClassVar[IntervalUnit] = "days"
    base_value: ClassVar[str] = "1970-01-01"

    def get_validators(self) -> list[ValidatorSpec]:
        validators: list[ValidatorSpec] = [Regex(pattern=self.format_pattern)]
        validators.extend(_range_validators(self.attributes))
        if _has_step(self.attributes):
            validators.append(
                DateStep(
                    step=parse_interval(self.attributes["step"], self.step_unit),
                    base_value=str(self.attributes.get("min") or self.base_value),
                )
            )
        return validators


class Week(Date):
    type: ClassVar[str] = "week"
    format_pattern: ClassVar[str] = WEEK_PATTERN
    step_unit: ClassVar[IntervalUnit] = "weeks"
    base_value: ClassVar[str] = "1970-W01"


class Month(Date):
    type: ClassVar[str] = "month"
    format_pattern: ClassVar[str] = MONTH_PATTERN
    step_unit: ClassVar[IntervalUnit] = "months"
    base_value: ClassVar[str] = "1970-01"


class Email(Element):
    type: ClassVar[str] = "email"

    def get_validators(self) -> list[ValidatorSpec]:
        regex = Regex(pattern=EMAIL_PATTERN)
        if self.attributes.get("multiple"):
            return [Explode(separator=",", validator=regex)]
        return [regex]


class File(Element):
    type: ClassVar[str] = "file"

    def get_validators(self) -> list[ValidatorSpec]:
        return [UploadFile()]


class Hidden(Element):
    type: ClassVar[str] = "hidden"


class Select(Element):
    """Choice element rendered as <select>."""

    type: ClassVar[str] = "select"

    value_options: dict[Any, Any] | list[Any] = Field(default_factory=dict)
    empty_option: str | dict[str, Any] | None = None
    disable_in_array_validator: bool = False

    def options_with_empty(self) -> OptionsInput:
        """Value options led by the empty option, keyed by '', when one is set."""
        if self.empty_option is None:
            return self.value_options
        rest = {k: v for k, v in iter_options(self.value_options) if k != ""}
        return {"": self.empty_option, **rest}

    def get_validators(self) -> list[ValidatorSpec]:
        if self.disable_in_array_validator:
            return []
        in_array = InArray(haystack=tuple(option_values(self.value_options)))
        if self.attributes.get("multiple"):
            return [Explode(validator=in_array)]
        return [in_array]


class Captcha(Element):
    """Element carrying a captcha challenge."""

    type: ClassVar[str] = "captcha"

    captcha: Any = None

    def get_validators(self) -> list[ValidatorSpec]:
        if not isinstance(self.captcha, CaptchaChallenge):
            raise ValidationError(
                f"{type(self).__name__}.get_validators requires that the element "
                "has a captcha challenge; none found"
            )
        return [CaptchaWord(id=str(self.captcha.id), word=self.captcha.word)]


ELEMENT_TYPES: dict[str, type[Element]] = {
    cls.type: cls
    for cls in (Text, Number, Range, Date, Week, Month, Email, File, Hidden, Select, Captcha)
}


def derive_validators(
    element_type: str, attributes: Mapping[str, Any] | None = None
) -> list[ValidatorSpec]:
    """Validators for an element type built only from its attributes."""
    try:
        cls = ELEMENT_TYPES[element_type]
    except KeyError:
        raise InvalidArgumentError(f"Unknown element type: {element_type!r}") from None
    return cls(attributes=dict(attributes or {})).get_validators()

