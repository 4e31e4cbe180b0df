"""
Validator specifications derived from element attributes.

Each spec is a small frozen pydantic model tagged by `kind`. Specs are
independent: a value is valid for an element when every spec accepts it.

    >>> GreaterThan(min=2).is_valid(3)
    True
    >>> parse_interval("2", "weeks").iso
    'P2W'
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ConfigurationError

Bound = int | float | str
IntervalUnit = Literal["days", "weeks", "months"]

WEEK_PATTERN = r"^\d{4}-W[0-5]\d$"
MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[012])$"
DATE_PATTERN = r"^\d{4}-(0[1-9]|1[012])-(0[1-9]|[12]\d|3[01])$"
EMAIL_PATTERN = (
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

_UNIT_LETTERS: dict[str, IntervalUnit] = {"D": "days", "W": "weeks", "M": "months"}


def _to_number(value: Any) -> Decimal | None:
    """Coerce ints, floats and numeric strings to Decimal, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        number = Decimal(str(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    return number if number.is_finite() else None


def _compare(value: Any, bound: Bound) -> int | None:
    """Three-way compare; numeric when the bound is numeric, textual otherwise."""
    bound_number = _to_number(bound)
    if bound_number is not None:
        number = _to_number(value)
        if number is None:
            return None
        return (number > bound_number) - (number < bound_number)

    # ISO dates, weeks and months sort lexicographically
    if not isinstance(value, str):
        return None
    text = str(bound)
    return (value > text) - (value < text)


def loose_equals(left: Any, right: Any) -> bool:
    """Equality that also matches a submitted string against its typed option value."""
    if left == right or str(left) == str(right):
        return True
    # "1", 1 and 1.0 name the same option
    left_number, right_number = _to_number(left), _to_number(right)
    return left_number is not None and left_number == right_number


class ValidatorSpec(BaseModel):
    """Base class for every derived validator."""

    model_config = ConfigDict(frozen=True)

    kind: str

    def is_valid(self, value: Any) -> bool:
        raise NotImplementedError


class GreaterThan(ValidatorSpec):
    kind: Literal["GreaterThan"] = "GreaterThan"
    min: Bound
    inclusive: bool = True

    def is_valid(self, value: Any) -> bool:
        result = _compare(value, self.min)
        if result is None:
            return False
        return result >= 0 if self.inclusive else result > 0


class LessThan(ValidatorSpec):
    kind: Literal["LessThan"] = "LessThan"
    max: Bound
    inclusive: bool = True

    def is_valid(self, value: Any) -> bool:
        result = _compare(value, self.max)
        if result is None:
            return False
        return result <= 0 if self.inclusive else result < 0


class Step(ValidatorSpec):
    """Numeric step counted from `base_value`."""

    kind: Literal["Step"] = "Step"
    step: Bound = 1
    base_value: Bound = 0

    def is_valid(self, value: Any) -> bool:
        number = _to_number(value)
        step = _to_number(self.step)
        base = _to_number(self.base_value)
        if number is None or step is None or base is None or step == 0:
            return False
        return (number - base) % step == 0


class Interval(BaseModel):
    """A positive count of days, weeks or months."""

    model_config = ConfigDict(frozen=True)

    amount: int = Field(gt=0)
    unit: IntervalUnit

    @property
    def iso(self) -> str:
        """ISO-8601 duration, e.g. P1W."""
        letter = next(k for k, v in _UNIT_LETTERS.items() if v == self.unit)
        return f"P{self.amount}{letter}"


def parse_interval(step: Any, unit: IntervalUnit) -> Interval:
    """
    Turn a `step` attribute into an Interval of `unit`.

    Accepts a positive whole number (int, integral float or digit string)
    or an ISO-8601 duration in the same unit, such as "P2W" for weeks.
    """
    amount: int | None = None
    if isinstance(step, bool):
        amount = None
    elif isinstance(step, int):
        amount = step
    elif isinstance(step, float) and step.is_integer():
        amount = int(step)
    elif isinstance(step, str):
        text = step.strip()
        if re.fullmatch(r"[0-9]+", text):
            amount = int(text)
        elif match := re.fullmatch(r"P([0-9]+)([DWM])", text):
            if _UNIT_LETTERS[match.group(2)] == unit:
                amount = int(match.group(1))

    if amount is None or amount <= 0:
        raise ConfigurationError(
            f"Invalid step value {step!r}: expected a positive whole number of {unit}"
        )
    return Interval(amount=amount, unit=unit)


def parse_step(step: Any) -> Bound:
    """Check a numeric `step` attribute is a positive number and return it."""
    number = _to_number(step)
    if number is None or number <= 0:
        raise ConfigurationError(f"Invalid step value {step!r}: expected a positive number")
    return step


def _calendar_index(value: Any, unit: IntervalUnit) -> int | None:
    """Position of an ISO date/week/month string counted in `unit`."""
    if not isinstance(value, str):
        return None
    try:
        if unit == "weeks":
            match = re.fullmatch(r"(\d{4})-W(\d{2})", value)
            if not match:
                return None
            monday = date.fromisocalendar(int(match.group(1)), int(match.group(2)), 1)
            return (monday.toordinal() - 1) // 7
        if unit == "months":
            match = re.fullmatch(r"(\d{4})-(\d{2})", value)
            if not match or not 1 <= int(match.group(2)) <= 12:
                return None
            return int(match.group(1)) * 12 + int(match.group(2)) - 1
        match = re.fullmatch(r"\d{4}-\d{2}-\d{2}", value)
        if not match:
            return None
        return date.fromisoformat(value).toordinal()
    except ValueError:
        return None


class DateStep(ValidatorSpec):
    """Calendar step counted from `base_value` in the interval's unit."""

    kind: Literal["DateStep"] = "DateStep"
    step: Interval
    base_value: str

    def is_valid(self, value: Any) -> bool:
        position = _calendar_index(value, self.step.unit)
        base = _calendar_index(self.base_value, self.step.unit)
        if position is None or base is None:
            return False
        return (position - base) % self.step.amount == 0


class Regex(ValidatorSpec):
    kind: Literal["Regex"] = "Regex"
    pattern: str

    def is_valid(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            return False
        return re.fullmatch(self.pattern, str(value)) is not None


class Float(ValidatorSpec):
    """Number in the notation of a locale, e.g. `1,234.5` or `1.234,5`."""

    kind: Literal["Float"] = "Float"
    decimal_separator: str = "."
    group_separator: str = ","

    def is_valid(self, value: Any) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float, Decimal)):
            return _to_number(value) is not None
        if not isinstance(value, str):
            return False

        point = re.escape(self.decimal_separator)
        group = re.escape(self.group_separator)
        pattern = (
            rf"[+-]?(?:(?:\d{{1,3}}(?:{group}\d{{3}})+|\d+)(?:{point}\d*)?|{point}\d+)"
            r"(?:[eE][+-]?\d+)?"
        )
        return re.fullmatch(pattern, value.strip()) is not None


class InArray(ValidatorSpec):
    kind: Literal["InArray"] = "InArray"
    haystack: tuple[Any, ...] = ()

    def is_valid(self, value: Any) -> bool:
        return any(loose_equals(value, candidate) for candidate in self.haystack)


class UploadFile(ValidatorSpec):
    """Accepts an upload mapping that arrived without error."""

    kind: Literal["UploadFile"] = "UploadFile"

    def is_valid(self, value: Any) -> bool:
        if not isinstance(value, Mapping):
            return False
        return bool(value.get("tmp_name")) and "name" in value and value.get("error") == 0


class CaptchaWord(ValidatorSpec):
    """Accepts `{"id": ..., "input": ...}` matching the challenge."""

    kind: Literal["CaptchaWord"] = "CaptchaWord"
    id: str
    word: str

    def is_valid(self, value: Any) -> bool:
        if not isinstance(value, Mapping):
            return False
        if str(value.get("id", "")) != self.id:
            return False
        return str(value.get("input", "")).strip().lower() == self.word.lower()


class Explode(ValidatorSpec):
    """Applies `validator` to every item of a separated string or sequence."""

    kind: Literal["Explode"] = "Explode"
    separator: str = ","
    validator: AnyValidator

    def is_valid(self, value: Any) -> bool:
        if isinstance(value, str):
            items = [item.strip() for item in value.split(self.separator)]
        elif isinstance(value, (list, tuple, set, frozenset)):
            items = list(value)
        else:
            items = [value]
        return bool(items) and all(self.validator.is_valid(item) for item in items)


AnyValidator = Annotated[
    Union[
        GreaterThan,
        LessThan,
        Step,
        DateStep,
        Regex,
        Float,
        InArray,
        UploadFile,
        CaptchaWord,
        Explode,
    ],
    Field(discriminator="kind"),
]

Explode.model_rebuild()


def failed_validators(validators: Iterable[ValidatorSpec], value: Any) -> list[ValidatorSpec]:
    """Return the validators that reject `value`; empty means valid."""
    return [validator for validator in validators if not validator.is_valid(value)]
