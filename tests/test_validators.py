"""
Tests for validator specifications.
"""

import pytest
from pydantic import TypeAdapter

from htform.exceptions import ConfigurationError
from htform.validators import (
    DATE_PATTERN,
    EMAIL_PATTERN,
    MONTH_PATTERN,
    WEEK_PATTERN,
    AnyValidator,
    CaptchaWord,
    DateStep,
    Explode,
    Float,
    GreaterThan,
    InArray,
    Interval,
    LessThan,
    Regex,
    Step,
    UploadFile,
    failed_validators,
    loose_equals,
    parse_interval,
    parse_step,
)


class TestBounds:
    def test_greater_than_inclusive(self):
        v = GreaterThan(min=2)
        assert v.is_valid(2)
        assert v.is_valid("3")
        assert not v.is_valid(1)

    def test_greater_than_exclusive(self):
        v = GreaterThan(min=2, inclusive=False)
        assert not v.is_valid(2)
        assert v.is_valid(2.5)

    def test_less_than(self):
        v = LessThan(max=100)
        assert v.is_valid(100)
        assert not v.is_valid("100.5")
        assert not LessThan(max=100, inclusive=False).is_valid(100)

    def test_non_numeric_value_against_numeric_bound(self):
        assert not GreaterThan(min=0).is_valid("abc")
        assert not GreaterThan(min=0).is_valid(None)
        assert not GreaterThan(min=0).is_valid(True)

    def test_week_bounds_compare_as_text(self):
        v = GreaterThan(min="1970-W01")
        assert v.is_valid("1970-W01")
        assert v.is_valid("1970-W02")
        assert not v.is_valid("1969-W52")
        assert LessThan(max="1970-W03").is_valid("1970-W02")


class TestStep:
    def test_integer_step(self):
        v = Step(step=2)
        assert v.is_valid(4)
        assert not v.is_valid(3)

    def test_base_value(self):
        v = Step(step=2, base_value=1)
        assert v.is_valid("3")
        assert not v.is_valid(4)

    def test_decimal_step(self):
        v = Step(step=0.1)
        assert v.is_valid("0.3")
        assert not v.is_valid("0.35")

    def test_rejects_non_numbers(self):
        assert not Step(step=1).is_valid("one")
        assert not Step(step=0).is_valid(1)


class TestInterval:
    def test_iso(self):
        assert Interval(amount=1, unit="weeks").iso == "P1W"
        assert Interval(amount=2, unit="months").iso == "P2M"
        assert Interval(amount=3, unit="days").iso == "P3D"

    @pytest.mark.parametrize("step", [1, "1", 1.0, " 1 ", "P1W"])
    def test_parse_interval(self, step):
        assert parse_interval(step, "weeks") == Interval(amount=1, unit="weeks")

    @pytest.mark.parametrize("step", ["abc", "1.5", 0, -1, "P1M", True, None, [1]])
    def test_parse_interval_rejects(self, step):
        with pytest.raises(ConfigurationError) as exc:
            parse_interval(step, "weeks")
        assert repr(step) in str(exc.value)


class TestDateStep:
    def test_week_step(self):
        v = DateStep(step=Interval(amount=2, unit="weeks"), base_value="1970-W01")
        assert v.is_valid("1970-W03")
        assert v.is_valid("1970-W01")
        assert not v.is_valid("1970-W02")

    def test_week_step_across_years(self):
        v = DateStep(step=Interval(amount=1, unit="weeks"), base_value="1970-W01")
        assert v.is_valid("2012-W52")
        assert not v.is_valid("2012-W99")

    def test_month_step(self):
        v = DateStep(step=Interval(amount=3, unit="months"), base_value="2020-01")
        assert v.is_valid("2020-04")
        assert v.is_valid("2021-01")
        assert not v.is_valid("2020-02")
        assert not v.is_valid("2020-13")

    def test_day_step(self):
        v = DateStep(step=Interval(amount=7, unit="days"), base_value="2024-01-01")
        assert v.is_valid("2024-01-08")
        assert not v.is_valid("2024-01-09")
        assert not v.is_valid("2024-02-30")

    def test_rejects_non_strings(self):
        v = DateStep(step=Interval(amount=1, unit="days"), base_value="1970-01-01")
        assert not v.is_valid(20240101)


class TestRegex:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2012-W01", True),
            ("2012-W52", True),
            ("2012-01", False),
            ("W12-2012", False),
            ("2012-W1", False),
            ("12-W01", False),
        ],
    )
    def test_week_format(self, value, expected):
        assert Regex(pattern=WEEK_PATTERN).is_valid(value) is expected

    def test_month_format(self):
        v = Regex(pattern=MONTH_PATTERN)
        assert v.is_valid("2012-12")
        assert not v.is_valid("2012-13")
        assert not v.is_valid("2012-1")

    def test_date_format(self):
        v = Regex(pattern=DATE_PATTERN)
        assert v.is_valid("2012-12-31")
        assert not v.is_valid("2012-12-32")

    def test_email_format(self):
        v = Regex(pattern=EMAIL_PATTERN)
        assert v.is_valid("user@example.com")
        assert not v.is_valid("user@")
        assert not v.is_valid("example.com")

    def test_rejects_non_scalars(self):
        assert not Regex(pattern=r"^\d+$").is_valid(None)
        assert not Regex(pattern=r"^\d+$").is_valid(True)
        assert Regex(pattern=r"^\d+$").is_valid(12)


class TestFloat:
    @pytest.mark.parametrize("value", [1, 1.5, "1", "-1.5", "1,234.5", ".5", "1e3"])
    def test_accepts(self, value):
        assert Float().is_valid(value)

    @pytest.mark.parametrize("value", ["abc", "1,23", "", True, None, "1.2.3"])
    def test_rejects(self, value):
        assert not Float().is_valid(value)

    def test_locale_separators(self):
        v = Float(decimal_separator=",", group_separator=".")
        assert v.is_valid("1.234,5")
        assert not v.is_valid("1,234.5")


class TestOtherValidators:
    def test_in_array_loose(self):
        v = InArray(haystack=(1, 2, "x"))
        assert v.is_valid("1")
        assert v.is_valid("x")
        assert not v.is_valid("3")

    def test_in_array_numeric_forms(self):
        v = InArray(haystack=(1, "2"))
        assert v.is_valid(1.0)
        assert v.is_valid("1.0")
        assert v.is_valid(2)
        assert not v.is_valid("1.5")

    def test_explode_string(self):
        v = Explode(validator=Regex(pattern=EMAIL_PATTERN))
        assert v.is_valid("a@example.com, b@example.com")
        assert not v.is_valid("a@example.com, nope")

    def test_explode_sequence(self):
        v = Explode(validator=InArray(haystack=("a", "b")))
        assert v.is_valid(["a", "b"])
        assert not v.is_valid(["a", "c"])
        assert not v.is_valid([])

    def test_upload_file(self):
        v = UploadFile()
        assert v.is_valid({"tmp_name": "/tmp/x", "name": "x.txt", "error": 0})
        assert not v.is_valid({"tmp_name": "/tmp/x", "name": "x.txt", "error": 2})
        assert not v.is_valid("x.txt")

    def test_captcha_word(self):
        v = CaptchaWord(id="abc", word="word")
        assert v.is_valid({"id": "abc", "input": "WORD"})
        assert not v.is_valid({"id": "other", "input": "word"})
        assert not v.is_valid({"id": "abc", "input": "drow"})


class TestSpecs:
    def test_specs_are_frozen(self):
        v = GreaterThan(min=1)
        with pytest.raises(Exception):
            v.min = 2

    def test_discriminated_by_kind(self):
        adapter = TypeAdapter(AnyValidator)
        spec = adapter.validate_python({"kind": "Step", "step": 5})
        assert isinstance(spec, Step)
        assert spec.step == 5

    def test_failed_validators(self):
        validators = [Float(), GreaterThan(min=0), LessThan(max=10)]
        assert failed_validators(validators, 5) == []
        assert failed_validators(validators, 11) == [validators[2]]


class TestLooseEquals:
    @pytest.mark.parametrize("left, right", [(1, "1"), (1.0, "1"), ("1.50", 1.5), ("x", "x")])
    def test_matches(self, left, right):
        assert loose_equals(left, right)

    @pytest.mark.parametrize("left, right", [(1, "2"), ("x", "y"), ("", 0), (True, 2)])
    def test_differs(self, left, right):
        assert not loose_equals(left, right)


class TestParseStep:
    @pytest.mark.parametrize("step", [1, 0.5, "2", "0.25"])
    def test_accepts_positive_numbers(self, step):
        assert parse_step(step) == step

    @pytest.mark.parametrize("step", ["abc", 0, -1, None, True])
    def test_rejects(self, step):
        with pytest.raises(ConfigurationError, match="Invalid step value"):
            parse_step(step)
