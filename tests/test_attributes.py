"""
Tests for per-tag attribute whitelists.
"""

import logging

import pytest

from htform.attributes import VALID_ATTRIBUTES, filter_attributes
from htform.exceptions import InvalidArgumentError


class TestFilterAttributes:
    def test_select_whitelist(self):
        attrs = {
            "name": "foo",
            "multiple": True,
            "class": "wide",
            "onclick": "x()",
            "size": 3,
        }
        assert filter_attributes("select", attrs) == {"name": "foo", "multiple": True, "size": 3}

    def test_option_whitelist(self):
        attrs = {"value": "a", "selected": True, "disabled": False, "options": []}
        assert filter_attributes("option", attrs) == {
            "value": "a",
            "selected": True,
            "disabled": False,
        }

    def test_optgroup_whitelist(self):
        attrs = {"label": "Group", "value": "x", "selected": True, "disabled": True}
        assert filter_attributes("optgroup", attrs) == {"label": "Group", "disabled": True}

    def test_preserves_order(self):
        attrs = {"size": 2, "name": "a", "required": True}
        assert list(filter_attributes("select", attrs)) == ["size", "name", "required"]

    def test_does_not_mutate_input(self):
        attrs = {"name": "a", "bogus": 1}
        filter_attributes("select", attrs)
        assert attrs == {"name": "a", "bogus": 1}

    def test_unknown_role(self):
        with pytest.raises(InvalidArgumentError):
            filter_attributes("blink", {})

    def test_dropped_keys_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="htform.attributes"):
            filter_attributes("optgroup", {"label": "x", "bogus": 1})
        assert "bogus" in caplog.text

    @pytest.mark.parametrize("role", ["text", "email", "file", "hidden", "range", "week"])
    def test_input_roles_accept_type(self, role):
        assert "type" in VALID_ATTRIBUTES[role]

    def test_email_excludes_numeric_bounds(self):
        for key in ("min", "max", "step", "accept"):
            assert key not in VALID_ATTRIBUTES["email"]

    def test_file_accepts_accept(self):
        assert filter_attributes("file", {"accept": "image/*", "placeholder": "x"}) == {
            "accept": "image/*"
        }
