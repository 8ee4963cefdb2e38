"""Tests for xtio.lib.log_lib.inspector — value inspection."""

from xtio.lib.log_lib import InputKind, classify, format_value, inspect


class Unprintable:
    def __repr__(self):
        raise RuntimeError("no repr for you")


class TestClassify:

    def test_text(self):
        assert classify("abc") is InputKind.TEXT

    def test_absent(self):
        assert classify(None) is InputKind.ABSENT

    def test_structured(self):
        assert classify(3) is InputKind.STRUCTURED
        assert classify({"a": 1}) is InputKind.STRUCTURED
        assert classify(b"bytes") is InputKind.STRUCTURED


class TestInspect:

    def test_strings_pass_through(self):
        assert inspect("a", "  padded  ") == ["a", "  padded  "]

    def test_keeps_order(self):
        assert inspect("x", 1, None) == ["x", "1", "None"]

    def test_no_arguments(self):
        assert inspect() == []

    def test_structures(self):
        assert format_value([1, 2]) == "[1, 2]"
        assert format_value({"a": 1}) == "{'a': 1}"

    def test_depth_is_bounded(self):
        nested = {"a": {"b": {"c": {"d": {"e": 1}}}}}
        text = format_value(nested)
        assert "'c'" in text
        assert "'e'" not in text

    def test_custom_depth(self):
        text = format_value({"a": {"b": 1}}, max_depth=1)
        assert "'b'" not in text

    def test_wide_value_wraps_at_max_width(self):
        value = list(range(40))
        assert "\n" in format_value(value)
        assert format_value(value, max_width=1000) == repr(value)

    def test_unprintable_value_degrades(self):
        text = format_value(Unprintable())
        assert isinstance(text, str)
        assert text
