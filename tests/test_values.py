"""
Tests for scalar coercion.
"""

import pytest

from envkit.values import ResolvedValue, ValueType, coerce, is_number, render_scalar, type_of


@pytest.mark.unit
class TestCoerce:
    """Tests for coerce()."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("34", 34),
            ("0", 0),
            ("-7", -7),
            ("+7", 7),
            ("007", 7),
            ("1e3", 1000),
            ("20e-1", 2),
            ("12E+2", 1200),
            ("9" * 64, int("9" * 64)),
        ],
    )
    def test_integers(self, text, expected):
        result = coerce(text)
        assert result.type is ValueType.INTEGER
        assert result.value == expected
        assert type(result.value) is int

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("34.3", 34.3),
            (".5", 0.5),
            ("34.", 34.0),
            ("-1.25", -1.25),
            ("1.5e2", 150.0),
        ],
    )
    def test_floats(self, text, expected):
        result = coerce(text)
        assert result.type is ValueType.FLOAT
        assert result.value == expected

    @pytest.mark.parametrize(
        "text",
        [
            "34,3",
            "1_000",
            " 34",
            "34 ",
            "inf",
            "nan",
            "0x1A",
            "192.168.1.1",
            "",
            "True",
            "FALSE",
            "yes",
            "٣",
            # Not whole, or too large for an exact integer / finite float
            "1e-5",
            "2E-1",
            "1e5000",
            "1e999999999",
            "1.5e5000",
            "9" * 5000,
        ],
    )
    def test_strings(self, text):
        result = coerce(text)
        assert result == ResolvedValue(ValueType.STRING, text)

    def test_booleans(self):
        assert coerce("true") == ResolvedValue(ValueType.BOOLEAN, True)
        assert coerce("false") == ResolvedValue(ValueType.BOOLEAN, False)

    def test_str_of_resolved_value(self):
        assert str(coerce("true")) == "true"
        assert str(coerce("34.3")) == "34.3"
        assert str(coerce("12")) == "12"
        assert str(coerce("x")) == "x"


@pytest.mark.unit
class TestHelpers:
    """Tests for is_number, type_of and render_scalar."""

    def test_is_number(self):
        assert is_number("12")
        assert is_number("1.")
        assert not is_number(".")
        assert not is_number("-")

    def test_type_of(self):
        assert type_of(True) is ValueType.BOOLEAN
        assert type_of(1) is ValueType.INTEGER
        assert type_of(1.0) is ValueType.FLOAT
        assert type_of("1") is ValueType.STRING

    def test_render_scalar(self):
        assert render_scalar(False) == "false"
        assert render_scalar(0.25) == "0.25"
        assert render_scalar(42) == "42"
        assert render_scalar("a b") == "a b"
