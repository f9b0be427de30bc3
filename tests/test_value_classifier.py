"""Tests for per-cell classification."""

import pytest

from level2_inference.types import ClassifiedValue, ValueKind
from level2_inference.value_classifier import classify_value, is_float32, is_int32


def test_empty_string_is_empty():
    assert classify_value("") == ClassifiedValue.empty()


@pytest.mark.parametrize("text", ["42", "-7", "+5", "0", "007", "2147483647", "-2147483648"])
def test_integers(text):
    assert classify_value(text).kind is ValueKind.INTEGER


@pytest.mark.parametrize(
    "text", ["4.4", "1e3", ".5", "5.", "1E-3", "-0.0", "+2.5e+10", "inf", "-Infinity", "NaN"]
)
def test_reals(text):
    assert classify_value(text).kind is ValueKind.REAL


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999999999999"])
def test_integers_outside_32_bits_are_real(text):
    assert classify_value(text).kind is ValueKind.REAL


def test_huge_exponent_is_still_real():
    assert classify_value("1e50").kind is ValueKind.REAL


@pytest.mark.parametrize(
    "text",
    ["green", "3abc", " 1", "1 ", "1_000", "0x10", "1,000", "e5", ".", "-", "1e", "1.2.3", " "],
)
def test_factors_carry_text_verbatim(text):
    result = classify_value(text)
    assert result.kind is ValueKind.FACTOR
    assert result.text == text


def test_factor_text_is_not_case_folded():
    assert classify_value("Green").text == "Green"


def test_classification_is_deterministic():
    for text in ["", "42", "4.4", "green"]:
        assert classify_value(text) == classify_value(text)


def test_numeric_kinds_carry_no_text():
    assert classify_value("42").text is None
    assert classify_value("4.4").text is None


def test_helpers():
    assert is_int32("12")
    assert not is_int32("1.0")
    assert is_float32("1.0")
    assert not is_float32("abc")


def test_factor_requires_text():
    with pytest.raises(ValueError):
        ClassifiedValue(ValueKind.FACTOR)
    with pytest.raises(ValueError):
        ClassifiedValue(ValueKind.INTEGER, "1")


def test_very_long_digit_strings_are_real():
    assert classify_value("1" * 5000).kind is ValueKind.REAL
    assert classify_value("-" + "9" * 5000).kind is ValueKind.REAL


def test_leading_zeros_do_not_count_towards_range():
    assert classify_value("0" * 20 + "42").kind is ValueKind.INTEGER
    assert classify_value("00002147483648").kind is ValueKind.REAL
