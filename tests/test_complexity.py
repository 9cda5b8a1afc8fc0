# tests/test_complexity.py
import pytest

from presentation.complexity import (
    classify, complexity_class, complexity_color, complexity_label, complexity_style_label,
    COLOR_COMPLEX, COLOR_DEFAULT, COLOR_MODERATE, COLOR_SIMPLE,
)


@pytest.mark.parametrize("level,label", [(1, "Simple"), (3, "Simple"), (4, "Moderate"),
                                         (7, "Moderate"), (8, "Complex"), (10, "Complex")])
def test_strict_label_buckets(level, label):
    assert complexity_label(level) == label


@pytest.mark.parametrize("level", [0, -3, 11, 100, None, "abc", 3.5])
def test_strict_label_unknown_outside_range(level):
    assert complexity_label(level) == "Unknown"


def test_style_class_has_no_unknown_bucket():
    assert complexity_class(0) == "simple"
    assert complexity_class(-5) == "simple"
    assert complexity_class(None) == "simple"
    assert complexity_class(3) == "simple"
    assert complexity_class(4) == "moderate"
    assert complexity_class(7) == "moderate"
    assert complexity_class(8) == "complex"
    assert complexity_class(42) == "complex"
    assert complexity_style_label(42) == "Complex"
    assert complexity_style_label(None) == "Simple"


def test_color_is_case_insensitive():
    assert complexity_color("SIMPLE") == complexity_color("simple") == COLOR_SIMPLE == "#D0EBFF"
    assert complexity_color("Moderate") == COLOR_MODERATE == "#FFF7C3"
    assert complexity_color(" complex ") == COLOR_COMPLEX == "#FFE5E5"


@pytest.mark.parametrize("value", ["", "Unknown", "weird", None, object(), ["simple"]])
def test_color_falls_back_to_default(value):
    assert complexity_color(value) == COLOR_DEFAULT == "#f5f5f5"


def test_color_accepts_numeric_level():
    assert complexity_color(2) == COLOR_SIMPLE
    assert complexity_color(9) == COLOR_COMPLEX
    assert complexity_color(0) == COLOR_DEFAULT


def test_classify_combines_both_policies():
    info = classify(5)
    assert info.label == "Moderate"
    assert info.color_hex == COLOR_MODERATE
    assert info.style_class == "moderate"

    out_of_range = classify(0)
    assert out_of_range.label == "Unknown"
    assert out_of_range.color_hex == COLOR_DEFAULT
    assert out_of_range.style_class == "simple"


def test_classify_looks_up_label_text_for_colour():
    assert classify("SIMPLE").color_hex == classify("simple").color_hex == COLOR_SIMPLE
    assert classify("Complex").color_hex == COLOR_COMPLEX
    info = classify("moderate")
    assert info.label == "Unknown"
    assert info.color_hex == COLOR_MODERATE
    assert classify("weird").color_hex == COLOR_DEFAULT
