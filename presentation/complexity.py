"""Complexity level (1-10) -> label, colour, style class.

Two bucketing policies live side by side:

- strict (complexity_label): 1-3 / 4-7 / 8-10, everything else "Unknown".
  Used by the library list mapping and the table colours.
- style (complexity_class, complexity_style_label): <=3 / <=7 / rest, no
  "Unknown" bucket; falsy and sub-1 values count as simple.
  Used by the detail page badge and the create-prompt form indicator.
"""
from __future__ import annotations

from typing import Any, NamedTuple, Optional

COLOR_SIMPLE = "#D0EBFF"
COLOR_MODERATE = "#FFF7C3"
COLOR_COMPLEX = "#FFE5E5"
COLOR_DEFAULT = "#f5f5f5"

_COLORS = {
    "simple": COLOR_SIMPLE,
    "moderate": COLOR_MODERATE,
    "complex": COLOR_COMPLEX,
}


class ComplexityInfo(NamedTuple):
    label: str
    color_hex: str
    style_class: str


def _level(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def complexity_label(level: Any) -> str:
    lv = _level(level)
    if lv is None:
        return "Unknown"
    if 1 <= lv <= 3:
        return "Simple"
    if 4 <= lv <= 7:
        return "Moderate"
    if 8 <= lv <= 10:
        return "Complex"
    return "Unknown"


def complexity_class(level: Any) -> str:
    lv = _level(level)
    if not lv:
        return "simple"
    if lv <= 3:
        return "simple"
    if lv <= 7:
        return "moderate"
    return "complex"


def complexity_style_label(level: Any) -> str:
    return complexity_class(level).capitalize()


def complexity_color(value: Any) -> str:
    """Background colour for a label ("Simple", "COMPLEX", ...) or a numeric level."""
    if _level(value) is not None:
        value = complexity_label(value)
    if not isinstance(value, str):
        return COLOR_DEFAULT
    return _COLORS.get(value.strip().lower(), COLOR_DEFAULT)


def classify(level: Any) -> ComplexityInfo:
    label = complexity_label(level)
    # label text ("SIMPLE", "moderate") is looked up directly for the colour
    color = complexity_color(level if isinstance(level, str) else label)
    return ComplexityInfo(label, color, complexity_class(level))
