# tests/test_formatting.py
import pytest

from presentation.formatting import format_short_date, format_views


@pytest.mark.parametrize("views,text", [(0, "0"), (42, "42"), (999, "999"), (1000, "1.0k"),
                                        (1500, "1.5k"), (12000, "12.0k"), (1234567, "1234.6k")])
def test_format_views(views, text):
    assert format_views(views) == text


@pytest.mark.parametrize("views,text", [(1250, "1.3k"), (2250, "2.3k"), (1750, "1.8k"), (1050, "1.1k")])
def test_format_views_rounds_ties_up(views, text):
    assert format_views(views) == text


@pytest.mark.parametrize("views", [None, -5, "many", True])
def test_format_views_treats_bad_input_as_zero(views):
    assert format_views(views) == "0"


def test_short_date_en_us():
    assert format_short_date("2024-01-05T10:30:00Z") == "Jan 5, 2024"
    assert format_short_date("2023-12-31") == "Dec 31, 2023"
    assert format_short_date("2024-07-04 08:00:00") == "Jul 4, 2024"


def test_short_date_keeps_calendar_date_of_offset_timestamps():
    assert format_short_date("2024-03-01T23:30:00-08:00") == "Mar 1, 2024"


def test_short_date_unparseable_returns_input():
    assert format_short_date("not a date") == "not a date"
    assert format_short_date("") == ""
    assert format_short_date(None) == ""


def test_format_views_handles_huge_counts():
    assert format_views(1e30).endswith("k")
    assert format_views(float("inf")) == "0"
