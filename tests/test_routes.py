# tests/test_routes.py
import pytest

from ui.routes import ADD, DASHBOARD, DETAIL, LOGIN, Route, prompt_path, resolve_route


@pytest.mark.parametrize("path,expected", [
    ("", Route(DASHBOARD)),
    (None, Route(DASHBOARD)),
    ("/", Route(DASHBOARD)),
    ("dashboard", Route(DASHBOARD)),
    ("prompts", Route(DASHBOARD)),
    ("/login", Route(LOGIN)),
    ("add/", Route(ADD)),
    ("prompts/42", Route(DETAIL, "42")),
    ("/prompts/abc-1/", Route(DETAIL, "abc-1")),
    ("nowhere", Route(DASHBOARD)),
    ("prompts/1/edit", Route(DASHBOARD)),
])
def test_resolve_route(path, expected):
    assert resolve_route(path) == expected


def test_prompt_path_roundtrip():
    assert resolve_route(prompt_path(7)) == Route(DETAIL, "7")
