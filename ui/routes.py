from __future__ import annotations
from typing import NamedTuple, Optional

DASHBOARD = "dashboard"
LOGIN = "login"
ADD = "add"
DETAIL = "detail"

# path -> page; "" and "prompts" show the dashboard, unknown paths fall back to it
ROUTES = {
    "": DASHBOARD,
    "dashboard": DASHBOARD,
    "prompts": DASHBOARD,
    "login": LOGIN,
    "add": ADD,
}


class Route(NamedTuple):
    name: str
    prompt_id: Optional[str] = None


def resolve_route(path: str | None) -> Route:
    parts = [p for p in (path or "").strip().split("/") if p]
    if len(parts) == 2 and parts[0] == "prompts":
        return Route(DETAIL, parts[1])
    key = parts[0] if len(parts) == 1 else ""
    if len(parts) > 2:
        return Route(DASHBOARD)
    return Route(ROUTES.get(key, DASHBOARD))


def prompt_path(prompt_id) -> str:
    return f"prompts/{prompt_id}"
