from __future__ import annotations

from typing import Any, Iterable, List

from models.prompt import PromptViewModel


def filter_prompts(items: Iterable[PromptViewModel], term: Any) -> List[PromptViewModel]:
    """Case-insensitive substring match on title or description; order preserved.

    A blank term returns a copy of all items. The input is never mutated.
    """
    q = (term if isinstance(term, str) else "").strip().lower()
    rows = list(items or [])
    if not q:
        return rows
    return [
        it for it in rows
        if q in (it.title or "").lower() or q in (it.description or "").lower()
    ]
