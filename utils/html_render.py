from __future__ import annotations

from html import escape

from models.prompt import PromptDetailViewModel

def _badge(text: str, background: str) -> str:
    t = escape(text)
    return f'<span style="display:inline-block;margin:2px 6px 2px 0;padding:2px 10px;border-radius:10px;background:{escape(background)};color:#1F2937;font-size:12px;border:1px solid #D6E4FF;">{t}</span>'

def _mono_block(text: str) -> str:
    t = escape(text)
    return f'<pre style="white-space:pre-wrap;background:#0b12201a;border:1px solid #e5e7eb;border-radius:8px;padding:10px;margin-top:6px;">{t}</pre>'

def _days_ago_text(days: int) -> str:
    if days == 0:
        return "today"
    return "1 day ago" if days == 1 else f"{days} days ago"

def render_details(prompt: PromptDetailViewModel | None) -> str:
    if prompt is None:
        return '<div style="color:#6B7280">No prompt selected.</div>'
    title = escape(prompt.title or "(untitled)")
    level = prompt.complexity_level if prompt.complexity_level is not None else "–"
    badge = _badge(f"{prompt.complexity_text} · {level}/10", prompt.complexity_color)

    parts = [
        f'<h2 style="margin:0 0 4px 0;font-size:18px;">{title}</h2>',
        f'<div class="complexity-{escape(prompt.complexity_class)}" style="margin:0 0 10px 0;">{badge}</div>',
        f'<div style="margin:0 0 6px 0;color:#374151;"><strong>Views:</strong> {escape(prompt.formatted_views)}</div>',
        f'<div style="margin:0 0 6px 0;color:#374151;"><strong>Created:</strong> {escape(prompt.date or "–")} ({_days_ago_text(prompt.days_ago)})</div>',
    ]
    if (prompt.content or "").strip():
        parts.append('<div style="margin-top:10px;"><strong>Prompt</strong></div>')
        parts.append(_mono_block(prompt.content))

    return "<div>" + "\n".join(parts) + "</div>"
