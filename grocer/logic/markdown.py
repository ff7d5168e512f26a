"""Render the small markdown subset used in recipe instructions.

Supported: ``**bold**``, ``*italic*`` and bullet lines starting with ``- `` or
``* ``. Everything else becomes a paragraph; blank lines become ``<br/>``.
Text is HTML-escaped before markup is applied.
"""
from __future__ import annotations
import html
import re

__all__ = ["render_instructions"]

_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")


def _inline(text: str) -> str:
    text = _BOLD.sub(r"<strong>\1</strong>", text)
    return _ITALIC.sub(r"<em>\1</em>", text)


def render_instructions(text: str) -> str:
    if not text:
        return ''
    parts: list[str] = []
    in_list = False
    for line in html.escape(text, quote=False).split('\n'):
        # Bullet detection runs on the raw line so "* item" is not read as italic
        if line.startswith('- ') or line.startswith('* '):
            if not in_list:
                parts.append('<ul>')
                in_list = True
            parts.append(f"<li>{_inline(line[2:])}</li>")
            continue
        if in_list:
            parts.append('</ul>')
            in_list = False
        parts.append(f"<p>{_inline(line)}</p>" if line else '<br/>')
    if in_list:
        parts.append('</ul>')
    return ''.join(parts)
