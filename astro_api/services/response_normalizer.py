"""Clean-up of raw completion text into the HTML fragment the client renders.

The model is told to answer in HTML, but it regularly slips into Markdown or
echoes the psychomatrix structure. The rewrites below run in a fixed order:
emphasis has to be converted before stray ``**`` runs are stripped.
"""

from __future__ import annotations

import re
from typing import Optional

_BOLD = re.compile(r"\*\*(.+?)\*\*", re.DOTALL)
_ITALIC = re.compile(r"(?<!\*)\*(?!\s)([^*\n]+?)(?<!\s)\*(?!\*)")
_HEADERS = (
    (re.compile(r"^###[ \t]+(.+?)[ \t]*$", re.MULTILINE), r"<h3>\1</h3>"),
    (re.compile(r"^##[ \t]+(.+?)[ \t]*$", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^#[ \t]+(.+?)[ \t]*$", re.MULTILINE), r"<h1>\1</h1>"),
)
_STRAY_BOLD = re.compile(r"\*\*")
_DASH_BULLET = re.compile(r"^([ \t]*)-[ \t]+", re.MULTILINE)
_SQUARE_OBJECT = re.compile(r"\{\s*\"1\"\s*:[^}]*\}")
_SQUARE_ARRAY = re.compile(r"\[\s*\"1\"\s*:[^\]]*\]")


def normalize_response(text: Optional[str]) -> str:
    if not text:
        return ""
    out = _BOLD.sub(r"<strong>\1</strong>", text)
    out = _ITALIC.sub(r"<em>\1</em>", out)
    for pattern, repl in _HEADERS:
        out = pattern.sub(repl, out)
    out = _STRAY_BOLD.sub("", out)
    out = _DASH_BULLET.sub(r"\1• ", out)
    out = _SQUARE_OBJECT.sub("", out)
    out = _SQUARE_ARRAY.sub("", out)
    return out.strip()
