# errday/render/text.py
from __future__ import annotations

import textwrap
from typing import Any, Dict, List

from ..art import DailyArt


def render_art_text(art: DailyArt, painted: str = "#", blank: str = ".") -> str:
    return "\n".join("".join(painted if on else blank for on in row) for row in art.rows())


def _grid_lines(payload: Dict[str, Any], painted: str, blank: str) -> List[str]:
    n = int(payload.get("grid_size") or 0)
    cells = payload.get("cells") or []
    return ["".join(painted if cells[r * n + c] else blank for c in range(n)) for r in range(n)]


def render_day_text(payload: Dict[str, Any], *, width: int = 60, painted: str = "#", blank: str = ".") -> str:
    """Terminal card for one day payload (see errday.payload)."""
    state = payload.get("state") or {}
    footer = payload.get("footer") or {}

    lines: List[str] = []
    lines.append(f"{payload.get('display_date', '')}  [{payload.get('color', '')}]")
    lines.append("")
    lines.extend(_grid_lines(payload, painted, blank))
    lines.append("")

    entry = payload.get("entry")
    if isinstance(entry, str) and entry:
        lines.extend(textwrap.wrap(entry, width=width) or [""])
    else:
        lines.append(str(state.get("overlay") or ""))

    notice = state.get("notice")
    if notice:
        lines.append(str(notice))

    flags = []
    if state.get("is_today"):
        flags.append("today")
    flags.append("editable" if state.get("editable") else "locked")
    if state.get("submitted"):
        flags.append("submitted")
    lines.append("")
    lines.append(f"{footer.get('title', '')} · {' · '.join(flags)}")
    return "\n".join(lines)
