# errday/render/html.py
"""Static, read-only HTML snapshot of one day payload (see errday.payload)."""

from __future__ import annotations

from typing import Any, Dict

import orjson

from .html_markup import BODY_MARKUP
from .html_shell import HTML_SHELL
from .inline_css import CSS_BLOCK
from .inline_js import JS_BLOCK

DATA_SLOT = "@@DAY_DATA@@"

PAGE = (
    HTML_SHELL
    .replace("@@STYLE@@", CSS_BLOCK)
    .replace("@@SCRIPT@@", JS_BLOCK)
    .replace("@@MARKUP@@", BODY_MARKUP)
)

if PAGE.count(DATA_SLOT) != 1:
    raise RuntimeError(f"page template must contain {DATA_SLOT} exactly once (found {PAGE.count(DATA_SLOT)})")

_REQUIRED_KEYS = ("date_key", "display_date", "color", "grid_size", "cells", "state")


def check_day_payload(payload: Any) -> None:
    """Raise unless `payload` has the fields the page script paints from."""
    if not isinstance(payload, dict):
        raise TypeError(f"payload must be dict, got {type(payload).__name__}")
    missing = [k for k in _REQUIRED_KEYS if k not in payload]
    if missing:
        raise ValueError(f"day payload missing keys: {', '.join(missing)}")
    n = payload["grid_size"]
    cells = payload["cells"]
    if not isinstance(n, int) or n <= 0:
        raise ValueError(f"grid_size must be a positive int, got {n!r}")
    if not isinstance(cells, list) or len(cells) != n * n:
        raise ValueError(f"cells must hold grid_size**2 = {n * n} items")


def render_day_html(payload: Dict[str, Any]) -> str:
    check_day_payload(payload)
    data = orjson.dumps(payload).decode("utf-8").replace("</", r"<\/")
    # Split once on the template so entry text can never be mistaken for the slot.
    head, _, tail = PAGE.partition(DATA_SLOT)
    return head + data + tail


__all__ = ["PAGE", "check_day_payload", "render_day_html"]
