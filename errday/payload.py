# errday/payload.py
from __future__ import annotations

import datetime as dt
from typing import Any, Dict

from .policy import DaySession
from .util.datekey import format_display_date

PAYLOAD_SCHEMA_VERSION = 1

FOOTER_TITLE = "ERR DAY"
FOOTER_TAGLINE = "ONE DAILY THOUGHT, ONE DAILY GENERATED PIECE."


def display_text(text: str) -> str:
    """Replace lone surrogates (undecodable argv bytes, say) with U+FFFD.

    Stored entries keep the exact text; only the rendered view is cleaned.
    """
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def build_day_payload(session: DaySession) -> Dict[str, Any]:
    """JSON-safe view model of the selected day.

    Shape (v1):
      {
        "schema_version": 1,
        "meta": {"generated_at": "...Z"},
        "today": "YYYY-MM-DD",
        "date_key": "YYYY-MM-DD",
        "display_date": "Monday, January 1, 2024",
        "color": "#rrggbb",
        "grid_size": 20,
        "cells": [0|1, ...],            # row-major, grid_size**2 items
        "entry": "..." | null,
        "state": {"is_today", "editable", "submitted", "overlay", "notice"},
        "footer": {"title", "tagline"}
      }
    """
    art = session.art()
    key = session.selected
    submitted = session.has_submitted_selected

    return {
        "schema_version": PAYLOAD_SCHEMA_VERSION,
        "meta": {
            "generated_at": dt.datetime.now(dt.timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z"),
        },
        "today": session.today,
        "date_key": key,
        "display_date": format_display_date(key),
        "color": art.color,
        "grid_size": art.grid_size,
        "cells": [1 if c.is_painted else 0 for c in art.cells],
        "entry": display_text(session.saved_entry) if submitted else None,
        "state": {
            "is_today": session.is_today_selected,
            "editable": session.is_editable,
            "submitted": submitted,
            "overlay": session.overlay_copy,
            "notice": session.notice.text,
        },
        "footer": {"title": FOOTER_TITLE, "tagline": FOOTER_TAGLINE},
    }


__all__ = ["PAYLOAD_SCHEMA_VERSION", "display_text", "build_day_payload"]
