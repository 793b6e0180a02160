# errday/util/tz.py
"""Which calendar day is "today": local wall clock, UTC, an IANA zone or a fixed offset."""

from __future__ import annotations

import datetime as dt
import re
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_FIXED_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def canonical_tz(name: Optional[str]) -> str:
    """Blank means "local"; "utc"/"z" in any case mean "UTC"; anything else is kept as given."""
    s = (name or "").strip()
    if not s or s.lower() == "local":
        return "local"
    if s.lower() in ("utc", "z"):
        return "UTC"
    return s


def tzinfo_for(name: Optional[str]) -> dt.tzinfo:
    """tzinfo used to decide the calendar day; ValueError for unknown names."""
    tz = canonical_tz(name)
    if tz == "UTC":
        return dt.timezone.utc
    if tz == "local":
        return dt.datetime.now().astimezone().tzinfo or dt.timezone.utc

    m = _FIXED_OFFSET_RE.match(tz)
    if m:
        sign, hours, minutes = m.group(1), int(m.group(2)), int(m.group(3))
        if hours > 23 or minutes > 59:
            raise ValueError(f"Offset out of range: {tz!r}")
        delta = dt.timedelta(hours=hours, minutes=minutes)
        return dt.timezone(-delta if sign == "-" else delta)

    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as ex:
        raise ValueError(f"Unknown timezone: {tz!r}") from ex


def today_in(tz: dt.tzinfo) -> dt.date:
    return dt.datetime.now(tz=tz).date()
