# errday/util/datekey.py
from __future__ import annotations

import datetime as dt
import re

_DATE_KEY_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_date_key(d: dt.date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date_key(s: str) -> dt.date:
    m = _DATE_KEY_RE.match(str(s).strip())
    if not m:
        raise ValueError(f"Invalid date key (expected YYYY-MM-DD): {s!r}")
    try:
        return dt.date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError as ex:
        raise ValueError(f"Invalid date key: {s!r} ({ex})") from ex


def is_date_key(s: object) -> bool:
    if not isinstance(s, str):
        return False
    try:
        parse_date_key(s)
    except ValueError:
        return False
    return True


def shift_date_key(key: str, by_days: int) -> str:
    # date + timedelta is pure calendar arithmetic; no wall-clock or DST involved.
    try:
        shifted = parse_date_key(key) + dt.timedelta(days=int(by_days))
    except OverflowError as ex:
        raise ValueError(f"Date key out of range: {key!r} shifted by {by_days} days") from ex
    return format_date_key(shifted)


def format_display_date(key: str) -> str:
    """Long en-US form, e.g. "Monday, January 1, 2024"."""
    d = parse_date_key(key)
    return f"{_WEEKDAYS[d.weekday()]}, {_MONTHS[d.month - 1]} {d.day}, {d.year}"
