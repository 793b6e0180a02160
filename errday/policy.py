# errday/policy.py
"""Day policy: which date is selected, which one is editable, what is locked.

A `DaySession` is the explicit context object for one running session. It
captures "today" once from an injected clock, loads the entry store once,
and saves the store after every accepted submission.

Lifecycle per day:

  (no entry) --submit--> (submitted)

Only today can take the transition, and "submitted" has no way back.
"""

from __future__ import annotations

import datetime as dt
import time
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Union

from .art import DailyArt, generate_daily_art
from .store import Entries, EntryStore
from .util.console import log
from .util.datekey import format_date_key, parse_date_key, shift_date_key
from .util.tz import canonical_tz, today_in, tzinfo_for

Clock = Callable[[], dt.date]

SAVED_NOTICE_SECONDS = 3.2
SAVED_NOTICE_TEXT = "Thought saved for today."

OVERLAY_EDITABLE = "TODAY IS EDITABLE. WRITE YOUR THOUGHTS."
OVERLAY_LOCKED = "THIS DAY IS LOCKED."
OVERLAY_READ_ONLY = "ONLY TODAY IS EDITABLE."


class SystemClock:
    """Wall-clock calendar day in a timezone ("local" by default)."""

    def __init__(self, tz: Optional[str] = "local") -> None:
        self.tz_name = canonical_tz(tz)
        self._tzinfo = tzinfo_for(self.tz_name)

    def __call__(self) -> dt.date:
        return today_in(self._tzinfo)


class FixedClock:
    def __init__(self, day: Union[dt.date, str]) -> None:
        self.day = parse_date_key(day) if isinstance(day, str) else day

    def __call__(self) -> dt.date:
        return self.day


class SavedNotice:
    """Transient "saved" notice that hides itself after a delay."""

    def __init__(self, *, seconds: float = SAVED_NOTICE_SECONDS, monotonic: Callable[[], float] = time.monotonic) -> None:
        self.seconds = float(seconds)
        self._monotonic = monotonic
        self._shown_at: Optional[float] = None

    def show(self) -> None:
        self._shown_at = self._monotonic()

    def dismiss(self) -> None:
        self._shown_at = None

    @property
    def visible(self) -> bool:
        if self._shown_at is None:
            return False
        if self._monotonic() - self._shown_at >= self.seconds:
            self._shown_at = None
            return False
        return True

    @property
    def text(self) -> Optional[str]:
        return SAVED_NOTICE_TEXT if self.visible else None


class DaySession:
    def __init__(self, store: EntryStore, today: str, entries: Entries, *, notice: Optional[SavedNotice] = None) -> None:
        self.store = store
        self._today = today
        self._selected = today
        self._entries: Entries = dict(entries)
        self._draft = self._entries.get(today, "")
        self.notice = notice or SavedNotice()

    @classmethod
    def start(cls, store: EntryStore, clock: Optional[Clock] = None, *, notice: Optional[SavedNotice] = None) -> "DaySession":
        today = format_date_key((clock or SystemClock())())
        return cls(store, today, store.load(), notice=notice)

    # -- state -----------------------------------------------------------

    @property
    def today(self) -> str:
        return self._today

    @property
    def selected(self) -> str:
        return self._selected

    @property
    def entries(self) -> Mapping[str, str]:
        return MappingProxyType(self._entries)

    @property
    def draft(self) -> str:
        return self._draft

    # -- navigation ------------------------------------------------------

    def select(self, date_key: str) -> str:
        self._selected = format_date_key(parse_date_key(date_key))
        self._draft = self.saved_entry
        self.notice.dismiss()
        return self._selected

    def go_to_previous_day(self) -> str:
        return self.select(shift_date_key(self._selected, -1))

    def go_to_next_day(self) -> str:
        return self.select(shift_date_key(self._selected, 1))

    def go_to_today(self) -> str:
        return self.select(self._today)

    # -- predicates ------------------------------------------------------

    @property
    def is_today_selected(self) -> bool:
        return self._selected == self._today

    def has_submitted(self, date_key: str) -> bool:
        # Presence, not truthiness: an empty stored string still locks the day.
        return date_key in self._entries

    @property
    def has_submitted_selected(self) -> bool:
        return self.has_submitted(self._selected)

    @property
    def is_editable(self) -> bool:
        return self.is_today_selected and not self.has_submitted(self._today)

    @property
    def saved_entry(self) -> str:
        return self._entries.get(self._selected, "")

    @property
    def has_unsaved_changes(self) -> bool:
        return self._draft != self.saved_entry

    @property
    def can_submit(self) -> bool:
        return self.is_editable and self.has_unsaved_changes

    @property
    def overlay_copy(self) -> str:
        if self.is_editable:
            return OVERLAY_EDITABLE
        if self.has_submitted_selected:
            return OVERLAY_LOCKED
        return OVERLAY_READ_ONLY

    # -- mutations -------------------------------------------------------

    def set_draft(self, text: str) -> bool:
        if not self.is_editable:
            return False
        self._draft = str(text)
        self.notice.dismiss()
        return True

    def submit(self, text: Optional[str] = None) -> bool:
        """Write the draft (or `text`) as the selected day's entry.

        Returns False without side effects when the day is not editable or
        the text equals what is stored.
        """
        if text is not None and not self.set_draft(text):
            return False
        if not self.can_submit:
            return False

        key = self._selected
        # Compare-and-set: a key that is already present is never overwritten.
        if key in self._entries:
            return False
        updated = dict(self._entries)
        updated[key] = self._draft
        self.store.save(updated)
        self._entries = updated
        self.notice.show()
        log("policy", "info", f"entry saved for {key} ({len(self._draft)} chars)")
        return True

    def art(self) -> DailyArt:
        return generate_daily_art(self._selected)


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "SavedNotice",
    "DaySession",
    "SAVED_NOTICE_SECONDS",
    "SAVED_NOTICE_TEXT",
    "OVERLAY_EDITABLE",
    "OVERLAY_LOCKED",
    "OVERLAY_READ_ONLY",
]
