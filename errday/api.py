"""errday.api

Stable *library* entrypoint for ERR DAY.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from errday.art import (
    ART_CELLS,
    DAILY_COLORS,
    ArtCell,
    ArtParams,
    DailyArt,
    generate_daily_art,
)
from errday.config import Settings, resolve_settings
from errday.payload import build_day_payload
from errday.policy import DaySession, FixedClock, SavedNotice, SystemClock
from errday.prng import cell_noise, create_generator, hash_seed
from errday.store import (
    STORAGE_KEY,
    EntryStore,
    FileStorage,
    MemoryStorage,
    StoreNotLoadedError,
    load_entries,
    save_entries,
)
from errday.util.datekey import format_date_key, format_display_date, parse_date_key, shift_date_key

__all__ = [
    "hash_seed",
    "create_generator",
    "cell_noise",
    "ART_CELLS",
    "DAILY_COLORS",
    "ArtCell",
    "ArtParams",
    "DailyArt",
    "generate_daily_art",
    "STORAGE_KEY",
    "EntryStore",
    "FileStorage",
    "MemoryStorage",
    "StoreNotLoadedError",
    "load_entries",
    "save_entries",
    "DaySession",
    "SystemClock",
    "FixedClock",
    "SavedNotice",
    "Settings",
    "resolve_settings",
    "build_day_payload",
    "format_date_key",
    "parse_date_key",
    "shift_date_key",
    "format_display_date",
]
