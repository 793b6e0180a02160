# errday/store.py
from __future__ import annotations

import json
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .util.console import log

STORAGE_KEY = "err-day:entries:v1"

Entries = Dict[str, str]


class StoreNotLoadedError(RuntimeError):
    """Raised when save() is attempted before the persisted state was read."""


class MemoryStorage:
    """In-process key/value storage with the local-storage surface."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


_UNSAFE_RE = re.compile(r"[^A-Za-z0-9._-]+")


class FileStorage:
    """Key/value storage backed by one UTF-8 file per key under `root`.

    Writes go through a temp file in the same directory and `os.replace`,
    so a reader never observes a half-written value.
    """

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        name = _UNSAFE_RE.sub("_", key).strip("_") or "item"
        return self.root / f"{name}.json"

    def get_item(self, key: str) -> Optional[str]:
        p = self.path_for(key)
        try:
            return p.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as ex:
            log("store", "warn", f"unreadable storage file {p}: {ex}")
            return None

    def set_item(self, key: str, value: str) -> None:
        p = self.path_for(key)
        p.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=p.name + ".", suffix=".tmp", dir=str(p.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(str(value))
            os.replace(tmp, p)
        except BaseException:
            try:
                os.unlink(tmp)
            except OSError:
                pass
            raise

    def remove_item(self, key: str) -> None:
        try:
            self.path_for(key).unlink()
        except FileNotFoundError:
            pass


def _filter_entries(obj: Any) -> Entries:
    out: Entries = {}
    dropped = 0
    for k, v in obj.items():
        if isinstance(v, str):
            out[str(k)] = v
        else:
            dropped += 1
    if dropped:
        log("store", "warn", f"dropped {dropped} non-string entr{'y' if dropped == 1 else 'ies'}")
    return out


def parse_entries(raw: Optional[str]) -> Entries:
    """Decode persisted entries; anything unusable becomes an empty store."""
    if not raw:
        return {}
    try:
        obj = json.loads(raw)
    except Exception as ex:
        log("store", "warn", f"corrupt entries ignored: {ex}")
        return {}
    if not isinstance(obj, dict):
        log("store", "warn", f"entries must be a JSON object; got {type(obj).__name__}, ignored")
        return {}
    return _filter_entries(obj)


class EntryStore:
    """Load-once / save-on-mutation wrapper around a storage backend."""

    def __init__(self, storage, key: str = STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> Entries:
        try:
            raw = self.storage.get_item(self.key)
        except Exception as ex:
            log("store", "warn", f"storage read failed for {self.key!r}: {ex}")
            raw = None
        entries = parse_entries(raw)
        self._loaded = True
        return entries

    def save(self, entries: Mapping[str, str]) -> None:
        if not self._loaded:
            raise StoreNotLoadedError("EntryStore.save() called before load(); refusing to overwrite unread state")
        self.storage.set_item(self.key, json.dumps(dict(entries)))


def load_entries(storage, key: str = STORAGE_KEY) -> Entries:
    return EntryStore(storage, key).load()


def save_entries(storage, entries: Mapping[str, str], key: str = STORAGE_KEY) -> None:
    store = EntryStore(storage, key)
    store.load()
    store.save(entries)


__all__ = [
    "STORAGE_KEY",
    "Entries",
    "StoreNotLoadedError",
    "MemoryStorage",
    "FileStorage",
    "EntryStore",
    "parse_entries",
    "load_entries",
    "save_entries",
]
