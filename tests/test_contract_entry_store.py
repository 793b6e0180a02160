from __future__ import annotations

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr
from pathlib import Path

from errday.store import (
    STORAGE_KEY,
    EntryStore,
    FileStorage,
    MemoryStorage,
    StoreNotLoadedError,
    load_entries,
    parse_entries,
    save_entries,
)


def _quiet(fn, *args, **kwargs):
    with redirect_stderr(io.StringIO()):
        return fn(*args, **kwargs)


class TestEntryStoreContract(unittest.TestCase):
    def test_missing_state_loads_empty(self) -> None:
        self.assertEqual(load_entries(MemoryStorage()), {})

    def test_round_trip_all_string_store(self) -> None:
        storage = MemoryStorage()
        entries = {"2024-01-01": "first", "2024-01-02": "", "2024-01-03": "ünïcödé\nline two"}
        save_entries(storage, entries)
        self.assertEqual(load_entries(storage), entries)

    def test_corrupt_state_loads_empty(self) -> None:
        for raw in ("{not json", "[1, 2, 3]", '"text"', "42", "null", "true"):
            storage = MemoryStorage({STORAGE_KEY: raw})
            self.assertEqual(_quiet(load_entries, storage), {}, raw)

    def test_non_string_values_are_dropped(self) -> None:
        raw = json.dumps({"2024-01-01": "keep", "2024-01-02": 5, "2024-01-03": {"a": 1}, "2024-01-04": False, "2024-01-05": None})
        got = _quiet(parse_entries, raw)
        self.assertEqual(got, {"2024-01-01": "keep"})

    def test_unknown_keys_with_string_values_survive(self) -> None:
        self.assertEqual(parse_entries('{"extra": "x"}'), {"extra": "x"})

    def test_save_before_load_is_refused(self) -> None:
        storage = MemoryStorage({STORAGE_KEY: '{"2024-01-01": "old"}'})
        store = EntryStore(storage)
        self.assertFalse(store.loaded)
        with self.assertRaises(StoreNotLoadedError):
            store.save({})
        self.assertEqual(storage.get_item(STORAGE_KEY), '{"2024-01-01": "old"}')

    def test_save_overwrites_full_content(self) -> None:
        storage = MemoryStorage({STORAGE_KEY: '{"a": "1", "b": "2"}'})
        store = EntryStore(storage)
        store.load()
        store.save({"c": "3"})
        self.assertEqual(store.load(), {"c": "3"})

    def test_storage_read_failure_loads_empty(self) -> None:
        class Broken:
            def get_item(self, key):
                raise OSError("disk gone")

        store = EntryStore(Broken())
        self.assertEqual(_quiet(store.load), {})
        self.assertTrue(store.loaded)

    def test_file_storage_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td) / "data"
            storage = FileStorage(root)
            self.assertIsNone(storage.get_item(STORAGE_KEY))
            save_entries(storage, {"2024-05-01": "hello"})

            files = sorted(p.name for p in root.iterdir())
            self.assertEqual(files, ["err-day_entries_v1.json"])
            self.assertEqual(json.loads((root / files[0]).read_text(encoding="utf-8")), {"2024-05-01": "hello"})

            self.assertEqual(load_entries(FileStorage(root)), {"2024-05-01": "hello"})
            storage.remove_item(STORAGE_KEY)
            self.assertIsNone(storage.get_item(STORAGE_KEY))
            storage.remove_item(STORAGE_KEY)

    def test_file_storage_keeps_lone_surrogates(self) -> None:
        entries = {"2024-01-01": "bad \udcff byte", "2024-01-02": "caf\u00e9 \U0001f600"}
        with tempfile.TemporaryDirectory() as td:
            storage = FileStorage(td)
            save_entries(storage, entries)
            raw = storage.path_for(STORAGE_KEY).read_text(encoding="utf-8")
            self.assertIn("\\udcff", raw)
            self.assertEqual(load_entries(FileStorage(td)), entries)

    def test_file_storage_corrupt_file_loads_empty(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            storage = FileStorage(td)
            storage.path_for(STORAGE_KEY).write_bytes(b"\xff\xfe garbage")
            self.assertEqual(_quiet(load_entries, storage), {})


if __name__ == "__main__":
    unittest.main(verbosity=2)
