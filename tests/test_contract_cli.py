from __future__ import annotations

import datetime as dt
import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from errday import cli
from errday.store import FileStorage, load_entries


def _run(argv: list[str]) -> tuple[int, str, str]:
    out = io.StringIO()
    err = io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        rc = cli.main(argv)
    return rc, out.getvalue(), err.getvalue()


class TestCliContract(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.data = Path(self._td.name) / "data"
        self.base = ["--data-dir", str(self.data), "--tz", "UTC"]
        self.today = dt.datetime.now(dt.timezone.utc).date().isoformat()

    def tearDown(self) -> None:
        self._td.cleanup()

    def test_json_output_for_explicit_date(self) -> None:
        rc, out, _ = _run(self.base + ["--json", "--date", "2024-01-01"])
        self.assertEqual(rc, 0)
        p = json.loads(out)
        self.assertEqual(p["date_key"], "2024-01-01")
        self.assertEqual(p["color"], "#ef4444")
        self.assertEqual(len(p["cells"]), 400)

    def test_write_today_once(self) -> None:
        rc, out, _ = _run(self.base + ["--write", "first thought"])
        self.assertEqual(rc, 0)
        self.assertIn("first thought", out)
        self.assertEqual(load_entries(FileStorage(self.data)), {self.today: "first thought"})

        rc, _, err = _run(self.base + ["--write", "second thought"])
        self.assertEqual(rc, 1)
        self.assertIn("not editable", err)
        self.assertEqual(load_entries(FileStorage(self.data)), {self.today: "first thought"})

    def test_write_to_yesterday_is_refused(self) -> None:
        rc, _, err = _run(self.base + ["--offset", "-1", "--write", "late"])
        self.assertEqual(rc, 1)
        self.assertIn("ONLY TODAY IS EDITABLE.", err)
        self.assertEqual(load_entries(FileStorage(self.data)), {})

    def test_empty_write_is_refused(self) -> None:
        rc, _, err = _run(self.base + ["--write", ""])
        self.assertEqual(rc, 1)
        self.assertIn("nothing to save", err)

    def test_html_snapshot(self) -> None:
        out_path = Path(self._td.name) / "out" / "day.html"
        with patch("errday.cli.webbrowser.open") as wb:
            rc, _, err = _run(self.base + ["--html", "--out", str(out_path), "--no-open"])
        self.assertEqual(rc, 0)
        self.assertFalse(wb.called)
        self.assertTrue(out_path.exists())
        self.assertIn(str(out_path), err)
        self.assertIn('id="errday-data"', out_path.read_text(encoding="utf-8"))

    def test_invalid_tz_reports_user_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            _run(["--data-dir", str(self.data), "--tz", "No/Such_Zone"])
        self.assertIn("Invalid --tz value", str(ctx.exception))

    def test_invalid_date_reports_user_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            _run(self.base + ["--date", "2024-02-30"])
        self.assertIn("Invalid --date value", str(ctx.exception))

    def test_write_with_undecodable_argv_byte_is_kept_exactly(self) -> None:
        rc, out, _ = _run(self.base + ["--write", "abc\udcff"])
        self.assertEqual(rc, 0)
        self.assertIn("abc\ufffd", out)
        self.assertEqual(load_entries(FileStorage(self.data)), {self.today: "abc\udcff"})

    def test_last_calendar_day_is_selectable(self) -> None:
        rc, out, _ = _run(self.base + ["--json", "--date", "9999-12-31"])
        self.assertEqual(rc, 0)
        self.assertEqual(json.loads(out)["date_key"], "9999-12-31")

    def test_out_of_range_offset_reports_user_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            _run(self.base + ["--offset", "10000000"])
        self.assertIn("Invalid --offset value", str(ctx.exception))

    def test_env_supplies_data_dir(self) -> None:
        with patch.dict(os.environ, {"ERRDAY_HOME": str(self.data), "ERRDAY_TZ": "UTC"}):
            rc, _, _ = _run(["--write", "from env"])
        self.assertEqual(rc, 0)
        self.assertEqual(load_entries(FileStorage(self.data)), {self.today: "from env"})


if __name__ == "__main__":
    unittest.main(verbosity=2)
