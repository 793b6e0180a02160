from __future__ import annotations

import argparse
import json
import os
import sys
import webbrowser
from pathlib import Path

from .config import ENV_HOME, ENV_TZ, resolve_settings
from .payload import build_day_payload
from .policy import DaySession, SystemClock
from .render.html import render_day_html
from .render.text import render_day_text
from .store import EntryStore, FileStorage
from .util.datekey import shift_date_key


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        description="One daily thought, one daily generated piece. Shows a day's art and entry; only today is writable."
    )
    nav = ap.add_mutually_exclusive_group()
    nav.add_argument("--date", default=None, help="Day to show, YYYY-MM-DD (default: today in --tz)")
    nav.add_argument("--offset", type=int, default=0, help="Days relative to today, e.g. -1 for yesterday (default: 0)")

    ap.add_argument("--write", default=None, metavar="TEXT", help="Submit TEXT as today's thought (once per day)")
    ap.add_argument("--json", action="store_true", help="Print the day payload as JSON instead of the text card")
    ap.add_argument("--html", action="store_true", help="Also write a static HTML snapshot of the day")
    ap.add_argument(
        "--out",
        default=os.path.join("build", "errday.html"),
        help="HTML snapshot path (default: ./build/errday.html)",
    )
    ap.add_argument("--no-open", action="store_true", help="Do not open the HTML snapshot in a browser")
    ap.add_argument(
        "--tz",
        default=None,
        help=f"Timezone that decides the current day (default: env {ENV_TZ}, config.json, or 'local')",
    )
    ap.add_argument(
        "--data-dir",
        default=None,
        help=f"Directory holding persisted entries (default: env {ENV_HOME} or ~/.errday)",
    )

    args = ap.parse_args(argv)

    settings = resolve_settings(data_dir=args.data_dir, tz=args.tz)
    try:
        clock = SystemClock(settings.tz)
    except ValueError as e:
        raise SystemExit(f"Invalid --tz value: {e}")

    store = EntryStore(FileStorage(settings.data_dir), key=settings.storage_key)
    session = DaySession.start(store, clock)

    if args.date:
        try:
            session.select(args.date)
        except ValueError as e:
            raise SystemExit(f"Invalid --date value: {e}")
    elif args.offset:
        try:
            session.select(shift_date_key(session.today, args.offset))
        except ValueError as e:
            raise SystemExit(f"Invalid --offset value: {e}")

    rc = 0
    if args.write is not None:
        if not session.submit(args.write):
            if not session.is_editable:
                print(f"[errday] ERROR: {session.selected} is not editable: {session.overlay_copy}", file=sys.stderr)
            else:
                print("[errday] ERROR: nothing to save (text matches the stored entry)", file=sys.stderr)
            rc = 1

    payload = build_day_payload(session)
    if args.json:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(render_day_text(payload))

    if args.html:
        out_path = os.path.abspath(args.out)
        try:
            Path(out_path).parent.mkdir(parents=True, exist_ok=True)
        except PermissionError as e:
            raise SystemExit(f"Cannot create output directory '{Path(out_path).parent}': {e}")
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(render_day_html(payload))
        print(out_path, file=sys.stderr)

        if not args.no_open:
            try:
                webbrowser.open("file://" + out_path)
            except Exception:
                pass

    return rc


if __name__ == "__main__":
    sys.exit(main())
