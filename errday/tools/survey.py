#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from collections import Counter
from typing import Any, Dict

from errday.art import DAILY_COLORS, PATTERN_MODES, generate_daily_art
from errday.util.datekey import format_date_key, parse_date_key, shift_date_key


def _die(msg: str, rc: int = 2) -> int:
    print(f"[errday-survey] ERROR: {msg}", file=sys.stderr)
    return rc


def survey(start: str, days: int) -> Dict[str, Any]:
    """Colour / pattern-mode histogram over `days` consecutive date keys."""
    colors: Counter = Counter()
    modes: Counter = Counter()
    painted_min = None
    painted_max = None
    distinct = set()

    key = format_date_key(parse_date_key(start))
    for _ in range(max(0, int(days))):
        art = generate_daily_art(key)
        colors[art.color] += 1
        modes[art.params.pattern_mode] += 1
        n = art.painted_count
        painted_min = n if painted_min is None else min(painted_min, n)
        painted_max = n if painted_max is None else max(painted_max, n)
        distinct.add(tuple(c.is_painted for c in art.cells))
        key = shift_date_key(key, 1)

    return {
        "start": start,
        "days": int(days),
        "colors": {c: colors.get(c, 0) for c in DAILY_COLORS},
        "modes": {str(m): modes.get(m, 0) for m in range(PATTERN_MODES)},
        "painted_min": painted_min,
        "painted_max": painted_max,
        "distinct_patterns": len(distinct),
    }


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Survey daily art variety over a range of days.")
    ap.add_argument("--start", required=True, help="First day, YYYY-MM-DD")
    ap.add_argument("--days", type=int, default=366, help="Number of days (default: 366)")
    ap.add_argument("--json", action="store_true", help="Emit JSON")
    args = ap.parse_args(argv)

    try:
        res = survey(args.start, args.days)
    except ValueError as e:
        return _die(str(e))

    if args.json:
        print(json.dumps(res, indent=2, sort_keys=True))
        return 0

    print(f"[errday-survey] start={res['start']} days={res['days']} distinct={res['distinct_patterns']}")
    for color, count in res["colors"].items():
        print(f"  color {color}: {count}")
    for mode, count in res["modes"].items():
        print(f"  mode {mode}: {count}")
    print(f"  painted cells: min={res['painted_min']} max={res['painted_max']}")
    missing = [c for c, k in res["colors"].items() if k == 0] + [f"mode {m}" for m, k in res["modes"].items() if k == 0]
    if res["days"] and missing:
        print(f"[errday-survey] WARN: never drawn: {', '.join(missing)}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
