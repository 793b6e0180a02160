# errday/util/console.py
from __future__ import annotations
import sys
from typing import Any

def eprint(*args: Any) -> None:
    print(*args, file=sys.stderr)


def log(component: str, level: str, msg: str) -> None:
    """Emit one `[errday.<component>] LEVEL: msg` line on stderr."""
    eprint(f"[errday.{component}] {level.upper()}: {msg}")
