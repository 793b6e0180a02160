# errday/config.py
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .store import STORAGE_KEY
from .util.console import log
from .util.tz import canonical_tz

ENV_HOME = "ERRDAY_HOME"
ENV_TZ = "ERRDAY_TZ"
CONFIG_FILENAME = "config.json"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    tz: str = "local"
    storage_key: str = STORAGE_KEY


def default_data_dir() -> Path:
    return Path.home() / ".errday"


def load_config_file(path: Path) -> Dict[str, Any]:
    """Load optional JSON config.

    Accepted keys: "tz", "storage_key". Missing or unreadable files and
    non-object documents yield {}.
    """
    try:
        if not path.is_file():
            return {}
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception as ex:
        log("config", "warn", f"ignoring unreadable config {path}: {ex}")
        return {}
    if not isinstance(raw, dict):
        log("config", "warn", f"ignoring config {path}: expected a JSON object")
        return {}

    out: Dict[str, Any] = {}
    tz = raw.get("tz")
    if isinstance(tz, str) and tz.strip():
        out["tz"] = tz.strip()
    key = raw.get("storage_key")
    if isinstance(key, str) and key.strip():
        out["storage_key"] = key.strip()
    return out


def resolve_settings(
    *,
    data_dir: Optional[str] = None,
    tz: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Merge CLI values > environment > config file > defaults."""
    env = os.environ if env is None else env

    raw_dir = data_dir or env.get(ENV_HOME) or ""
    base = Path(raw_dir).expanduser() if raw_dir.strip() else default_data_dir()

    file_cfg = load_config_file(base / CONFIG_FILENAME)

    tz_name = tz or env.get(ENV_TZ) or file_cfg.get("tz") or "local"
    return Settings(
        data_dir=base,
        tz=canonical_tz(tz_name),
        storage_key=str(file_cfg.get("storage_key") or STORAGE_KEY),
    )


__all__ = [
    "ENV_HOME",
    "ENV_TZ",
    "CONFIG_FILENAME",
    "Settings",
    "default_data_dir",
    "load_config_file",
    "resolve_settings",
]
