"""Statické dáta balíka (`kvizovka/assets/`).

Cesty sa skladajú od umiestnenia modulu, nie od pracovného adresára.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

PREMIUMS_FILE = "premiums.json"


def get_assets_path() -> Path:
    return Path(__file__).resolve().parent.parent / "assets"


def get_premiums_path() -> str:
    return str(get_assets_path() / PREMIUMS_FILE)


def read_json_asset(path: str | Path) -> Any:
    """Načíta JSON súbor; relatívne meno hľadá v `assets/`."""
    p = Path(path)
    if not p.is_absolute():
        p = get_assets_path() / p
    return json.loads(p.read_text(encoding="utf-8"))
