"""Konfigurácia Kvízovky z premenných prostredia (.env).

Premenné:
- KVIZOVKA_SEED: celé číslo pre reprodukovateľné miešanie tašky.
- KVIZOVKA_LOG_PATH / KVIZOVKA_LOG_LEVEL: súbor a úroveň logovania.
- KVIZOVKA_DICTIONARY: cesta k slovníku pre CLI.
- KVIZOVKA_STRICT_DICTIONARY: '0' -> ťahy s neznámym slovom sa prijmú
  a dajú sa neskôr napadnúť (challenge).
"""
from __future__ import annotations

import logging
import os
from contextlib import suppress

from dotenv import load_dotenv

# Načítaj .env veľmi skoro, ale nenahrádzaj už existujúce OS premenné
if os.getenv("PYTEST_CURRENT_TEST") is None:
    with suppress(OSError):
        load_dotenv(override=False)

_TRUE = {"1", "true", "yes", "on", "y", "t"}
_FALSE = {"0", "false", "no", "off", "n", "f"}


def _parse_bool(val: str | None) -> bool | None:
    """Bezpečné parsovanie boolean reťazcov; None ak neznáme."""
    if val is None:
        return None
    v = val.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


def bag_seed() -> int | None:
    raw = os.getenv("KVIZOVKA_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logging.getLogger("kvizovka.config").warning("invalid_seed value=%s", raw)
        return None


def log_level() -> int:
    name = os.getenv("KVIZOVKA_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def dictionary_path() -> str | None:
    return os.getenv("KVIZOVKA_DICTIONARY") or None


def strict_dictionary() -> bool:
    """Predvolene sa slovník kontroluje už pri ťahu."""
    return _parse_bool(os.getenv("KVIZOVKA_STRICT_DICTIONARY")) is not False
