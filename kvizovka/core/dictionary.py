"""Slovník ako vstrekovaná schopnosť (`exists` / `category_of`).

Jadro slovník nevlastní; `MoveValidator` a `WordValidator` dostanú ľubovoľný
objekt so správnymi metódami. `WordList` je jednoduchá implementácia v pamäti:

- textový súbor: jedno slovo na riadok, `#` na začiatku = komentár,
- JSON: `{"words": [{"word": "KUĆA", "category": "NOUN"}, ...]}`.

Porovnávanie je bez ohľadu na veľkosť písmen, diakritika sa zachováva.
"""
from __future__ import annotations

import json
import logging
import random
import re
import unicodedata as ud
from pathlib import Path
from typing import Iterable, Mapping, Protocol, runtime_checkable

from .types import WordCategory

log = logging.getLogger("kvizovka.dictionary")


@runtime_checkable
class Dictionary(Protocol):
    """Minimálne rozhranie slovníka, ktoré jadro potrebuje."""

    def exists(self, word: str) -> bool: ...

    def category_of(self, word: str) -> WordCategory | None: ...


def normalize_word(word: str) -> str:
    """NFC + veľké písmená (Ć ostáva Ć, nie C)."""
    return ud.normalize("NFC", word.strip()).upper()


class WordList:
    """Slovník v pamäti s rýchlym vyhľadávaním cez `dict`."""

    def __init__(
        self,
        words: Iterable[str] | Mapping[str, WordCategory | None] = (),
    ) -> None:
        self._words: dict[str, WordCategory | None] = {}
        if isinstance(words, Mapping):
            for word, category in words.items():
                self.add(word, category)
        else:
            for word in words:
                self.add(word)

    def add(self, word: str, category: WordCategory | str | None = None) -> None:
        w = normalize_word(word)
        if not w:
            return
        if isinstance(category, str) and not isinstance(category, WordCategory):
            category = WordCategory(category.upper())
        self._words[w] = category

    @classmethod
    def from_path(cls, path: str | Path) -> WordList:
        """Načíta slovník zo súboru (.json alebo text)."""
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Slovník '{p}' neexistuje")
        wl = cls()
        if p.suffix.lower() == ".json":
            data = json.loads(p.read_text(encoding="utf-8"))
            for idx, raw in enumerate(data.get("words", [])):
                if isinstance(raw, str):
                    wl.add(raw)
                    continue
                try:
                    wl.add(str(raw["word"]), raw.get("category"))
                except (KeyError, ValueError, TypeError):
                    log.warning("dictionary_skip_entry path=%s index=%s", p, idx)
        else:
            with p.open(encoding="utf-8") as f:
                for line in f:
                    if line.startswith("#"):
                        continue
                    wl.add(line)
        log.info("dictionary_loaded path=%s words=%s", p, len(wl))
        return wl

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.exists(word)

    def exists(self, word: str) -> bool:
        return normalize_word(word) in self._words

    def category_of(self, word: str) -> WordCategory | None:
        return self._words.get(normalize_word(word))

    def words_by_category(self, category: WordCategory) -> list[str]:
        return [w for w, cat in self._words.items() if cat == category]

    def category_counts(self) -> dict[WordCategory, int]:
        counts = {category: 0 for category in WordCategory}
        for cat in self._words.values():
            if cat is not None:
                counts[cat] += 1
        return counts

    def search(self, pattern: str) -> list[str]:
        """Vyhľadá slová podľa vzoru: `?` = jedno písmeno, `*` = ľubovoľne veľa."""
        parts = []
        for ch in normalize_word(pattern):
            if ch == "?":
                parts.append(".")
            elif ch == "*":
                parts.append(".*")
            else:
                parts.append(re.escape(ch))
        regex = re.compile("".join(parts))
        return [w for w in self._words if regex.fullmatch(w)]

    def random_word(self, category: WordCategory | None = None, rng: random.Random | None = None) -> str:
        pool = self.words_by_category(category) if category else list(self._words)
        if not pool:
            return ""
        return (rng or random).choice(pool)
