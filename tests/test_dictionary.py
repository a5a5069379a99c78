from __future__ import annotations

import json
import random

import pytest

from kvizovka.core.dictionary import Dictionary, WordList, normalize_word
from kvizovka.core.types import WordCategory


def test_normalize_keeps_diacritics() -> None:
    assert normalize_word(" kuća ") == "KUĆA"
    # rozložené C + kombinujúci akút -> jedno Ć
    assert normalize_word("kuc\u0301a") == "KUĆA"


def test_wordlist_is_a_dictionary(dictionary) -> None:
    assert isinstance(dictionary, Dictionary)
    assert dictionary.exists("kuća")
    assert "MAMA" in dictionary
    assert 42 not in dictionary
    assert not dictionary.exists("KUCA")
    assert dictionary.category_of("raditi") is WordCategory.VERB
    assert dictionary.category_of("nema") is None


def test_load_text_file(tmp_path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("# komentár\nkuća\n\nMAMA\n", encoding="utf-8")
    wl = WordList.from_path(path)
    assert len(wl) == 2
    assert wl.exists("KUĆA")


def test_load_json_file(tmp_path) -> None:
    path = tmp_path / "words.json"
    payload = {
        "words": [
            {"word": "kuća", "category": "noun"},
            "tata",
            {"category": "VERB"},
            {"word": "pisati", "category": "VERB"},
        ]
    }
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    wl = WordList.from_path(path)
    assert len(wl) == 3
    assert wl.category_of("KUĆA") is WordCategory.NOUN
    assert wl.category_of("TATA") is None
    assert wl.words_by_category(WordCategory.VERB) == ["PISATI"]


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        WordList.from_path(tmp_path / "none.txt")


def test_search_patterns(dictionary) -> None:
    assert sorted(dictionary.search("KUĆ?")) == ["KUĆA", "KUĆE"]
    assert sorted(dictionary.search("*TI")) == ["PISATI", "RADITI"]
    assert dictionary.search("ZZZ*") == []


def test_category_counts(dictionary) -> None:
    counts = dictionary.category_counts()
    assert counts[WordCategory.VERB] == 2
    assert counts[WordCategory.NUMBER] == 1
    assert sum(counts.values()) == len(dictionary)


def test_random_word(dictionary) -> None:
    rng = random.Random(1)
    assert dictionary.random_word(WordCategory.PRONOUN, rng) == "ONAJ"
    assert dictionary.random_word(rng=rng) in dictionary
    assert WordList().random_word() == ""
