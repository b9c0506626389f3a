"""Supported languages and the word field each one reads in a vault entry.

A vault entry is bidirectional: the same record answers English -> Oshikwanyama
and Oshikwanyama -> English lookups. Oshidonga input is looked up against the
Oshikwanyama column; the synthesis step flags and corrects it to the canonical
Oshikwanyama form.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schemas.entry import DictionaryEntry


class Language(str, Enum):
    ENGLISH = "english"
    OSHIKWANYAMA = "oshikwanyama"
    OSHIDONGA = "oshidonga"


LANGUAGES = {
    Language.ENGLISH: {
        "name": "English",
        "field": "english_word",
        "speech_locale": "en-US",
    },
    Language.OSHIKWANYAMA: {
        "name": "Oshikwanyama",
        "field": "oshikwanyama_word",
        "speech_locale": "pt-PT",
    },
    Language.OSHIDONGA: {
        "name": "Oshidonga",
        "field": "oshikwanyama_word",
        "speech_locale": "pt-PT",
    },
}

# Upsert conflict key for the remote vault
CANONICAL_FIELD = "english_word"


def get_language(lang: Language | str) -> dict:
    try:
        return LANGUAGES[Language(lang)]
    except ValueError as exc:
        raise LookupError(f"Unsupported language: {lang}") from exc


def field_for(lang: Language | str) -> str:
    return get_language(lang)["field"]


def word_for(lang: Language | str, entry: DictionaryEntry) -> str:
    return getattr(entry, field_for(lang)) or ""


def target_for(lang: Language | str) -> Language:
    if Language(lang) == Language.ENGLISH:
        return Language.OSHIKWANYAMA
    return Language.ENGLISH
