"""EntryStore: bounded local mirror of the knowledge vault.

The snapshot is a JSON array of entries, newest first, kept under a single
storage key. Reads are synchronous so exact-match lookups never wait on I/O
beyond the in-memory snapshot.
"""
from __future__ import annotations

import json
import logging
from typing import Iterable

from pydantic import TypeAdapter, ValidationError

from languages import CANONICAL_FIELD, Language, word_for
from schemas.entry import DictionaryEntry
from services.local_storage import LocalStorage

logger = logging.getLogger(__name__)

VAULT_CACHE_KEY = "omtoloki_vault"
DEFAULT_CAP = 100

_entries_adapter = TypeAdapter(list[DictionaryEntry])


class EntryStore:
    def __init__(self, storage: LocalStorage, cap: int = DEFAULT_CAP):
        self.storage = storage
        self.cap = cap
        self._entries: list[DictionaryEntry] = self._read_snapshot()

    def _read_snapshot(self) -> list[DictionaryEntry]:
        raw = self.storage.get_item(VAULT_CACHE_KEY)
        if not raw:
            return []
        try:
            return _entries_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding unreadable vault cache: %s", e)
            return []

    def _persist(self) -> None:
        payload = [entry.model_dump(mode="json") for entry in self._entries]
        self.storage.set_item(VAULT_CACHE_KEY, json.dumps(payload, ensure_ascii=False))

    def load_all(self) -> list[DictionaryEntry]:
        return list(self._entries)

    def replace_all(self, entries: Iterable[DictionaryEntry]) -> None:
        self._entries = list(entries)
        self._persist()

    def prepend(self, entry: DictionaryEntry, cap: int | None = None) -> list[DictionaryEntry]:
        """Insert entry at the front, drop any older copy of the same word and truncate."""
        limit = self.cap if cap is None else cap
        key = getattr(entry, CANONICAL_FIELD).lower()
        rest = [e for e in self._entries if getattr(e, CANONICAL_FIELD).lower() != key]
        self._entries = [entry, *rest][:limit]
        self._persist()
        return self.load_all()

    def find_exact(self, text: str, lang: Language) -> DictionaryEntry | None:
        needle = text.strip().lower()
        for entry in self._entries:
            if word_for(lang, entry).lower() == needle:
                return entry
        return None

    def find_fuzzy(self, text: str, lang: Language) -> DictionaryEntry | None:
        """First entry whose word contains the text or is contained in it."""
        needle = text.strip().lower()
        if not needle:
            return None
        for entry in self._entries:
            word = word_for(lang, entry).lower()
            if not word:
                continue
            if needle in word or word in needle:
                return entry
        return None

    def __len__(self) -> int:
        return len(self._entries)
