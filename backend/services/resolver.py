"""
Resolution cascade for a single translation request.

Tiers, in strict order (the first tier that answers wins):
1. vault    - exact, case-insensitive match in the local EntryStore. No network.
2. ai       - synthesis via Claude, only while the link is active. A new entry is
              written through to the local cache and, for signed-in users,
              upserted to the remote vault in the background.
3. fallback - substring match in either direction against the local cache.

resolve() never raises: every outcome is a Resolution carrying either an entry
or a TranslationFailure.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Awaitable, Callable

from languages import Language
from schemas.entry import DictionaryEntry
from services.entry_store import EntryStore
from services.identity import Identity

logger = logging.getLogger(__name__)

LINK_INTERRUPTED = "Cognitive link interrupted. Using fallback..."

Synthesizer = Callable[[str, Language], Awaitable[DictionaryEntry | None]]


class TranslationFailure(Exception):
    kind = "translation_failure"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyInput(TranslationFailure):
    kind = "empty_input"


class NoMatch(TranslationFailure):
    """Every tier was tried and nothing answered."""

    kind = "no_match"


class NoNetworkLink(NoMatch):
    kind = "no_network_link"


class SynthesisFailed(NoMatch):
    kind = "synthesis_failed"


@dataclass
class Resolution:
    entry: DictionaryEntry | None = None
    source: str | None = None  # "vault" | "ai" | "fallback"
    failure: TranslationFailure | None = None
    status: str | None = None

    @property
    def ok(self) -> bool:
        return self.entry is not None


class Resolver:
    def __init__(self, store: EntryStore, synthesize: Synthesizer, remote=None):
        self.store = store
        self.synthesize = synthesize
        self.remote = remote
        self._pending: set[asyncio.Task] = set()

    async def resolve(
        self,
        text: str,
        source_lang: Language,
        link_active: bool,
        identity: Identity,
        force_offline: bool = False,
    ) -> Resolution:
        normalized = (text or "").strip().lower()
        if not normalized:
            return Resolution(failure=EmptyInput("Nothing to translate."), status="Nothing to translate.")

        cached = self.store.find_exact(normalized, source_lang)
        if cached is not None:
            return Resolution(entry=cached.model_copy(), source="vault")

        status = None
        attempted = False
        if link_active:
            attempted = True
            learned = await self._synthesize(normalized, source_lang)
            if learned is not None:
                self._learn(learned, identity)
                return Resolution(entry=learned, source="ai")
            status = LINK_INTERRUPTED

        fuzzy = self.store.find_fuzzy(normalized, source_lang)
        if fuzzy is not None:
            return Resolution(entry=fuzzy.model_copy(), source="fallback", status=status)

        if attempted:
            failure = SynthesisFailed("Cognitive link interrupted: unable to synthesize and no local record found.")
        elif force_offline:
            failure = NoNetworkLink("Vault isolated: no local record found.")
        else:
            failure = NoNetworkLink("Disconnected: unable to synthesize signal.")
        return Resolution(failure=failure, status=failure.message)

    async def _synthesize(self, text: str, source_lang: Language) -> DictionaryEntry | None:
        try:
            return await self.synthesize(text, source_lang)
        except Exception as e:
            logger.error("Synthesis raised for %r: %s", text, e)
            return None

    def _learn(self, learned: DictionaryEntry, identity: Identity) -> None:
        learned.is_verified = False
        learned.created_at = datetime.now(timezone.utc)
        try:
            self.store.prepend(learned)
        except OSError as e:
            logger.error("Could not persist %r to the local vault: %s", learned.english_word, e)

        if identity.is_guest or self.remote is None:
            return
        task = asyncio.create_task(self._upsert_remote(learned.model_copy()))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _upsert_remote(self, entry: DictionaryEntry) -> None:
        try:
            await self.remote.upsert(entry)
        except Exception as e:
            logger.warning("Remote vault upsert failed for %r: %s", entry.english_word, e)

    async def drain(self) -> None:
        """Wait for background remote upserts still in flight."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
