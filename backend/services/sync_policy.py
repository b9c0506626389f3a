"""SyncPolicy: when to refresh the local vault cache from the remote vault.

Refresh runs only when the runtime is online and the force-offline override is
off. The local snapshot is always available first; a failed remote read keeps
it untouched and is reported as a warning, never as an error.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from schemas.entry import DictionaryEntry
from services.entry_store import EntryStore

logger = logging.getLogger(__name__)


class SyncState(str, Enum):
    DISCONNECTED = "disconnected"
    RECONNECTING = "reconnecting"
    SYNCED = "synced"


@dataclass
class SyncReport:
    entries: list[DictionaryEntry] = field(default_factory=list)
    refreshed: bool = False
    state: SyncState = SyncState.DISCONNECTED
    warning: str | None = None


def should_refresh(online: bool, force_offline: bool) -> bool:
    return online and not force_offline


class SyncPolicy:
    def __init__(self, store: EntryStore, remote):
        self.store = store
        self.remote = remote
        self.state = SyncState.DISCONNECTED

    def effective_state(self, force_offline: bool) -> SyncState:
        if force_offline:
            return SyncState.DISCONNECTED
        return self.state

    async def refresh(self, online: bool, force_offline: bool) -> SyncReport:
        local = self.store.load_all()
        if not should_refresh(online, force_offline):
            self.state = SyncState.DISCONNECTED
            return SyncReport(entries=local, state=self.effective_state(force_offline))

        self.state = SyncState.RECONNECTING
        try:
            remote_entries = await self.remote.select_all()
        except Exception as e:
            logger.warning("Cloud sync failed, using local cache: %s", e)
            self.state = SyncState.DISCONNECTED
            return SyncReport(
                entries=local,
                state=self.state,
                warning="Cloud sync failed, using localized cache.",
            )

        self.store.replace_all(remote_entries)
        self.state = SyncState.SYNCED
        logger.info("Vault cache refreshed with %d entries", len(remote_entries))
        return SyncReport(entries=self.store.load_all(), refreshed=True, state=self.state)

    async def on_connectivity_change(self, online: bool, force_offline: bool) -> SyncReport:
        if not online:
            self.state = SyncState.DISCONNECTED
            return SyncReport(entries=self.store.load_all(), state=self.state)
        return await self.refresh(online, force_offline)
