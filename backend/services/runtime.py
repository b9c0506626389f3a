"""Process-wide services, built once in the app lifespan and kept on app.state."""
from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from config import Settings
from services.entry_store import EntryStore
from services.link import Connectivity, LinkSettings, link_active
from services.local_storage import LocalStorage
from services.remote_vault import RemoteVault
from services.resolver import Resolver, Synthesizer
from services.sync_policy import SyncPolicy


@dataclass
class Runtime:
    storage: LocalStorage
    store: EntryStore
    link_settings: LinkSettings
    connectivity: Connectivity
    remote: RemoteVault
    resolver: Resolver
    sync: SyncPolicy

    def link_active(self) -> bool:
        return link_active(self.connectivity, self.link_settings)


def build_runtime(settings: Settings, db_factory, synthesize: Synthesizer, online: bool = True) -> Runtime:
    storage = LocalStorage(settings.LOCAL_STORAGE_PATH)
    store = EntryStore(storage, cap=settings.VAULT_CACHE_CAP)
    remote = RemoteVault(db_factory)
    return Runtime(
        storage=storage,
        store=store,
        link_settings=LinkSettings.load(storage),
        connectivity=Connectivity(
            settings.CONNECTIVITY_PROBE_HOST,
            settings.CONNECTIVITY_PROBE_PORT,
            timeout=settings.CONNECTIVITY_PROBE_TIMEOUT,
            online=online,
        ),
        remote=remote,
        resolver=Resolver(store, synthesize, remote=remote),
        sync=SyncPolicy(store, remote),
    )


def get_runtime(request: Request) -> Runtime:
    return request.app.state.runtime
