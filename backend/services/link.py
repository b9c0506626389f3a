"""Link state: physical connectivity plus the manual force-offline override.

The override is loaded from local storage once at startup and then passed
around explicitly; requests snapshot ``link_active`` a single time.
"""
from __future__ import annotations

import asyncio
import logging

from services.local_storage import LocalStorage

logger = logging.getLogger(__name__)

FORCE_OFFLINE_KEY = "omtoloki_force_offline"


class LinkSettings:
    def __init__(self, storage: LocalStorage, force_offline: bool = False):
        self.storage = storage
        self.force_offline = force_offline

    @classmethod
    def load(cls, storage: LocalStorage) -> LinkSettings:
        return cls(storage, force_offline=storage.get_item(FORCE_OFFLINE_KEY) == "true")

    def set_force_offline(self, value: bool) -> None:
        self.force_offline = value
        self.storage.set_item(FORCE_OFFLINE_KEY, "true" if value else "false")


class Connectivity:
    def __init__(self, host: str, port: int, timeout: float = 3.0, online: bool = True):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.online = online

    def set_online(self, value: bool) -> bool:
        """Record a transition; returns True when the state actually changed."""
        changed = value != self.online
        self.online = value
        return changed

    async def probe(self) -> bool:
        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(self.host, self.port), timeout=self.timeout
            )
        except (OSError, asyncio.TimeoutError) as e:
            logger.warning("Connectivity probe to %s:%d failed: %s", self.host, self.port, e)
            self.online = False
            return False
        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            pass
        self.online = True
        return True


def link_active(connectivity: Connectivity, link_settings: LinkSettings) -> bool:
    return connectivity.online and not link_settings.force_offline
