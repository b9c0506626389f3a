"""Local vault snapshot and cloud sync."""
from fastapi import APIRouter, Depends

from schemas.entry import VaultRead
from schemas.link import SyncRead
from services.runtime import Runtime, get_runtime

router = APIRouter(prefix="/api/vault", tags=["vault"])


@router.get("", response_model=VaultRead)
async def get_vault(runtime: Runtime = Depends(get_runtime)):
    entries = runtime.store.load_all()
    return VaultRead(entries=entries, count=len(entries))


@router.post("/sync", response_model=SyncRead)
async def sync_vault(runtime: Runtime = Depends(get_runtime)):
    report = await runtime.sync.refresh(
        runtime.connectivity.online, runtime.link_settings.force_offline
    )
    return SyncRead(
        refreshed=report.refreshed,
        state=report.state.value,
        warning=report.warning,
        count=len(report.entries),
        entries=report.entries,
    )
