"""Link status and the manual force-offline switch."""
from fastapi import APIRouter, Depends

from schemas.link import LinkRead, LinkUpdate
from services.runtime import Runtime, get_runtime

router = APIRouter(prefix="/api/link", tags=["link"])


def _link_read(runtime: Runtime) -> LinkRead:
    force_offline = runtime.link_settings.force_offline
    return LinkRead(
        online=runtime.connectivity.online,
        force_offline=force_offline,
        link_active=runtime.link_active(),
        sync_state=runtime.sync.effective_state(force_offline).value,
    )


@router.get("", response_model=LinkRead)
async def get_link(runtime: Runtime = Depends(get_runtime)):
    return _link_read(runtime)


@router.post("/probe", response_model=LinkRead)
async def probe_link(runtime: Runtime = Depends(get_runtime)):
    was_online = runtime.connectivity.online
    online = await runtime.connectivity.probe()
    if online != was_online:
        await runtime.sync.on_connectivity_change(online, runtime.link_settings.force_offline)
    return _link_read(runtime)


@router.put("", response_model=LinkRead)
async def update_link(data: LinkUpdate, runtime: Runtime = Depends(get_runtime)):
    resync = False
    if data.force_offline is not None and data.force_offline != runtime.link_settings.force_offline:
        runtime.link_settings.set_force_offline(data.force_offline)
        resync = not data.force_offline
    if data.online is not None and runtime.connectivity.set_online(data.online):
        resync = True

    if resync:
        await runtime.sync.on_connectivity_change(
            runtime.connectivity.online, runtime.link_settings.force_offline
        )
    return _link_read(runtime)
