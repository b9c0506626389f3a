"""Translation endpoint: runs the vault -> ai -> fallback cascade."""
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from schemas.translation import TranslationRead, TranslationRequest
from services.identity import Identity, lookup_identity
from services.resolver import EmptyInput
from services.runtime import Runtime, get_runtime

router = APIRouter(prefix="/api/translate", tags=["translate"])


@router.post("", response_model=TranslationRead)
async def translate(
    data: TranslationRequest,
    user_id: str | None = Query(default=None),
    runtime: Runtime = Depends(get_runtime),
    db: AsyncSession = Depends(get_db),
):
    # Snapshot once; connectivity may flip while synthesis is in flight.
    active = runtime.link_active()
    # The profile only gates the remote write after synthesis, so offline lookups skip it.
    identity = await lookup_identity(user_id, db) if active else Identity(user_id=user_id)
    resolution = await runtime.resolver.resolve(
        data.text,
        data.source_lang,
        link_active=active,
        identity=identity,
        force_offline=runtime.link_settings.force_offline,
    )

    if not resolution.ok:
        failure = resolution.failure
        status_code = 400 if isinstance(failure, EmptyInput) else 404
        raise HTTPException(
            status_code=status_code,
            detail={"kind": failure.kind, "message": failure.message},
        )

    return TranslationRead(
        entry=resolution.entry,
        source=resolution.source,
        status=resolution.status,
        link_active=active,
    )
