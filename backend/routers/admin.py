"""Administrative data operations: verify, edit and erase vault records; manage roles."""
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from models.profile import Profile
from schemas.entry import DictionaryEntry, EntryUpdate
from schemas.profile import ProfileList, ProfileRead
from services.identity import Identity, UserRole, resolve_identity
from services.runtime import Runtime, get_runtime

router = APIRouter(prefix="/api/admin", tags=["admin"])


async def require_admin(
    user_id: str | None = Query(default=None),
    db: AsyncSession = Depends(get_db),
) -> Identity:
    identity = await resolve_identity(user_id, db)
    if not identity.is_admin:
        raise HTTPException(status_code=403, detail="Admin role required")
    return identity


@router.put("/vault/{entry_id}", response_model=DictionaryEntry)
async def update_entry(
    entry_id: int,
    data: EntryUpdate,
    _: Identity = Depends(require_admin),
    runtime: Runtime = Depends(get_runtime),
):
    current = await runtime.remote.get(entry_id)
    if current is None:
        raise HTTPException(status_code=404, detail="Vault entry not found")
    changes = data.model_dump(exclude_unset=True)
    try:
        return await runtime.remote.update(current.model_copy(update=changes))
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.delete("/vault/{entry_id}")
async def delete_entry(
    entry_id: int,
    _: Identity = Depends(require_admin),
    runtime: Runtime = Depends(get_runtime),
):
    if not await runtime.remote.delete(entry_id):
        raise HTTPException(status_code=404, detail="Vault entry not found")
    return {"deleted": entry_id}


@router.get("/profiles", response_model=ProfileList)
async def list_profiles(
    _: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(select(Profile).order_by(Profile.email))
    profiles = result.scalars().all()
    return ProfileList(profiles=[ProfileRead.model_validate(p) for p in profiles])


@router.put("/profiles/{profile_id}/role", response_model=ProfileRead)
async def toggle_role(
    profile_id: str,
    admin: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    profile = await db.get(Profile, profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    if profile.id == admin.user_id:
        raise HTTPException(status_code=400, detail="Cannot change your own role")
    if profile.role == UserRole.ADMIN.value:
        raise HTTPException(status_code=400, detail="Admin roles are not toggled here")
    profile.role = (
        UserRole.GUEST.value if profile.role == UserRole.AUTHORIZED.value else UserRole.AUTHORIZED.value
    )
    await db.commit()
    await db.refresh(profile)
    return ProfileRead.model_validate(profile)
