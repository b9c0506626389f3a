from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from models.profile import Profile
from schemas.profile import GuestSession, ProfileRead
from services.identity import new_guest_identity

router = APIRouter(tags=["profiles"])


@router.post("/api/session/guest", response_model=GuestSession)
async def start_guest_session():
    identity = new_guest_identity()
    return GuestSession(
        id=identity.user_id,
        email=identity.email,
        role=identity.role.value,
        full_name="Guest Protocol",
    )


@router.get("/api/profiles/{user_id}", response_model=ProfileRead)
async def get_profile(user_id: str, db: AsyncSession = Depends(get_db)):
    profile = await db.get(Profile, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return ProfileRead.model_validate(profile)
