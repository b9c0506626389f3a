"""Who is asking. Only used to gate writes to the remote vault and admin endpoints."""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models.profile import Profile

logger = logging.getLogger(__name__)

GUEST_PREFIX = "guest_"


class UserRole(str, Enum):
    ADMIN = "admin"
    AUTHORIZED = "authorized"
    GUEST = "guest"


@dataclass
class Identity:
    user_id: str | None = None
    role: UserRole = UserRole.GUEST
    email: str = ""

    @property
    def is_guest(self) -> bool:
        return not self.user_id or self.user_id.startswith(GUEST_PREFIX)

    @property
    def is_admin(self) -> bool:
        return not self.is_guest and self.role == UserRole.ADMIN


def new_guest_identity() -> Identity:
    return Identity(user_id=GUEST_PREFIX + secrets.token_hex(5), email="guest@omtoloki.ai")


async def resolve_identity(user_id: str | None, db: AsyncSession, touch: bool = True) -> Identity:
    """Load the profile for a signed-in user, creating a guest-role profile if missing.

    With touch=False an existing profile is read without updating last_active.
    """
    if not user_id or user_id.startswith(GUEST_PREFIX):
        return Identity(user_id=user_id)

    profile = await db.get(Profile, user_id)
    if profile is None:
        profile = Profile(id=user_id, role=UserRole.GUEST.value)
        db.add(profile)
        await db.commit()
    elif touch:
        profile.last_active = datetime.now(timezone.utc)
        await db.commit()
    return Identity(user_id=profile.id, role=UserRole(profile.role), email=profile.email or "")


async def lookup_identity(user_id: str | None, db: AsyncSession) -> Identity:
    """resolve_identity for the translation path: an unreachable profile store never fails the request."""
    try:
        return await resolve_identity(user_id, db, touch=False)
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Profile lookup for %s failed, continuing without role: %s", user_id, e)
        return Identity(user_id=user_id)
