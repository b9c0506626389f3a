from datetime import datetime
from pydantic import BaseModel


class ProfileRead(BaseModel):
    id: str
    email: str
    role: str
    full_name: str | None = None
    last_active: datetime | None = None

    model_config = {"from_attributes": True}


class ProfileList(BaseModel):
    profiles: list[ProfileRead]


class GuestSession(BaseModel):
    id: str
    email: str
    role: str
    full_name: str
