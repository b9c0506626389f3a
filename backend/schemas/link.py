from pydantic import BaseModel, Field

from schemas.entry import DictionaryEntry


class LinkRead(BaseModel):
    online: bool
    force_offline: bool
    link_active: bool
    sync_state: str


class LinkUpdate(BaseModel):
    force_offline: bool | None = None
    online: bool | None = None


class SyncRead(BaseModel):
    refreshed: bool
    state: str
    warning: str | None = None
    count: int
    entries: list[DictionaryEntry] = Field(default_factory=list)
