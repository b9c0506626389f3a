"""RemoteVault: the shared knowledge_vault table behind the local cache."""
from __future__ import annotations

import logging

from sqlalchemy import delete, func, select

from languages import CANONICAL_FIELD
from models.vault import VaultEntry
from schemas.entry import DictionaryEntry

logger = logging.getLogger(__name__)

_WRITABLE_FIELDS = (
    "oshikwanyama_word",
    "english_word",
    "category",
    "word_type",
    "usage_example_oshikwanyama",
    "usage_example_english",
    "is_verified",
    "detected_dialect",
    "dialect_correction_note",
)


def _apply(row: VaultEntry, entry: DictionaryEntry) -> None:
    for name in _WRITABLE_FIELDS:
        setattr(row, name, getattr(entry, name))
    if entry.created_at is not None:
        row.created_at = entry.created_at


class RemoteVault:
    def __init__(self, db_factory):
        self.db_factory = db_factory

    async def select_all(self) -> list[DictionaryEntry]:
        async with self.db_factory() as db:
            result = await db.execute(
                select(VaultEntry).order_by(VaultEntry.created_at.desc(), VaultEntry.id.desc())
            )
            return [DictionaryEntry.model_validate(row) for row in result.scalars().all()]

    async def upsert(self, entry: DictionaryEntry, conflict_key: str = CANONICAL_FIELD) -> DictionaryEntry:
        column = getattr(VaultEntry, conflict_key)
        async with self.db_factory() as db:
            result = await db.execute(
                select(VaultEntry)
                .where(func.lower(column) == getattr(entry, conflict_key).lower())
                .order_by(VaultEntry.id)
                .limit(1)
            )
            row = result.scalar_one_or_none()
            if row is None:
                row = VaultEntry()
                db.add(row)
            _apply(row, entry)
            await db.commit()
            await db.refresh(row)
            return DictionaryEntry.model_validate(row)

    async def update(self, entry: DictionaryEntry) -> DictionaryEntry:
        if entry.id is None:
            raise ValueError("Entry has no id")
        async with self.db_factory() as db:
            row = await db.get(VaultEntry, entry.id)
            if row is None:
                raise LookupError(f"Vault entry {entry.id} not found")
            _apply(row, entry)
            await db.commit()
            await db.refresh(row)
            return DictionaryEntry.model_validate(row)

    async def get(self, entry_id: int) -> DictionaryEntry | None:
        async with self.db_factory() as db:
            row = await db.get(VaultEntry, entry_id)
            return DictionaryEntry.model_validate(row) if row else None

    async def delete(self, entry_id: int) -> bool:
        async with self.db_factory() as db:
            result = await db.execute(delete(VaultEntry).where(VaultEntry.id == entry_id))
            await db.commit()
            removed = result.rowcount > 0
        if removed:
            logger.info("Deleted vault entry %s", entry_id)
        return removed
