from __future__ import annotations

import os
import tempfile

import pytest

# Point the module-level engine somewhere disposable before config is imported.
os.environ.setdefault("ANTHROPIC_API_KEY", "")
os.environ.setdefault(
    "DATABASE_URL", f"sqlite+aiosqlite:///{tempfile.mkdtemp(prefix='omtoloki-')}/test.db"
)

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from database import init_db  # noqa: E402
from languages import Language  # noqa: E402
from schemas.entry import DictionaryEntry  # noqa: E402
from services.entry_store import EntryStore  # noqa: E402
from services.local_storage import LocalStorage  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def storage(tmp_path) -> LocalStorage:
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture
def store(storage) -> EntryStore:
    return EntryStore(storage)


@pytest.fixture
async def db_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'vault.db'}")
    await init_db(bind=engine)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


def make_entry(english: str, oshikwanyama: str, **kwargs) -> DictionaryEntry:
    return DictionaryEntry(english_word=english, oshikwanyama_word=oshikwanyama, **kwargs)


class StubSynthesizer:
    """Returns a fresh copy of ``record`` (or None) and records every call."""

    def __init__(self, record: DictionaryEntry | None = None, error: Exception | None = None):
        self.record = record
        self.error = error
        self.calls: list[tuple[str, Language]] = []

    async def __call__(self, text: str, source_lang: Language) -> DictionaryEntry | None:
        self.calls.append((text, source_lang))
        if self.error is not None:
            raise self.error
        return self.record.model_copy() if self.record is not None else None


class StubRemote:
    def __init__(self, entries: list[DictionaryEntry] | None = None, fail: bool = False):
        self.entries = list(entries or [])
        self.fail = fail
        self.upserts: list[DictionaryEntry] = []
        self.select_calls = 0

    async def select_all(self) -> list[DictionaryEntry]:
        self.select_calls += 1
        if self.fail:
            raise OSError("vault unreachable")
        return list(self.entries)

    async def upsert(self, entry: DictionaryEntry, conflict_key: str = "english_word") -> DictionaryEntry:
        self.upserts.append(entry)
        if self.fail:
            raise OSError("vault unreachable")
        return entry
