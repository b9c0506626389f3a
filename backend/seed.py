"""Load vault entries from a JSON file into the remote vault.

By default this is additive: entries are upserted on the English word.
Use --reset to clear the table first.
"""
import argparse
import asyncio
import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError
from sqlalchemy import delete

from database import init_db, async_session
from models.vault import VaultEntry
from schemas.entry import DictionaryEntry
from services.remote_vault import RemoteVault

_entries_adapter = TypeAdapter(list[DictionaryEntry])


def load_entries(path: Path) -> list[DictionaryEntry]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("entries", [])
    return _entries_adapter.validate_python(data)


async def seed(path: Path | None = None, *, reset: bool = False, db_factory=async_session) -> int:
    await init_db(bind=db_factory.kw.get("bind"))
    if reset:
        async with db_factory() as session:
            result = await session.execute(delete(VaultEntry))
            await session.commit()
            print(f"Removed vault entries: {result.rowcount}")

    if path is None:
        return 0

    remote = RemoteVault(db_factory)
    entries = load_entries(path)
    for entry in entries:
        await remote.upsert(entry)
    print(f"Imported vault entries: {len(entries)}")
    return len(entries)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Import entries into the knowledge vault.")
    parser.add_argument("path", nargs="?", type=Path, help="JSON file: a list of entries or {\"entries\": [...]}.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete all vault entries before importing. Destructive.",
    )
    args = parser.parse_args()
    try:
        asyncio.run(seed(args.path, reset=args.reset))
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        parser.exit(1, f"Import failed: {exc}\n")
