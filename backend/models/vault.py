from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from database import Base


class VaultEntry(Base):
    __tablename__ = "knowledge_vault"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    oshikwanyama_word: Mapped[str] = mapped_column(String, nullable=False)
    english_word: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    category: Mapped[str] = mapped_column(String, default="")
    word_type: Mapped[str] = mapped_column(String, default="")
    usage_example_oshikwanyama: Mapped[str] = mapped_column(Text, default="")
    usage_example_english: Mapped[str] = mapped_column(Text, default="")
    is_verified: Mapped[bool] = mapped_column(Boolean, default=False)
    detected_dialect: Mapped[str | None] = mapped_column(String, nullable=True)
    dialect_correction_note: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(timezone.utc)
    )
