from datetime import datetime
from pydantic import BaseModel, Field, field_validator


class DictionaryEntry(BaseModel):
    id: int | None = None
    oshikwanyama_word: str
    english_word: str
    category: str = ""  # omaludi oitja: categories / plural forms
    word_type: str = ""
    usage_example_oshikwanyama: str = ""
    usage_example_english: str = ""
    is_verified: bool = False
    created_at: datetime | None = None
    detected_dialect: str | None = None
    dialect_correction_note: str | None = None

    model_config = {"from_attributes": True}

    @field_validator("oshikwanyama_word", "english_word")
    @classmethod
    def strip_word(cls, value: str) -> str:
        return value.strip()


class EntryUpdate(BaseModel):
    oshikwanyama_word: str | None = None
    english_word: str | None = None
    category: str | None = None
    word_type: str | None = None
    usage_example_oshikwanyama: str | None = None
    usage_example_english: str | None = None
    is_verified: bool | None = None
    detected_dialect: str | None = None
    dialect_correction_note: str | None = None


class VaultRead(BaseModel):
    entries: list[DictionaryEntry] = Field(default_factory=list)
    count: int = 0
