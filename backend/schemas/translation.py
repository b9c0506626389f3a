from pydantic import BaseModel

from languages import Language
from schemas.entry import DictionaryEntry


class TranslationRequest(BaseModel):
    text: str
    source_lang: Language = Language.ENGLISH


class TranslationRead(BaseModel):
    entry: DictionaryEntry
    source: str  # "vault" | "ai" | "fallback"
    status: str | None = None
    link_active: bool
