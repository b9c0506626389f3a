from schemas.entry import DictionaryEntry, EntryUpdate, VaultRead
from schemas.translation import TranslationRequest, TranslationRead
from schemas.link import LinkRead, LinkUpdate, SyncRead
from schemas.profile import ProfileRead, ProfileList, GuestSession

__all__ = [
    "DictionaryEntry", "EntryUpdate", "VaultRead",
    "TranslationRequest", "TranslationRead",
    "LinkRead", "LinkUpdate", "SyncRead",
    "ProfileRead", "ProfileList", "GuestSession",
]
