from models.profile import Profile
from models.vault import VaultEntry

__all__ = ["Profile", "VaultEntry"]
