import logging

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    ANTHROPIC_API_KEY: str = ""
    ANTHROPIC_MODEL: str = "claude-sonnet-4-5"
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/app.db"
    ENVIRONMENT: str = "development"

    # Durable local mirror of the vault (one JSON file of string keys)
    LOCAL_STORAGE_PATH: str = "./data/local_storage.json"
    VAULT_CACHE_CAP: int = 100

    CONNECTIVITY_PROBE_HOST: str = "api.anthropic.com"
    CONNECTIVITY_PROBE_PORT: int = 443
    CONNECTIVITY_PROBE_TIMEOUT: float = 3.0

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

if not settings.ANTHROPIC_API_KEY:
    logger.warning(
        "ANTHROPIC_API_KEY is not set. Synthesis will fail and lookups will degrade to the local vault."
    )
