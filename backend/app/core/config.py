from typing import Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./cms.db"
    SQL_DEBUG: bool = False
    SITE_URL: str = "http://localhost:8000"

    JWT_SECRET_KEY: Optional[str] = None  # must come from the environment
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15

    # Slug generation
    SLUG_MIN_LENGTH: int = 2
    SLUG_MAX_LENGTH: int = 100
    SLUG_MAX_PROBE_ATTEMPTS: int = 1000
    SLUG_CONFLICT_RETRIES: int = 2
    SLUG_FALLBACK_PREFIX: str = "page"
    SLUG_FALLBACK_LENGTH: int = 8
    BATCH_CHUNK_SIZE: int = 100

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }

settings = Settings()
