"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    ENVIRONMENT: str = "development"  # "development" | "production"
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Production bundle of the form UI, served with an SPA fallback
    STATIC_DIR: str = "../frontend/dist"

    # Form client
    API_URL: str = "http://localhost:3000"
    CLIENT_TIMEOUT_SECONDS: float = 10.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
