"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEMO_API_KEY = "demo-key"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # JSONBin document store
    JSONBIN_API_URL: str = "https://api.jsonbin.io/v3/b"
    JSONBIN_BIN_ID: str = "675a1b2e1f5677401f2a3c4d"
    JSONBIN_API_KEY: str | None = None
    STORE_TIMEOUT: float = 5.0  # seconds

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    @property
    def demo_mode(self) -> bool:
        """Demo mode is on when no real store credential is configured."""
        return not self.JSONBIN_API_KEY or self.JSONBIN_API_KEY == DEMO_API_KEY


settings = Settings()

JSONBIN_CONFIG = {
    "api_url": settings.JSONBIN_API_URL,
    "bin_id": settings.JSONBIN_BIN_ID,
    "api_key": settings.JSONBIN_API_KEY or DEMO_API_KEY,
    "timeout": settings.STORE_TIMEOUT,
}

DEMO_MODE = settings.demo_mode
LOG_LEVEL = settings.LOG_LEVEL
CORS_ORIGINS = settings.CORS_ORIGINS
