from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="")

    SERVICE_NAME: str = "status-responder"
    LOG_LEVEL: str = "INFO"

    # Responder endpoint, consumed by StatusConsumer.from_settings
    RESPONDER_BASE_URL: str = "http://localhost:8081"
    RESPONDER_PATH: str = "/provider.json"
    REQUEST_TIMEOUT_SECONDS: float = 5.0


def get_settings() -> Settings:
    return Settings()
