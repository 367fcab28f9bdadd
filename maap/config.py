from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    maap_token: str = ""
    maap_api_url: str = ""
    maap_bot_id: str = ""
    maap_request_timeout: float | None = None

    webhook_path: str = "/"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
