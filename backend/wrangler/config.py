"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Host credentials come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Plugin settings here only seed the ConfigurationStore; requests read the store

Design Decisions:
    - move_thread_max_count kept as a string: the host stores it as free text and
      validity is judged per request by PluginConfiguration.is_valid()
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Host REST API
    host_url: str = "http://localhost:8065"
    host_token: str = ""
    host_timeout_seconds: float = 30.0

    @field_validator("host_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # Bundle
    bundle_path: str = "."

    # Initial plugin configuration
    enable_web_ui: bool = False
    allowed_email_domain: str = ""
    move_thread_max_count: str = "100"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
