"""Package configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "info"

    # Opt-in parse cache and default failure mode for entry points
    use_cache: bool = False
    tolerant: bool = False
    # 0 = unbounded
    cache_max_entries: int = 0

    model_config = SettingsConfigDict(env_prefix="PATHGEOM_", env_file=".env", env_file_encoding="utf-8")


settings = Settings()
