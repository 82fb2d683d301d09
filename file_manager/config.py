from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    app_name: str = 'File Manager API'
    host: str = '0.0.0.0'
    port: int = 8080
    base_path: str = Field(
        default='/data',
        validation_alias=AliasChoices('FILE_MANAGER_BASE_PATH', 'base_path'),
    )
    log_level: str = 'info'
    max_open_bytes: int = Field(default=10 * 1024 * 1024, ge=1)
    raw_chunk_size: int = Field(default=64 * 1024, ge=1024)
    raw_cache_max_age: int = Field(default=3600, ge=0)
    resolve_symlinks: bool = True
    shutdown_timeout_sec: int = Field(default=10, ge=1, le=300)


settings = Settings()
