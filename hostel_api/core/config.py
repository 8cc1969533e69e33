# hostel_api/core/config.py
"""Application configuration using Pydantic."""
from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = 'sqlite+aiosqlite:///./hostel.db'
    database_ssl: bool = False
    sql_echo: bool = False

    upload_dir: str = 'uploads'
    serve_uploads: bool = True
    max_upload_bytes: int = 2 * 1024 * 1024  # 2MB, same as the JSON body limit

    app_version: str = '1.0.0'
    environment: str = 'development'
    log_level: str = 'info'
    allowed_origins: List[str] = ['*']

    model_config = {
        'env_file': '.env',
        'extra': 'ignore'
    }

    @field_validator('database_url')
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        # Hosted Postgres providers hand out plain postgres:// URLs
        if v.startswith('postgres://'):
            return 'postgresql+asyncpg://' + v[len('postgres://'):]
        if v.startswith('postgresql://'):
            return 'postgresql+asyncpg://' + v[len('postgresql://'):]
        return v

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith('sqlite')


@lru_cache
def get_settings() -> Settings:
    return Settings()
