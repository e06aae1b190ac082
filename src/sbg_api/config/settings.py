from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any

from pydantic import BeforeValidator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _parse_base_url(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError('base_url must be a string')
    return value.strip().rstrip('/')


def _parse_version(value: Any) -> str:
    if isinstance(value, (int, float)):
        value = str(value)
    if not isinstance(value, str):
        raise TypeError('api_version must be a string')
    return value.strip().strip('/')


BaseURL = Annotated[str, BeforeValidator(_parse_base_url)]
ApiVersion = Annotated[str, BeforeValidator(_parse_version)]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_prefix='SBG_',
        extra='ignore',
    )

    auth_token: str | None = None
    base_url: BaseURL = 'https://api.sbgenomics.com'
    api_version: ApiVersion = '1.1'
    timeout: float = 30.0
    log_level: str = 'INFO'


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
