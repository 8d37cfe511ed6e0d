from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding='utf-8',
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Cinema Tickets'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Logs args/return of @Logger.io functions when True

    # Log context
    SERVICE_NAME: str = 'cinema-tickets'
    DEPLOY_ENV: str = 'local_dev'
    LOG_TO_FILE: bool = False

    # Display only, amounts stay currency-agnostic integers
    CURRENCY_SYMBOL: str = '£'

    @field_validator('CURRENCY_SYMBOL', mode='before')
    @classmethod
    def strip_currency_symbol(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip() or '£'
        return v


settings = Settings()  # type: ignore
