from pathlib import Path
from typing import List, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.platform.constant.path import DATA_DIR, PREFILL_FILE


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Mini Ticketer'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # Storage collaborator
    CINEMA_STORE: Literal['json', 'memory'] = 'json'
    DATA_FILE: Path = DATA_DIR / 'ticketer.json'
    PREFILL_FILE: Path = PREFILL_FILE

    # Wall-clock zone used for day-of-week and HH:MM reasoning
    TIMEZONE: str = 'UTC'

    # Booking rules
    BOOKING_HORIZON_DAYS: int = 14
    PAGE_SIZE: int = 6

    # Consistency validation
    OVERLAP_CHECK_MODE: Literal['literal', 'interval'] = 'literal'
    DELETE_CORRUPTED_ROWS: bool = False  # Also delete invalid rows from the store (destructive)

    @field_validator('BOOKING_HORIZON_DAYS', 'PAGE_SIZE')
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('must be greater than 0')
        return v


settings = Settings()  # type: ignore
