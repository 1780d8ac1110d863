from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    """Application settings"""
    # Storage
    database_url: str = "sqlite+aiosqlite:///./skincycle.db"
    database_echo: bool = False

    # Behaviour
    log_level: str = "INFO"
    default_dark_theme: bool = True
    routine_time_format: str = "%H:%M"

    class Config:
        env_file = '.env'


@lru_cache
def get_settings() -> Settings:
    return Settings()
