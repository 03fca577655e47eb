"""
Application settings
Load from environment variables (prefix SUPERCALC_)
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment"""

    LOG_LEVEL: str = "INFO"

    # origins allowed to call /api/*
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # horizon used for the scenario illustrations
    DEFAULT_RETIREMENT_AGE: int = 67

    model_config = SettingsConfigDict(
        env_prefix="SUPERCALC_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
