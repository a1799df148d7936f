"""Application configuration using Pydantic Settings."""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    APP_NAME: str = "Generador de Lotería"
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_FILE: Path = Path("logs/app.log")

    # Historical data
    RESULTS_BASE_URL: str = "https://www.loteriasyapuestas.es/es/resultados"
    HTTP_TIMEOUT_SECONDS: float = 30.0
    CACHE_TTL_SECONDS: int = 6 * 60 * 60

    # Generator
    GENERATOR_MAX_ATTEMPTS: int = 100

    # Scheduler
    SCHEDULER_ENABLED: bool = True


settings = Settings()
