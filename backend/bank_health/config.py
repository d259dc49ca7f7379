from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Most recent statement periods kept per metric history
    history_periods: int = 10

    # Snapshots with fewer scored metrics available are rejected by the API
    min_available_metrics: int = 1

    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    model_config = {"env_file": ".env", "env_prefix": "BANK_HEALTH_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
