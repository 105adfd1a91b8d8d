"""Settings for the cube solver API and UI, read from the environment or .env."""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Rubik's Cube Solver"
    LOG_LEVEL: str = "INFO"

    # retry a draw that repeats the previous move instead of dropping it
    SOLVER_RETRY_REJECTED: bool = True

    # UI pacing for the mock solve: MIN + random() * SPREAD seconds
    SOLVE_DELAY_MIN: float = 1.5
    SOLVE_DELAY_SPREAD: float = 1.0

    RANDOM_SEED: Optional[int] = None

    model_config = SettingsConfigDict(env_file=".env")


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
