from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="MEDSTOCK_", extra="ignore")

    app_name: str = "medstock"
    env: str = "dev"
    log_level: str = "INFO"

    # Console input ranges
    min_expiry_year: int = Field(default=2025, ge=1, description="earliest year accepted for a batch expiry")
    max_expiry_year: int = Field(default=2999, le=9999)
    max_input_int: int = Field(default=999, ge=1, description="upper bound for ids and quantities typed at the menu")

    pause_after_action: bool = True

    def model_post_init(self, __context) -> None:
        if self.min_expiry_year > self.max_expiry_year:
            raise ValueError(
                f"min_expiry_year={self.min_expiry_year} is after max_expiry_year={self.max_expiry_year}; "
                "set MEDSTOCK_MIN_EXPIRY_YEAR / MEDSTOCK_MAX_EXPIRY_YEAR"
            )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
