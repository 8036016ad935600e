# app/core/config.py

from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    # --- PROJECT ---
    PROJECT_NAME: str = "EthioRoute Cost Engine API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # --- PRICING RULES ---
    CURRENCY: str = "ETB"
    EXPORT_DISCOUNT_FACTOR: float = 0.60  # share taken off export-eligible tariffs
    OPTIMIZATION_DISCOUNT: float = 0.10  # share taken off distance for multi-stop routes
    OPTIMIZATION_MIN_STOPS: int = 3
    STORAGE_PENALTY_RATE: float = 192.00  # per day after the free period
    STORAGE_FREE_DAYS: int = 8

    # --- PATHS ---
    # CSV with truck_type,fuel_efficiency_km_l,capacity_teu,category
    TRUCK_PROFILES_CSV: Path | None = None


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
