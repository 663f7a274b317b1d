"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from implied_growth.domain.growth import D1_TOLERANCE
from implied_growth.domain.models import ModelVariant


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="IMPLIED_GROWTH_",
        extra="ignore",
        protected_namespaces=("settings_",),  # allows model_variant
    )

    # Service
    service_name: str = "implied-growth-calculator"
    log_level: str = "INFO"

    # Model - one variant per deployment, never mixed
    model_variant: ModelVariant = ModelVariant.CLOSED_FORM
    projection_years: int = 10
    d1_tolerance: float = D1_TOLERANCE  # Absolute currency units

    # Interactive session
    debounce_seconds: float = 0.3


settings = Settings()
