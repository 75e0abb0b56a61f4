"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "credit-simulator"
    log_level: str = "INFO"

    # Simulation defaults
    default_annual_rate: float = 35.0  # TNA, percent
    default_term_months: int = 12
    due_date_interval_days: int = 30


settings = Settings()
