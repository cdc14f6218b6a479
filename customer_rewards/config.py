"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./rewards.db"

    # Seed data loaded on startup (empty string disables loading)
    seed_data_path: str = "data/transactions.json"

    # Service
    service_name: str = "customer-rewards"
    log_level: str = "INFO"


settings = Settings()
