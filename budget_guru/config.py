"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./budget_guru.db"

    # Service
    service_name: str = "budget-guru"
    log_level: str = "INFO"

    # Presentation
    display_places: int = 2
    savings_tip: str = "Tip: consider setting aside at least 10% of every payment for an emergency fund."


settings = Settings()
