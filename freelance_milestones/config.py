"""Configuration management using Pydantic Settings"""

from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "freelance-milestones"
    log_level: str = "INFO"

    # Milestones
    milestone_amount: float = 1000.0  # Same as domain.milestones.DEFAULT_MILESTONE_AMOUNT
    min_milestone_amount: float = 1000.0  # Floor enforced by callers, not the engine

    # CSV transaction source
    csv_encoding: str = "utf-8-sig"
    csv_date_formats: List[str] = ["%Y-%m-%d", "%b %d, %Y", "%m/%d/%Y"]

    # Observability
    metrics_enabled: bool = True

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()


settings = Settings()
