"""Configuration management using Pydantic Settings"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "cashflow-risk"
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    # Sample data
    sample_size: int = 100
    sample_seed: Optional[int] = None

    # Presentation
    items_per_page: int = 15
    heatmap_limit: int = 50  # rows shown in the heatmap
    histogram_bins: int = 20

    # Observability
    metrics_enabled: bool = True


settings = Settings()
