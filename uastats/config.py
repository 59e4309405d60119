# uastats/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Aggregation
    top_user_agents: int = 10

    # Text report
    report_distribution_limit: int = 10

    # Classification cache (entries, keyed by user agent string)
    classification_cache_size: int = 10000

    # Log ingestion
    log_file_encoding: str = "utf-8"
    log_level: str = "INFO"

    # HTTP service
    host: str = "0.0.0.0"
    port: int = 5000

    class Config:
        env_file = ".env"
        env_prefix = "UASTATS_"


settings = Settings()
