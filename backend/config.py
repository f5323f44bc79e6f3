"""
Configuration management for Green Job Hunter.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Server
    host: str = "0.0.0.0"
    port: int = 5050
    cors_origins: str = "http://localhost:3000"

    # Uploads
    upload_dir: str = "uploads"
    max_upload_size: int = 5 * 1024 * 1024  # 5 MB

    # Job search (Remotive)
    remotive_api_url: str = "https://remotive.com/api/remote-jobs"
    search_timeout: float = 30.0
    max_search_results: int = 20
    default_search_query: str = "green software"

    # Rate limiting
    search_rate_limit: str = "10/minute"
    rate_limit_enabled: bool = True

    # Observability
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()
