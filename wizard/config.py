"""
Configuration for the wizard client.

Kept apart from the server settings: the wizard only talks to the API over HTTP.
"""

from pydantic_settings import BaseSettings


class WizardSettings(BaseSettings):
    """Client settings from environment variables."""

    api_base_url: str = "http://localhost:5050"
    request_timeout: float = 30.0
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore server-side env vars


settings = WizardSettings()
