from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings.

    Loading priority (highest to lowest):
    1. Keyword arguments (the command line, see main.py)
    2. Environment variables
    3. .env file
    4. Default values below
    """

    # Application
    app_name: str = "shorturl"
    app_version: str = "1.0.0"

    # Server
    root_url: str  # Prefix for generated short links
    port: int
    host: str = "127.0.0.1"

    # Database
    database_path: str = "urls.db"
    pool_size: int = 5
    pool_timeout: float = 30.0  # Seconds to wait for a pooled connection
    pool_max_overflow: int = 10

    # URL Shortener specific
    short_code_length: int = 6
    max_retries: int = 5

    # Rate limiting (fixed window)
    rate_limit_enabled: bool = True
    rate_limit_requests: int = 100
    rate_limit_window_seconds: int = 60

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def rate_limit(self) -> str:
        """Limit string in the `limits` notation, e.g. "100/60 seconds"."""
        return f"{self.rate_limit_requests}/{self.rate_limit_window_seconds} seconds"
