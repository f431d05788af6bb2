"""
Configuration management using Pydantic Settings.
"""

import logging
from datetime import timezone, tzinfo
from functools import lru_cache
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


API_KEY_PLACEHOLDER = "YOUR_API_KEY_HERE"


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # YouTube Data API v3
    youtube_api_key: str = Field(..., description="YouTube Data API v3 key")
    youtube_api_base_url: str = Field(
        "https://www.googleapis.com/youtube/v3",
        description="YouTube Data API base URL"
    )
    request_timeout_seconds: float = Field(30.0, gt=0, description="HTTP request timeout")

    # Channel listing
    channel_id: str = Field("UCswzye8bcm8bByqLlW0QaFQ", description="YouTube channel ID to list")
    max_results: int = Field(50, ge=1, le=50, description="Maximum number of recent videos to fetch")

    # Page output
    display_timezone: str = Field("UTC", description="Time zone used for published dates on cards")
    page_template_path: Optional[str] = Field(None, description="Optional custom page template")
    output_path: str = Field("watch.html", description="Where the rendered page is written")

    # Logging Configuration
    log_level: str = Field("INFO", description="Logging level")
    log_file: str = Field("./logs/watch_page.log", description="Log file path")

    @field_validator('channel_id')
    @classmethod
    def validate_channel_id(cls, v):
        """Validate YouTube channel ID format."""
        if not v.startswith('UC') or len(v) != 24:
            raise ValueError('Invalid YouTube channel ID format - must start with UC and be 24 characters')
        return v

    @field_validator('display_timezone')
    @classmethod
    def validate_display_timezone(cls, v):
        """Validate the display time zone name."""
        if v.upper() == "UTC":
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f'Unknown display_timezone: {v}')
        return v

    @field_validator('youtube_api_base_url')
    @classmethod
    def validate_base_url(cls, v):
        """Strip the trailing slash so endpoints can be joined."""
        return v.rstrip('/')

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'log_level must be one of: {valid_levels}')
        return v.upper()

    def display_tzinfo(self) -> tzinfo:
        """Time zone used for dates shown on the page."""
        if self.display_timezone.upper() == "UTC":
            return timezone.utc
        return ZoneInfo(self.display_timezone)

    def validate_api_keys(self) -> None:
        """Validate that a real API key has been configured."""
        if not self.youtube_api_key.strip():
            raise ValueError("youtube_api_key is required")
        if self.youtube_api_key == API_KEY_PLACEHOLDER:
            raise ValueError("youtube_api_key is still the placeholder value - set YOUTUBE_API_KEY")

    def setup_logging(self) -> None:
        """Setup logging configuration."""
        # Create logs directory if it doesn't exist
        log_path = Path(self.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[
                logging.FileHandler(self.log_file, encoding='utf-8'),
                logging.StreamHandler()
            ]
        )

        # Set specific logger levels
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()
    settings.validate_api_keys()
    settings.setup_logging()
    return settings
