# design_scraper/config.py

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class BrowserSettings(BaseSettings):
    """Browser automation configuration settings."""

    # Browser Type
    BROWSER_TYPE: str = Field(default="chromium")
    BROWSER_HEADLESS: bool = Field(default=True)
    BROWSER_TIMEOUT: int = Field(default=30)
    BROWSER_NAVIGATION_TIMEOUT: int = Field(default=30)
    BROWSER_VIEWPORT_WIDTH: int = Field(default=1920)
    BROWSER_VIEWPORT_HEIGHT: int = Field(default=1080)
    BROWSER_USER_AGENT: Optional[str] = Field(default=None)
    BROWSER_WAIT_UNTIL: str = Field(default="networkidle")

    @field_validator('BROWSER_TYPE')
    @classmethod
    def validate_browser_type(cls, v: str) -> str:
        """Only the engines Playwright ships are accepted."""
        v = v.lower().strip()
        if v not in ("chromium", "firefox", "webkit"):
            raise ValueError(f"Unsupported browser type: {v}")
        return v

    @field_validator('BROWSER_WAIT_UNTIL')
    @classmethod
    def validate_wait_until(cls, v: str) -> str:
        v = v.lower().strip()
        if v not in ("load", "domcontentloaded", "networkidle", "commit"):
            raise ValueError(f"Unsupported wait condition: {v}")
        return v


class Settings(BrowserSettings):
    """Application settings loaded from environment variables."""

    # Application settings
    app_name: str = Field(default="Design Scraper")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Logging settings
    log_level: Optional[str] = Field(default=None)
    log_file: Optional[str] = Field(default=None)
    enable_file_logging: bool = Field(default=False)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"  # Ignore unknown environment variables
    }


# Global settings instance
settings = Settings()
