from typing import Optional, Dict, Any


class DesignScraperException(Exception):
    """Base exception for all design scraper errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "GENERAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(DesignScraperException):
    """Exception raised for a missing URL or a malformed stage registration."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        details = {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, "CONFIGURATION_ERROR", details)


class ExtractionFailure(DesignScraperException):
    """Exception raised when navigation or in-page evaluation fails."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        stage: Optional[str] = None,
        error_code: str = "EXTRACTION_FAILURE"
    ):
        details = {}
        if url:
            details["url"] = url
        if stage:
            details["stage"] = stage
        super().__init__(message, error_code, details)


class BrowserError(ExtractionFailure):
    """Exception raised by the rendered-page provider."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message, url=url, error_code="BROWSER_ERROR")


class BrowserTimeoutError(BrowserError):
    """Exception raised when a browser operation times out."""


class BrowserConnectionError(BrowserError):
    """Exception raised when the browser cannot be launched."""
