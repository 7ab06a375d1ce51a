from typing import Optional
from enum import Enum
from pydantic import BaseModel, Field


class Theme(str, Enum):
    """Light/dark polarity of a page."""
    LIGHT = "light"
    DARK = "dark"


class ThemeSignal(BaseModel):
    """Evidence used to decide whether a page is light or dark."""

    model_config = {"frozen": True}

    background_color: Optional[str] = Field(None, description="Resolved page background, canonical hex")
    text_color: Optional[str] = Field(None, description="Body text color, canonical hex")
    background_brightness: Optional[float] = Field(None, ge=0, le=255, description="Luma of the background")
    text_brightness: Optional[float] = Field(None, ge=0, le=255, description="Luma of the text color")
    has_dark_class: bool = Field(default=False, description="Dark theme class on body or root element")
    color_scheme: Optional[str] = Field(None, description="Computed color-scheme of the root element")
    prefers_dark: bool = Field(default=False, description="prefers-color-scheme: dark matched")
