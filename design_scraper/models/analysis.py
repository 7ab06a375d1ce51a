from typing import Optional
from datetime import datetime, timezone
from pydantic import BaseModel, Field

from .borders import BorderSummary
from .colors import ColorSummary
from .fonts import FontSummary
from .theme import Theme


class AnalysisResult(BaseModel):
    """
    Design tokens derived from one rendered page.

    A section is None when its stage could not be completed.
    """

    model_config = {"frozen": True}

    url: str = Field(..., description="Analyzed URL")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    theme: Optional[Theme] = None
    colors: Optional[ColorSummary] = None
    fonts: Optional[FontSummary] = None
    borders: Optional[BorderSummary] = None

    @property
    def unavailable_sections(self) -> list:
        return [name for name in ("theme", "colors", "fonts", "borders") if getattr(self, name) is None]
