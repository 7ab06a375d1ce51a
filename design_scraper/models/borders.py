from typing import List, Optional
from pydantic import BaseModel, Field


DEFAULT_BORDER_RADIUS = "0px"
DEFAULT_BORDER_WIDTH = "0px"
DEFAULT_BORDER_COLOR = "transparent"
BORDER_SIDES = 4


class UsageCount(BaseModel):
    """A ranked value together with the number of times it was observed."""

    model_config = {"frozen": True}

    value: str = Field(..., description="Observed value")
    count: int = Field(..., ge=0, description="Number of occurrences")


class BorderSample(BaseModel):
    """Border properties read from a single element."""

    model_config = {"frozen": True}

    radius: Optional[str] = Field(None, description="Border radius, absent when 0px")
    widths: List[Optional[str]] = Field(
        default_factory=lambda: [None] * BORDER_SIDES,
        min_length=BORDER_SIDES,
        max_length=BORDER_SIDES,
        description="Per-side widths (top, right, bottom, left), None for 0px"
    )
    colors: List[Optional[str]] = Field(
        default_factory=lambda: [None] * BORDER_SIDES,
        min_length=BORDER_SIDES,
        max_length=BORDER_SIDES,
        description="Per-side colors (top, right, bottom, left) as canonical hex, None when invisible"
    )
    shorthand_width: Optional[str] = Field(None, description="Width parsed from the border shorthand")
    shorthand_color: Optional[str] = Field(None, description="Color parsed from the border shorthand")


class BorderSummary(BaseModel):
    """Most common border tokens on a page."""

    model_config = {"frozen": True}

    radius: str = Field(default=DEFAULT_BORDER_RADIUS, description="Most common border radius")
    width: str = Field(default=DEFAULT_BORDER_WIDTH, description="Most common border width")
    color: str = Field(default=DEFAULT_BORDER_COLOR, description="Most common border color")
    top_radius: List[UsageCount] = Field(default_factory=list, description="Top 5 radius values")
    top_width: List[UsageCount] = Field(default_factory=list, description="Top 5 width values")
    top_color: List[UsageCount] = Field(default_factory=list, description="Top 5 color values")
    defaulted: List[str] = Field(
        default_factory=list,
        description="Fields holding a presentation default instead of a detected value"
    )

    def is_detected(self, field_name: str) -> bool:
        """Whether ``field_name`` carries a value found on the page."""
        return field_name not in self.defaulted
