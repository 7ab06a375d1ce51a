from typing import List, Optional
from pydantic import BaseModel, Field, field_serializer, model_validator


def _dump_color(value: Optional[str]) -> str:
    # Absent colors are written as "" in serialized output
    return value or ""


class ColorPair(BaseModel):
    """Background/foreground colors of one page region."""

    model_config = {"frozen": True}

    background: Optional[str] = Field(None, description="Canonical background color")
    foreground: Optional[str] = Field(None, description="Canonical text color")

    @field_serializer('background', 'foreground')
    def serialize_color(self, value: Optional[str]) -> str:
        return _dump_color(value)


class ButtonColorPair(ColorPair):
    """A distinguishable button color combination and how often it occurs."""

    score: int = Field(..., ge=0, description="Number of buttons using this combination")

    @model_validator(mode='after')
    def check_combination(self) -> 'ButtonColorPair':
        if self.score == 0:
            if self.background is not None or self.foreground is not None:
                raise ValueError("Only the empty placeholder pair may have a score of 0")
            return self
        if self.background is None and self.foreground is None:
            raise ValueError("A button pair needs a background or a foreground")
        if self.background is not None and self.background == self.foreground:
            raise ValueError("Button background and foreground must differ")
        return self

    @classmethod
    def placeholder(cls) -> 'ButtonColorPair':
        """The single entry reported when no distinguishable buttons exist."""
        return cls(background=None, foreground=None, score=0)

    @property
    def is_placeholder(self) -> bool:
        return self.score == 0


class ElementColorProfile(BaseModel):
    """Colors of the main structural regions and the dominant buttons."""

    model_config = {"frozen": True}

    button: List[ButtonColorPair] = Field(
        default_factory=lambda: [ButtonColorPair.placeholder()],
        description="Top 3 button color pairs by score"
    )
    header: ColorPair = Field(default_factory=ColorPair)
    body: ColorPair = Field(default_factory=ColorPair)
    footer: ColorPair = Field(default_factory=ColorPair)


class ColorSummary(BaseModel):
    """Deduplicated color palettes plus per-region colors."""

    model_config = {"frozen": True}

    backgrounds: List[str] = Field(default_factory=list, description="Unique background colors, first-seen order")
    foregrounds: List[str] = Field(default_factory=list, description="Unique text colors, first-seen order")
    elements: ElementColorProfile = Field(default_factory=ElementColorProfile)

    @classmethod
    def empty(cls) -> 'ColorSummary':
        return cls()


class RawColorPair(BaseModel):
    """Computed colors exactly as reported by the page."""

    background: Optional[str] = None
    foreground: Optional[str] = None


class ElementColorSamples(BaseModel):
    """Raw color readings collected from one page."""

    body: RawColorPair = Field(default_factory=RawColorPair)
    header: RawColorPair = Field(default_factory=RawColorPair)
    footer: RawColorPair = Field(default_factory=RawColorPair)
    buttons: List[RawColorPair] = Field(default_factory=list)
