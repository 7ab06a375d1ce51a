from typing import Dict, List
from enum import Enum
from pydantic import BaseModel, Field


NOT_DETECTED = "Not detected"
MAX_SAMPLE_ELEMENTS = 5
MAX_TEXT_EXCERPT = 100


class FontType(str, Enum):
    """Generic classification of a font family."""
    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    MONOSPACE = "monospace"
    CURSIVE = "cursive"
    FANTASY = "fantasy"
    CUSTOM = "custom"


class FontSample(BaseModel):
    """Font properties read from a single element."""

    family: str = Field(..., description="Computed font-family value")
    size: str = Field(default="", description="Computed font-size")
    weight: str = Field(default="", description="Computed font-weight")
    style: str = Field(default="", description="Computed font-style")
    tag: str = Field(..., description="Lowercase tag name")
    class_name: str = Field(default="", description="Class attribute")
    text: str = Field(default="", description="Text excerpt, at most 100 characters", max_length=MAX_TEXT_EXCERPT)
    is_heading: bool = Field(default=False)
    is_body: bool = Field(default=False)


class SampleElement(BaseModel):
    """An element that used a particular font variant."""

    model_config = {"frozen": True}

    tag: str
    class_name: str = ""
    text_excerpt: str = Field(default="", max_length=MAX_TEXT_EXCERPT)


class FontVariant(BaseModel):
    """All elements sharing one (family, size, weight, style) combination."""

    model_config = {"frozen": True}

    family: str
    size: str
    weight: str
    style: str
    heading_count: int = Field(default=0, ge=0)
    body_count: int = Field(default=0, ge=0)
    total_count: int = Field(default=0, ge=0)
    sample_elements: List[SampleElement] = Field(default_factory=list, max_length=MAX_SAMPLE_ELEMENTS)


class FamilyVariantUsage(BaseModel):
    """How often one size/weight/style of a family was used."""

    model_config = {"frozen": True}

    size: str
    weight: str
    style: str
    usage: int = Field(..., ge=0)


class FontFamily(BaseModel):
    """Usage of a primary font family across all of its variants."""

    model_config = {"frozen": True}

    name: str = Field(..., description="Primary font from the font-family stack")
    font_type: FontType
    is_web_font: bool
    total_usage: int = Field(default=0, ge=0)
    heading_usage: int = Field(default=0, ge=0)
    body_usage: int = Field(default=0, ge=0)
    variants: List[FamilyVariantUsage] = Field(default_factory=list)


class FontUsageEntry(BaseModel):
    """One row of the heading or body font ranking."""

    model_config = {"frozen": True}

    font_family: str = Field(..., description="Primary font")
    full_font_family: str = Field(..., description="Complete computed font-family stack")
    size: str
    weight: str
    style: str
    font_type: FontType
    is_web_font: bool
    usage: int = Field(..., ge=0, description="Count in the ranked context")
    total_usage: int = Field(..., ge=0)


class FontSummaryStats(BaseModel):
    model_config = {"frozen": True}

    total_font_families: int = 0
    web_fonts: int = 0
    system_fonts: int = 0
    type_distribution: Dict[str, int] = Field(default_factory=dict)
    primary_heading_font: str = NOT_DETECTED
    primary_body_font: str = NOT_DETECTED


class FontSummary(BaseModel):
    """Complete font analysis of a page."""

    model_config = {"frozen": True}

    headings: List[FontUsageEntry] = Field(default_factory=list)
    body: List[FontUsageEntry] = Field(default_factory=list)
    all_fonts: List[FontFamily] = Field(default_factory=list)
    summary: FontSummaryStats = Field(default_factory=FontSummaryStats)


class FontUsage(BaseModel):
    """Primary heading and body fonts."""

    model_config = {"frozen": True}

    headings: str = NOT_DETECTED
    body: str = NOT_DETECTED
