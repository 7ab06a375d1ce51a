from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from ...models.fonts import (
    FamilyVariantUsage,
    FontFamily,
    FontSample,
    FontSummary,
    FontSummaryStats,
    FontType,
    FontUsage,
    FontUsageEntry,
    FontVariant,
    SampleElement,
    MAX_SAMPLE_ELEMENTS,
    NOT_DETECTED,
)
from ...utils.logger import LoggerMixin


TOP_FONT_LIMIT = 5

FONT_TYPE_KEYWORDS: Tuple[Tuple[FontType, Tuple[str, ...]], ...] = (
    (FontType.SERIF, (
        'times', 'times new roman', 'georgia', 'garamond', 'baskerville',
        'minion', 'caslon', 'palatino', 'book antiqua', 'serif',
    )),
    (FontType.SANS_SERIF, (
        'arial', 'helvetica', 'verdana', 'tahoma', 'trebuchet ms', 'geneva',
        'lucida grande', 'lucida sans unicode', 'ms sans serif', 'sans-serif',
        'roboto', 'open sans', 'lato', 'montserrat', 'source sans pro',
        'ubuntu', 'nunito', 'poppins', 'inter', 'system-ui',
    )),
    (FontType.MONOSPACE, (
        'courier', 'courier new', 'monaco', 'menlo', 'consolas',
        'lucida console', 'monospace', 'source code pro', 'fira code',
        'inconsolata', 'roboto mono',
    )),
    (FontType.CURSIVE, (
        'comic sans ms', 'brush script mt', 'lucida handwriting',
        'cursive', 'dancing script', 'pacifico', 'great vibes',
    )),
    (FontType.FANTASY, (
        'fantasy', 'papyrus',
    )),
)

SYSTEM_FONTS = frozenset({
    'arial', 'helvetica', 'times', 'times new roman', 'courier',
    'courier new', 'verdana', 'georgia', 'palatino', 'garamond',
    'bookman', 'comic sans ms', 'trebuchet ms', 'arial black',
    'impact', 'lucida sans unicode', 'tahoma', 'lucida console',
    'monaco', 'serif', 'sans-serif', 'monospace', 'cursive', 'fantasy',
    'system-ui', '-apple-system', 'ui-serif', 'ui-sans-serif', 'ui-monospace',
})


def parse_font_family(font_family: Optional[str]) -> List[str]:
    """Split a font-family stack into individual, unquoted font names."""
    if not font_family or font_family.strip() in ('inherit', 'initial'):
        return []
    fonts = (font.strip().replace('"', '').replace("'", '').strip() for font in font_family.split(','))
    return [font for font in fonts if font]


def categorize_font_type(font_name: str) -> FontType:
    """
    Classify a font by keyword substring matching.

    Categories are checked in priority order. A matched keyword is ignored
    when it is part of a longer matched keyword from another category, so
    "Roboto Mono" is monospace and "sans-serif" is not serif, while
    "Roboto Serif" stays serif.
    """
    font_lower = font_name.lower()
    matches = [
        (font_type, keyword)
        for font_type, keywords in FONT_TYPE_KEYWORDS
        for keyword in keywords
        if keyword in font_lower
    ]
    for font_type, keyword in matches:
        shadowed = any(
            other_type != font_type and keyword != other and keyword in other
            for other_type, other in matches
        )
        if not shadowed:
            return font_type
    return FontType.CUSTOM


def is_web_font(font_name: str) -> bool:
    return font_name.lower() not in SYSTEM_FONTS


@dataclass
class _VariantAccumulator:
    family: str
    size: str
    weight: str
    style: str
    heading_count: int = 0
    body_count: int = 0
    total_count: int = 0
    samples: List[SampleElement] = field(default_factory=list)

    def add(self, sample: FontSample) -> None:
        self.total_count += 1
        if sample.is_heading:
            self.heading_count += 1
        elif sample.is_body:
            self.body_count += 1
        if len(self.samples) < MAX_SAMPLE_ELEMENTS:
            self.samples.append(SampleElement(
                tag=sample.tag,
                class_name=sample.class_name,
                text_excerpt=sample.text,
            ))

    def freeze(self) -> FontVariant:
        return FontVariant(
            family=self.family,
            size=self.size,
            weight=self.weight,
            style=self.style,
            heading_count=self.heading_count,
            body_count=self.body_count,
            total_count=self.total_count,
            sample_elements=self.samples,
        )


@dataclass
class _FamilyAccumulator:
    name: str
    total_usage: int = 0
    heading_usage: int = 0
    body_usage: int = 0
    variants: List[FamilyVariantUsage] = field(default_factory=list)

    def add(self, variant: FontVariant) -> None:
        self.total_usage += variant.total_count
        self.heading_usage += variant.heading_count
        self.body_usage += variant.body_count
        self.variants.append(FamilyVariantUsage(
            size=variant.size,
            weight=variant.weight,
            style=variant.style,
            usage=variant.total_count,
        ))

    def freeze(self) -> FontFamily:
        return FontFamily(
            name=self.name,
            font_type=categorize_font_type(self.name),
            is_web_font=is_web_font(self.name),
            total_usage=self.total_usage,
            heading_usage=self.heading_usage,
            body_usage=self.body_usage,
            variants=self.variants,
        )


def primary_font(font_family: str) -> str:
    fonts = parse_font_family(font_family)
    return fonts[0] if fonts else 'unknown'


class FontAnalyzer(LoggerMixin):
    """Groups per-element font samples into variants and families."""

    def group_variants(self, samples: Iterable[FontSample]) -> List[FontVariant]:
        """Group samples by (family, size, weight, style), most used first."""
        variants: Dict[Tuple[str, str, str, str], _VariantAccumulator] = {}
        for sample in samples:
            key = (sample.family, sample.size, sample.weight, sample.style)
            if key not in variants:
                variants[key] = _VariantAccumulator(*key)
            variants[key].add(sample)

        frozen = [acc.freeze() for acc in variants.values()]
        frozen.sort(key=lambda v: -v.total_count)
        return frozen

    def group_families(self, variants: Iterable[FontVariant]) -> List[FontFamily]:
        """Merge variants by lowercase primary font, summing usage."""
        families: Dict[str, _FamilyAccumulator] = {}
        for variant in variants:
            name = primary_font(variant.family)
            key = name.lower()
            if key not in families:
                families[key] = _FamilyAccumulator(name=name)
            families[key].add(variant)

        frozen = [acc.freeze() for acc in families.values()]
        frozen.sort(key=lambda f: -f.total_usage)
        return frozen

    def top_fonts(self, variants: List[FontVariant], context: str) -> List[FontUsageEntry]:
        """Rank variants by their heading or body count."""
        attr = 'heading_count' if context == 'heading' else 'body_count'
        ranked = sorted(
            (v for v in variants if getattr(v, attr) > 0),
            key=lambda v: -getattr(v, attr),
        )
        entries = []
        for variant in ranked[:TOP_FONT_LIMIT]:
            name = primary_font(variant.family)
            entries.append(FontUsageEntry(
                font_family=name,
                full_font_family=variant.family,
                size=variant.size,
                weight=variant.weight,
                style=variant.style,
                font_type=categorize_font_type(name),
                is_web_font=is_web_font(name),
                usage=getattr(variant, attr),
                total_usage=variant.total_count,
            ))
        return entries

    def generate_summary(self, families: List[FontFamily]) -> FontSummaryStats:
        web_fonts = sum(1 for f in families if f.is_web_font)

        type_distribution: Dict[str, int] = {}
        for family in families:
            type_distribution[family.font_type.value] = type_distribution.get(family.font_type.value, 0) + 1

        heading = sorted((f for f in families if f.heading_usage > 0), key=lambda f: -f.heading_usage)
        body = sorted((f for f in families if f.body_usage > 0), key=lambda f: -f.body_usage)

        return FontSummaryStats(
            total_font_families=len(families),
            web_fonts=web_fonts,
            system_fonts=len(families) - web_fonts,
            type_distribution=type_distribution,
            primary_heading_font=heading[0].name if heading else NOT_DETECTED,
            primary_body_font=body[0].name if body else NOT_DETECTED,
        )

    def analyze(self, samples: Iterable[FontSample]) -> FontSummary:
        variants = self.group_variants(samples)
        families = self.group_families(variants)
        self.logger.debug(f"Found {len(variants)} font variants in {len(families)} families")
        return FontSummary(
            headings=self.top_fonts(variants, 'heading'),
            body=self.top_fonts(variants, 'body'),
            all_fonts=families,
            summary=self.generate_summary(families),
        )


def font_usage(summary: FontSummary) -> FontUsage:
    """Reduce a font analysis to the first-ranked heading and body fonts."""
    return FontUsage(
        headings=summary.headings[0].font_family if summary.headings else NOT_DETECTED,
        body=summary.body[0].font_family if summary.body else NOT_DETECTED,
    )
