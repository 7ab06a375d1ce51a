"""Raw style sampling from a rendered page.

The in-page scripts only read computed styles; every filter, parse and
count happens here so the rules can be tested without a browser.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ...core.exceptions import ExtractionFailure
from ...models.borders import BORDER_SIDES, BorderSample
from ...models.colors import ElementColorSamples, RawColorPair
from ...models.fonts import FontSample, MAX_TEXT_EXCERPT
from ...models.theme import ThemeSignal
from ...utils.colors import is_transparent, luma, to_hex
from ...utils.frequency import FrequencyTable
from ...utils.logger import get_logger
from . import extractors

logger = get_logger(__name__)


HEADING_TAGS = frozenset({'h1', 'h2', 'h3', 'h4', 'h5', 'h6'})
BODY_TAGS = frozenset({'p', 'div', 'span', 'a', 'li', 'td', 'th', 'body'})
NON_CONTENT_TAGS = frozenset({'script', 'style', 'meta', 'link', 'title'})

# Computed shorthand of an element without any border
_EMPTY_BORDER_SHORTHANDS = frozenset({'', 'none', '0px none rgba(0, 0, 0, 0)'})
_BORDER_SHORTHAND_PATTERN = re.compile(r'(\d+(?:\.\d+)?px)\s+(\w+)\s+(.*)')
_INVISIBLE_BORDER_STYLES = frozenset({'none', 'hidden'})


@dataclass
class BorderTables:
    """Frequency tables of border radius, width and color."""
    radius: FrequencyTable = field(default_factory=FrequencyTable)
    width: FrequencyTable = field(default_factory=FrequencyTable)
    color: FrequencyTable = field(default_factory=FrequencyTable)
    element_count: int = 0

    def add(self, sample: BorderSample) -> None:
        self.radius.observe(sample.radius)
        self.width.update(sample.widths)
        self.color.update(sample.colors)
        self.width.observe(sample.shorthand_width)
        self.color.observe(sample.shorthand_color)
        self.element_count += 1


def parse_border_shorthand(value: Optional[str]) -> Optional[Tuple[str, Optional[str]]]:
    """
    Parse a computed ``border`` shorthand of the form ``<width> <style> <color>``.

    Returns:
        (width, canonical color or None), or None when the value does not
        match the pattern or describes no visible border
    """
    if value is None or value.strip() in _EMPTY_BORDER_SHORTHANDS:
        return None
    match = _BORDER_SHORTHAND_PATTERN.match(value.strip())
    if not match:
        return None
    width, style, color = match.groups()
    if width == '0px' or style.lower() in _INVISIBLE_BORDER_STYLES:
        return None
    return width, to_hex(color.strip())


def _sides(values: Any) -> List[Any]:
    """Exactly one raw value per side, missing sides as None."""
    values = list(values) if isinstance(values, (list, tuple)) else []
    return (values + [None] * BORDER_SIDES)[:BORDER_SIDES]


def build_border_sample(row: Dict[str, Any]) -> BorderSample:
    """Filter the raw border values of one element, keeping side order."""
    radius = row.get('radius') or None
    if radius is not None and radius.strip() in ('0px', 'none', ''):
        radius = None

    widths = [w if w and w != '0px' else None for w in _sides(row.get('widths'))]
    colors = [to_hex(c) if isinstance(c, str) else None for c in _sides(row.get('colors'))]

    shorthand_width = shorthand_color = None
    parsed = parse_border_shorthand(row.get('shorthand'))
    if parsed is not None:
        shorthand_width, shorthand_color = parsed

    return BorderSample(
        radius=radius.strip() if radius else None,
        widths=widths,
        colors=colors,
        shorthand_width=shorthand_width,
        shorthand_color=shorthand_color,
    )


def classify_element(tag: str) -> Tuple[bool, bool]:
    """Return (is_heading, is_body) for a lowercase tag name."""
    tag = tag.lower()
    is_heading = tag in HEADING_TAGS
    is_body = tag in BODY_TAGS or (not is_heading and tag not in NON_CONTENT_TAGS)
    return is_heading, is_body


def _rows(payload: Any) -> List[Dict[str, Any]]:
    if not isinstance(payload, dict):
        return []
    rows = payload.get('elements')
    if not isinstance(rows, list):
        return []
    return [row for row in rows if isinstance(row, dict)]


def _raw_pair(payload: Any) -> RawColorPair:
    if not isinstance(payload, dict):
        return RawColorPair()
    return RawColorPair(
        background=payload.get('background') or None,
        foreground=payload.get('foreground') or None,
    )


class StyleSampleCollector:
    """
    Reads raw style data from an already navigated page.

    Each ``collect_*`` method performs exactly one ``page.evaluate`` call.
    Evaluation errors are raised as ``ExtractionFailure``; missing page
    regions simply produce empty results.
    """

    async def _evaluate(self, page, script: str, what: str) -> Any:
        try:
            return await page.evaluate(script)
        except ExtractionFailure:
            raise
        except Exception as e:
            logger.error(f"In-page {what} sampling failed: {str(e)}")
            raise ExtractionFailure(f"Failed to sample {what}: {str(e)}", stage=what)

    async def collect_borders(self, page) -> BorderTables:
        payload = await self._evaluate(page, extractors.get_border_sample_script(), "borders")
        tables = BorderTables()
        for row in _rows(payload):
            tables.add(build_border_sample(row))
        logger.debug(f"Sampled borders from {tables.element_count} elements")
        return tables

    async def collect_fonts(self, page) -> List[FontSample]:
        payload = await self._evaluate(page, extractors.get_font_sample_script(), "fonts")
        samples = []
        for row in _rows(payload):
            family = row.get('family')
            if not family or family == 'inherit':
                continue
            tag = str(row.get('tag') or '').lower()
            is_heading, is_body = classify_element(tag)
            samples.append(FontSample(
                family=family,
                size=row.get('size') or '',
                weight=str(row.get('weight') or ''),
                style=row.get('style') or '',
                tag=tag,
                class_name=row.get('class_name') or '',
                text=(row.get('text') or '')[:MAX_TEXT_EXCERPT],
                is_heading=is_heading,
                is_body=is_body,
            ))
        logger.debug(f"Sampled fonts from {len(samples)} elements")
        return samples

    async def collect_colors(self, page) -> ElementColorSamples:
        payload = await self._evaluate(page, extractors.get_color_sample_script(), "colors")
        if not isinstance(payload, dict):
            return ElementColorSamples()
        buttons = payload.get('buttons')
        return ElementColorSamples(
            body=_raw_pair(payload.get('body')),
            header=_raw_pair(payload.get('header')),
            footer=_raw_pair(payload.get('footer')),
            buttons=[_raw_pair(b) for b in buttons] if isinstance(buttons, list) else [],
        )

    async def collect_theme_signal(self, page) -> ThemeSignal:
        payload = await self._evaluate(page, extractors.get_theme_signal_script(), "theme")
        if not isinstance(payload, dict):
            return ThemeSignal()

        background = payload.get('body_background')
        # A transparent body shows the root element's background
        if not background or is_transparent(background):
            background = payload.get('root_background')
        text_color = payload.get('text_color')
        color_scheme = payload.get('color_scheme')

        return ThemeSignal(
            background_color=to_hex(background),
            text_color=to_hex(text_color),
            background_brightness=luma(background),
            text_brightness=luma(text_color),
            has_dark_class=bool(payload.get('has_dark_class')),
            color_scheme=color_scheme.strip().lower() if isinstance(color_scheme, str) and color_scheme.strip() else None,
            prefers_dark=bool(payload.get('prefers_dark')),
        )
