from typing import List, Optional

from ...models.borders import (
    BorderSummary,
    UsageCount,
    DEFAULT_BORDER_COLOR,
    DEFAULT_BORDER_RADIUS,
    DEFAULT_BORDER_WIDTH,
)
from ...utils.frequency import FrequencyTable
from .collector import BorderTables


TOP_USAGE_LIMIT = 5


def normalize_radius(radius: Optional[str]) -> Optional[str]:
    """Collapse a multi-value radius whose corners are all equal."""
    if not radius:
        return radius
    values = radius.split()
    if values and all(v == values[0] for v in values):
        return values[0]
    return radius


def _top(table: FrequencyTable) -> List[UsageCount]:
    return [UsageCount(value=value, count=count) for value, count in table.rank(TOP_USAGE_LIMIT)]


class BorderAnalyzer:
    """Reduces border frequency tables to the dominant border tokens."""

    def summarize(self, tables: BorderTables) -> BorderSummary:
        defaulted = []

        radius = normalize_radius(tables.radius.most_common())
        if radius is None:
            radius = DEFAULT_BORDER_RADIUS
            defaulted.append("radius")

        width = tables.width.most_common()
        if width is None:
            width = DEFAULT_BORDER_WIDTH
            defaulted.append("width")

        color = tables.color.most_common()
        if color is None:
            color = DEFAULT_BORDER_COLOR
            defaulted.append("color")

        return BorderSummary(
            radius=radius,
            width=width,
            color=color,
            top_radius=_top(tables.radius),
            top_width=_top(tables.width),
            top_color=_top(tables.color),
            defaulted=defaulted,
        )
