from typing import Dict, Iterable, List, Optional, Tuple

from ...models.colors import (
    ButtonColorPair,
    ColorPair,
    ColorSummary,
    ElementColorProfile,
    ElementColorSamples,
    RawColorPair,
)
from ...utils.colors import BLACK, WHITE, to_hex
from ...utils.frequency import FrequencyTable
from ...utils.logger import LoggerMixin


TOP_BUTTON_PAIRS = 3


def is_valid_button_pair(background: Optional[str], foreground: Optional[str]) -> bool:
    """
    Decide whether a button color combination is worth ranking.

    Both arguments must already be canonical hex or None.
    """
    if background is None and foreground is None:
        return False
    # Invisible text
    if background is not None and background == foreground:
        return False
    # A lone white foreground is almost always inherited
    if background is None and foreground == WHITE:
        return False
    if background == WHITE:
        return False
    if background == BLACK and foreground == BLACK:
        return False
    return True


def button_pair_key(background: Optional[str], foreground: Optional[str]) -> str:
    return f"{background or 'none'}|{foreground or 'none'}"


class _Palette:
    """Insertion-ordered set of canonical colors."""

    def __init__(self):
        self._colors: Dict[str, None] = {}

    def add(self, color: Optional[str]) -> None:
        if color:
            self._colors.setdefault(color, None)

    def to_list(self) -> List[str]:
        return list(self._colors)


class ColorAnalyzer(LoggerMixin):
    """Builds background/foreground palettes and ranks button color pairs."""

    def rank_button_pairs(self, buttons: Iterable[RawColorPair]) -> Tuple[List[ButtonColorPair], List[Tuple[str, str]]]:
        """
        Count valid button combinations.

        Returns:
            (top pairs, every valid (background, foreground) in first-seen order)
        """
        table: FrequencyTable = FrequencyTable()
        pairs: Dict[str, Tuple[Optional[str], Optional[str]]] = {}
        valid = []

        for raw in buttons:
            background, foreground = to_hex(raw.background), to_hex(raw.foreground)
            if not is_valid_button_pair(background, foreground):
                continue
            key = button_pair_key(background, foreground)
            pairs.setdefault(key, (background, foreground))
            table.observe(key)
            valid.append((background, foreground))

        ranked = [
            ButtonColorPair(background=pairs[key][0], foreground=pairs[key][1], score=count)
            for key, count in table.rank(TOP_BUTTON_PAIRS)
        ]
        self.logger.debug(f"{len(valid)} valid button color pairs, {len(table)} distinct")
        return ranked or [ButtonColorPair.placeholder()], valid

    def summarize(self, samples: ElementColorSamples) -> ColorSummary:
        backgrounds, foregrounds = _Palette(), _Palette()

        regions = {}
        for name in ("body", "header", "footer"):
            raw: RawColorPair = getattr(samples, name)
            pair = ColorPair(background=to_hex(raw.background), foreground=to_hex(raw.foreground))
            backgrounds.add(pair.background)
            foregrounds.add(pair.foreground)
            regions[name] = pair

        buttons, valid_pairs = self.rank_button_pairs(samples.buttons)
        for background, foreground in valid_pairs:
            backgrounds.add(background)
            foregrounds.add(foreground)

        return ColorSummary(
            backgrounds=backgrounds.to_list(),
            foregrounds=foregrounds.to_list(),
            elements=ElementColorProfile(button=buttons, **regions),
        )
