"""Color normalization helpers.

Every color that enters the analyzers passes through here so that
``#FFF``, ``#ffffff``, ``rgb(255, 255, 255)`` and ``rgba(255,255,255,1)``
compare equal. Fully transparent values have no canonical form and
normalize to ``None``.
"""

import re
from typing import NamedTuple, Optional, Union


WHITE = "#ffffff"
BLACK = "#000000"

_HEX_PATTERN = re.compile(r'^#?(?:([0-9a-f]{3})|([0-9a-f]{6}))$', re.IGNORECASE)
_RGB_PATTERN = re.compile(
    r'^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*'
    r'(?:,\s*([0-9]*\.?[0-9]+)\s*)?\)$',
    re.IGNORECASE
)


class RGB(NamedTuple):
    r: int
    g: int
    b: int


ColorInput = Union[str, RGB, None]


def _alpha(color: str) -> Optional[float]:
    match = _RGB_PATTERN.match(color.strip())
    if not match or match.group(4) is None:
        return None
    return float(match.group(4))


def to_rgb(color: ColorInput) -> Optional[RGB]:
    """
    Parse a hex or ``rgb()``/``rgba()`` literal into channels.

    Args:
        color: Color string (3/6 digit hex with or without ``#``, rgb, rgba)

    Returns:
        RGB tuple, or None when the literal is absent or not understood
    """
    if color is None:
        return None
    if isinstance(color, RGB):
        return color

    value = color.strip()
    if not value:
        return None

    hex_match = _HEX_PATTERN.match(value)
    if hex_match:
        short, full = hex_match.groups()
        digits = ''.join(c * 2 for c in short) if short else full
        return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    rgb_match = _RGB_PATTERN.match(value)
    if rgb_match:
        channels = [int(rgb_match.group(i)) for i in (1, 2, 3)]
        if any(c > 255 for c in channels):
            return None
        return RGB(*channels)

    return None


def is_transparent(color: ColorInput) -> bool:
    """True for ``transparent`` and any rgba whose alpha channel is zero."""
    if color is None or isinstance(color, RGB):
        return False
    value = color.strip().lower()
    if value == 'transparent':
        return True
    alpha = _alpha(value)
    return alpha is not None and alpha == 0


def to_hex(color: ColorInput) -> Optional[str]:
    """
    Convert any supported color representation to canonical ``#rrggbb``.

    Returns None for absent, transparent or unparseable input.
    """
    if color is None or is_transparent(color):
        return None
    rgb = to_rgb(color)
    if rgb is None:
        return None
    return f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"


def luma(color: ColorInput) -> Optional[float]:
    """Perceptual brightness on a 0-255 scale, or None if not computable."""
    if is_transparent(color):
        return None
    rgb = to_rgb(color)
    if rgb is None:
        return None
    # Float rounding can push pure white just above 255
    return min(255.0, 0.299 * rgb.r + 0.587 * rgb.g + 0.114 * rgb.b)
