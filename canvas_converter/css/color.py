"""
CSS color values.
This module parses named, hex and rgb()/rgba() colors into a canonical
0-255 RGB triple and converts them to the float RGB space of the canvas
node model.
"""

import logging
import re
from typing import Dict, Mapping, Optional, Tuple

from .base import ImmutableValue

logger = logging.getLogger(__name__)

RGB_MAX_VALUE = 255
HEX_SHORT_LENGTH = 3
HEX_FULL_LENGTH = 6

# ITU-R BT.601 luma coefficients
LUMA_RED = 0.299
LUMA_GREEN = 0.587
LUMA_BLUE = 0.114

# WCAG relative luminance
WCAG_LINEAR_THRESHOLD = 0.03928
WCAG_CONTRAST_OFFSET = 0.05

# Alpha is not modeled; transparent resolves to black
NAMED_COLORS: Dict[str, Tuple[int, int, int]] = {
    'red': (255, 0, 0),
    'green': (0, 128, 0),
    'blue': (0, 0, 255),
    'black': (0, 0, 0),
    'white': (255, 255, 255),
    'gray': (128, 128, 128),
    'grey': (128, 128, 128),
    'silver': (192, 192, 192),
    'yellow': (255, 255, 0),
    'cyan': (0, 255, 255),
    'aqua': (0, 255, 255),
    'magenta': (255, 0, 255),
    'fuchsia': (255, 0, 255),
    'orange': (255, 165, 0),
    'purple': (128, 0, 128),
    'brown': (165, 42, 42),
    'pink': (255, 192, 203),
    'lime': (0, 255, 0),
    'navy': (0, 0, 128),
    'maroon': (128, 0, 0),
    'olive': (128, 128, 0),
    'teal': (0, 128, 128),
    'transparent': (0, 0, 0),
}

HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')

# The alpha channel is matched so that rgba() is accepted, then discarded
RGB_FUNCTION_RE = re.compile(
    r'^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*(\d*\.?\d+)\s*)?\)$',
    re.IGNORECASE
)


def _clamp_channel(value: float) -> int:
    return int(round(max(0, min(RGB_MAX_VALUE, value))))


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


class ColorValue(ImmutableValue):
    """
    A canonical RGB color with integer channels in [0, 255].

    Channels are clamped at construction. Use parse() for strict parsing
    of CSS color strings and from_rgb() for lenient programmatic creation.
    """

    __slots__ = ('_r', '_g', '_b')

    def __init__(self, r: float, g: float, b: float):
        self._init_attr('_r', _clamp_channel(r))
        self._init_attr('_g', _clamp_channel(g))
        self._init_attr('_b', _clamp_channel(b))

    @classmethod
    def from_rgb(cls, rgb: Mapping[str, float]) -> 'ColorValue':
        """
        Create a color from an {'r', 'g', 'b'} mapping of 0-255 channels.

        Out-of-range channels are clamped rather than rejected.
        """
        return cls(rgb['r'], rgb['g'], rgb['b'])

    @classmethod
    def from_hex(cls, hex_str: str) -> Optional['ColorValue']:
        """
        Parse '#RGB' or '#RRGGBB' (the '#' is optional, case-insensitive).

        Returns:
            ColorValue, or None for anything else
        """
        if not isinstance(hex_str, str):
            return None

        match = HEX_RE.match(hex_str.strip())
        if not match:
            return None

        digits = match.group(1)
        if len(digits) == HEX_SHORT_LENGTH:
            digits = ''.join(c * 2 for c in digits)

        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @classmethod
    def from_name(cls, name: str) -> Optional['ColorValue']:
        """Look up a named color (case-insensitive)."""
        if not isinstance(name, str):
            return None
        channels = NAMED_COLORS.get(name.strip().lower())
        return cls(*channels) if channels else None

    @classmethod
    def from_rgb_string(cls, text: str) -> Optional['ColorValue']:
        """
        Parse 'rgb(r, g, b)' or 'rgba(r, g, b, a)'.

        The alpha channel is ignored. A channel outside [0, 255] rejects
        the whole literal.
        """
        if not isinstance(text, str):
            return None

        match = RGB_FUNCTION_RE.match(text.strip())
        if not match:
            return None

        channels = [int(match.group(i)) for i in range(1, 4)]
        if any(channel > RGB_MAX_VALUE for channel in channels):
            logger.debug(f"rgb() channel out of range: {text!r}")
            return None

        return cls(*channels)

    @classmethod
    def parse(cls, text: str) -> Optional['ColorValue']:
        """
        Parse a CSS color string.

        Tries, in order: named colors, hex (#RGB/#RRGGBB, '#' optional),
        rgb()/rgba().

        Args:
            text: Raw color value

        Returns:
            ColorValue, or None if the color is not recognized
        """
        if not isinstance(text, str) or not text.strip():
            return None

        color = cls.from_name(text) or cls.from_hex(text) or cls.from_rgb_string(text)
        if color is None:
            logger.debug(f"Unrecognized color value: {text!r}")
        return color

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> 'ColorValue':
        """
        Create a color from HSL.

        Args:
            h: Hue in degrees (0-360)
            s: Saturation in percent (0-100)
            l: Lightness in percent (0-100)
        """
        hue = (h % 360) / 360
        saturation = max(0, min(100, s)) / 100
        lightness = max(0, min(100, l)) / 100

        if saturation == 0:
            r = g = b = lightness
        else:
            if lightness < 0.5:
                q = lightness * (1 + saturation)
            else:
                q = lightness + saturation - lightness * saturation
            p = 2 * lightness - q
            r = _hue_to_rgb(p, q, hue + 1 / 3)
            g = _hue_to_rgb(p, q, hue)
            b = _hue_to_rgb(p, q, hue - 1 / 3)

        return cls(r * RGB_MAX_VALUE, g * RGB_MAX_VALUE, b * RGB_MAX_VALUE)

    @property
    def r(self) -> int:
        return self._r

    @property
    def g(self) -> int:
        return self._g

    @property
    def b(self) -> int:
        return self._b

    def to_rgb(self) -> Dict[str, int]:
        return {'r': self._r, 'g': self._g, 'b': self._b}

    def to_hex(self) -> str:
        """Return the lowercase 6-digit '#rrggbb' form."""
        return f"#{self._r:02x}{self._g:02x}{self._b:02x}"

    def to_rgb_string(self) -> str:
        return f"rgb({self._r}, {self._g}, {self._b})"

    def to_figma_rgb(self) -> Dict[str, float]:
        """
        Convert to the node model's float color space.

        Returns:
            {'r', 'g', 'b'} with each channel in [0, 1]
        """
        return {
            'r': self._r / RGB_MAX_VALUE,
            'g': self._g / RGB_MAX_VALUE,
            'b': self._b / RGB_MAX_VALUE,
        }

    def to_hsl(self) -> Tuple[int, int, int]:
        """
        Convert to HSL.

        Returns:
            (hue 0-360, saturation 0-100, lightness 0-100), rounded
        """
        r, g, b = (c / RGB_MAX_VALUE for c in (self._r, self._g, self._b))
        high = max(r, g, b)
        low = min(r, g, b)
        delta = high - low
        lightness = (high + low) / 2

        hue = 0.0
        saturation = 0.0
        if delta != 0:
            saturation = delta / (1 - abs(2 * lightness - 1))
            if high == r:
                hue = ((g - b) / delta + (6 if g < b else 0)) / 6
            elif high == g:
                hue = ((b - r) / delta + 2) / 6
            else:
                hue = ((r - g) / delta + 4) / 6

        return round(hue * 360), round(saturation * 100), round(lightness * 100)

    def lighten(self, amount: float) -> 'ColorValue':
        """Raise HSL lightness by amount percentage points."""
        h, s, l = self.to_hsl()
        return ColorValue.from_hsl(h, s, min(100, l + amount))

    def darken(self, amount: float) -> 'ColorValue':
        """Lower HSL lightness by amount percentage points."""
        h, s, l = self.to_hsl()
        return ColorValue.from_hsl(h, s, max(0, l - amount))

    def mix(self, other: 'ColorValue', weight: float = 0.5) -> 'ColorValue':
        """
        Blend with another color.

        Args:
            other: Color to blend towards
            weight: Share of other in the result (0-1)
        """
        w = max(0.0, min(1.0, weight))
        return ColorValue(
            self._r * (1 - w) + other._r * w,
            self._g * (1 - w) + other._g * w,
            self._b * (1 - w) + other._b * w,
        )

    def invert(self) -> 'ColorValue':
        return ColorValue(RGB_MAX_VALUE - self._r, RGB_MAX_VALUE - self._g, RGB_MAX_VALUE - self._b)

    def grayscale(self) -> 'ColorValue':
        gray = self._r * LUMA_RED + self._g * LUMA_GREEN + self._b * LUMA_BLUE
        return ColorValue(gray, gray, gray)

    def is_black(self) -> bool:
        return self._r == 0 and self._g == 0 and self._b == 0

    def is_white(self) -> bool:
        return self._r == RGB_MAX_VALUE and self._g == RGB_MAX_VALUE and self._b == RGB_MAX_VALUE

    def relative_luminance(self) -> float:
        """WCAG 2 relative luminance in [0, 1]."""
        def linear(channel: int) -> float:
            c = channel / RGB_MAX_VALUE
            if c <= WCAG_LINEAR_THRESHOLD:
                return c / 12.92
            return ((c + 0.055) / 1.055) ** 2.4

        return 0.2126 * linear(self._r) + 0.7152 * linear(self._g) + 0.0722 * linear(self._b)

    def contrast_ratio(self, other: 'ColorValue') -> float:
        """WCAG contrast ratio between two colors (1 to 21)."""
        lighter, darker = sorted((self.relative_luminance(), other.relative_luminance()), reverse=True)
        return (lighter + WCAG_CONTRAST_OFFSET) / (darker + WCAG_CONTRAST_OFFSET)

    def __str__(self):
        return self.to_hex()

    def __repr__(self):
        return f"ColorValue({self._r}, {self._g}, {self._b})"

    def __eq__(self, other):
        if not isinstance(other, ColorValue):
            return NotImplemented
        return self._r == other._r and self._g == other._g and self._b == other._b

    def __hash__(self):
        return hash((self._r, self._g, self._b))
