"""
CSS unit constants and helpers shared by the value models.
"""

import math
from decimal import Decimal
from enum import Enum
from typing import Optional

from .context import ConversionContext

# Unsigned CSS number literal: "12", "1.5", ".5", "3.", "2e-3"
UNSIGNED_NUMBER_PATTERN = r'(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?'
NUMBER_PATTERN = r'[-+]?' + UNSIGNED_NUMBER_PATTERN

PERCENT_UNIT = '%'
PERCENTAGE_DIVISOR = 100

# CSS keywords that are meaningful elsewhere but have no numeric value
NON_NUMERIC_KEYWORDS = frozenset({'auto', 'inherit', 'initial', 'unset'})


class LengthUnit(Enum):
    """CSS length units."""
    PX = "px"
    PT = "pt"
    PC = "pc"
    IN = "in"
    CM = "cm"
    MM = "mm"
    EM = "em"
    REM = "rem"
    VW = "vw"
    VH = "vh"
    VMIN = "vmin"
    VMAX = "vmax"
    CH = "ch"
    EX = "ex"

    @classmethod
    def lookup(cls, unit: str) -> Optional['LengthUnit']:
        """
        Find a unit by its (case-insensitive) CSS name.

        Args:
            unit: Unit name such as 'px' or 'REM'

        Returns:
            The matching LengthUnit, or None if the name is unknown
        """
        try:
            return cls(unit.lower())
        except ValueError:
            return None

    @property
    def is_absolute(self) -> bool:
        return self in ABSOLUTE_TO_PIXELS

    @property
    def is_font_relative(self) -> bool:
        return self in (LengthUnit.EM, LengthUnit.REM, LengthUnit.CH, LengthUnit.EX)

    @property
    def is_viewport(self) -> bool:
        return self in (LengthUnit.VW, LengthUnit.VH, LengthUnit.VMIN, LengthUnit.VMAX)


# How many CSS pixels is one <unit>?
ABSOLUTE_TO_PIXELS = {
    LengthUnit.PX: 1,
    LengthUnit.PT: 96 / 72,
    LengthUnit.PC: 16,
    LengthUnit.IN: 96,
    LengthUnit.CM: 96 / 2.54,
    LengthUnit.MM: 96 / 25.4,
}

# ch and ex need font metrics; half an em is the usual fallback
HALF_EM_UNITS = (LengthUnit.CH, LengthUnit.EX)


def unit_to_pixels(value: float, unit: LengthUnit, context: ConversionContext) -> float:
    """
    Convert a dimensioned number to pixels.

    Args:
        value: Numeric part of the length
        unit: Unit of the length
        context: Viewport and font parameters

    Returns:
        The length in CSS pixels
    """
    if unit in ABSOLUTE_TO_PIXELS:
        return value * ABSOLUTE_TO_PIXELS[unit]
    if unit in (LengthUnit.EM, LengthUnit.REM):
        # No per-element font inheritance: em and rem both use the base font size
        return value * context.font_size
    if unit in HALF_EM_UNITS:
        return value * context.font_size / 2
    if unit == LengthUnit.VW:
        return value * context.viewport_width / PERCENTAGE_DIVISOR
    if unit == LengthUnit.VH:
        return value * context.viewport_height / PERCENTAGE_DIVISOR
    if unit == LengthUnit.VMIN:
        return value * min(context.viewport_width, context.viewport_height) / PERCENTAGE_DIVISOR
    if unit == LengthUnit.VMAX:
        return value * max(context.viewport_width, context.viewport_height) / PERCENTAGE_DIVISOR
    raise ValueError(f"Unsupported length unit: {unit!r}")


def parse_number(text: str) -> Optional[float]:
    """Convert a matched number literal to a finite float, or None."""
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def format_number(value: float) -> str:
    """
    Format a number the way it is written in CSS.

    Integral values lose their trailing '.0' so that 10.0 serializes as '10'.
    Output is always positional (0.00001, never 1e-05) and reads back to
    the same float.
    """
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), 'f')
