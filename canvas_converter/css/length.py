"""
CSS length values.
This module parses dimensioned scalars ('16px', '1.5rem', '50vw') and
converts them to pixels under a ConversionContext.
"""

import logging
import math
import re
from typing import Optional, Union

from .base import ImmutableValue
from .context import ConversionContext, resolve_context
from .units import (
    NON_NUMERIC_KEYWORDS,
    NUMBER_PATTERN,
    LengthUnit,
    format_number,
    parse_number,
    unit_to_pixels,
)

logger = logging.getLogger(__name__)

# A number immediately followed by an optional alphabetic unit
LENGTH_RE = re.compile(r'^(' + NUMBER_PATTERN + r')([a-zA-Z]*)$')


class LengthValue(ImmutableValue):
    """
    A single dimensioned CSS scalar.

    Instances are immutable; value is always finite and unit is always a
    LengthUnit.
    """

    __slots__ = ('_value', '_unit')

    def __init__(self, value: float, unit: Union[LengthUnit, str] = LengthUnit.PX):
        """
        Initialize a length.

        Args:
            value: Numeric part
            unit: LengthUnit or its CSS name

        Raises:
            ValueError: If value is not finite or the unit is unknown
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise ValueError(f"Length value must be a finite number, got {value!r}")

        if not isinstance(unit, LengthUnit):
            resolved = LengthUnit.lookup(unit) if isinstance(unit, str) else None
            if resolved is None:
                raise ValueError(f"Unknown length unit: {unit!r}")
            unit = resolved

        self._init_attr('_value', value)
        self._init_attr('_unit', unit)

    @classmethod
    def from_pixels(cls, pixels: float) -> 'LengthValue':
        """Create a px length."""
        return cls(pixels, LengthUnit.PX)

    @classmethod
    def parse(cls, text: str) -> Optional['LengthValue']:
        """
        Parse a CSS length string.

        Accepts a signed integer or decimal immediately followed by a known
        unit, or a bare number (treated as px). Percentages are not lengths
        and are rejected here, as are the keywords auto/inherit/initial/unset.

        Args:
            text: Raw value such as '16px', '-1.5rem' or '42'

        Returns:
            LengthValue, or None if the text is not a length
        """
        if not isinstance(text, str):
            return None

        stripped = text.strip()
        if not stripped or stripped.lower() in NON_NUMERIC_KEYWORDS:
            return None

        match = LENGTH_RE.match(stripped)
        if not match:
            logger.debug(f"Not a length value: {text!r}")
            return None

        number, unit_name = match.groups()
        value = parse_number(number)
        if value is None:
            return None

        if not unit_name:
            return cls(value, LengthUnit.PX)

        unit = LengthUnit.lookup(unit_name)
        if unit is None:
            logger.debug(f"Unknown length unit in {text!r}")
            return None

        length = cls(value, unit)
        if not math.isfinite(length.to_pixels()):
            logger.debug(f"Length overflows when converted to pixels: {text!r}")
            return None
        return length

    @property
    def value(self) -> float:
        return self._value

    @property
    def unit(self) -> LengthUnit:
        return self._unit

    def to_pixels(self, context: Optional[ConversionContext] = None) -> float:
        """
        Convert to pixels.

        Args:
            context: Viewport/font parameters (defaults when omitted)

        Returns:
            Length in CSS pixels
        """
        return unit_to_pixels(self._value, self._unit, resolve_context(context))

    def is_zero(self) -> bool:
        return self._value == 0

    def is_viewport_unit(self) -> bool:
        return self._unit.is_viewport

    def is_font_relative_unit(self) -> bool:
        return self._unit.is_font_relative

    def is_absolute_unit(self) -> bool:
        return self._unit.is_absolute

    def __str__(self):
        return f"{format_number(self._value)}{self._unit.value}"

    def __repr__(self):
        return f"LengthValue({self._value!r}, {self._unit.value!r})"

    def __eq__(self, other):
        # Exact comparison: 16px and 1rem are different lengths
        if not isinstance(other, LengthValue):
            return NotImplemented
        return self._value == other._value and self._unit == other._unit

    def __hash__(self):
        return hash((self._value, self._unit))
