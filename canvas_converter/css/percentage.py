"""
CSS percentage values.
"""

import logging
import math
import re
from typing import Dict, Optional, Union

from .base import ImmutableValue
from .units import NUMBER_PATTERN, PERCENT_UNIT, PERCENTAGE_DIVISOR, format_number, parse_number

logger = logging.getLogger(__name__)

PERCENTAGE_RE = re.compile(r'^(' + NUMBER_PATTERN + r')%$')


class PercentageValue(ImmutableValue):
    """
    A scalar relative to a reference length the caller supplies later.

    Negative inputs are clamped to 0; there is no upper bound (150% is legal).
    """

    __slots__ = ('_value',)

    def __init__(self, value: float):
        if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
            raise ValueError(f"Percentage value must be a number, got {value!r}")
        self._init_attr('_value', max(0, value))

    @classmethod
    def from_value(cls, value: float) -> 'PercentageValue':
        """Create a percentage, clamping negative values to 0."""
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> Optional['PercentageValue']:
        """
        Parse a '<number>%' string.

        Args:
            text: Raw value such as '50%' or '33.33%'

        Returns:
            PercentageValue, or None if the text is not a percentage
        """
        if not isinstance(text, str):
            return None

        match = PERCENTAGE_RE.match(text.strip())
        if not match:
            return None

        value = parse_number(match.group(1))
        if value is None:
            logger.debug(f"Percentage out of range: {text!r}")
            return None
        return cls(value)

    @property
    def value(self) -> float:
        return self._value

    @property
    def unit(self) -> str:
        return PERCENT_UNIT

    def to_pixels(self, reference_pixels: float) -> float:
        """
        Resolve against a reference length.

        Args:
            reference_pixels: The length 100% corresponds to

        Returns:
            value / 100 * reference_pixels
        """
        return self._value / PERCENTAGE_DIVISOR * reference_pixels

    def to_decimal(self) -> float:
        return self._value / PERCENTAGE_DIVISOR

    def is_zero(self) -> bool:
        return self._value == 0

    def is_full(self) -> bool:
        return self._value == PERCENTAGE_DIVISOR

    def to_dict(self) -> Dict[str, Union[float, str]]:
        """Return the {'value': v, 'unit': '%'} marker form."""
        return {'value': self._value, 'unit': PERCENT_UNIT}

    def __str__(self):
        return f"{format_number(self._value)}{PERCENT_UNIT}"

    def __repr__(self):
        return f"PercentageValue({self._value!r})"

    def __eq__(self, other):
        if isinstance(other, dict):
            return self.to_dict() == other
        if not isinstance(other, PercentageValue):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(('%', self._value))
