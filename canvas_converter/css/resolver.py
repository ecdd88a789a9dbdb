"""
CSS value resolver.
This module is the entry point element converters use to turn raw style
strings into pixels, percentage markers, colors and box edges.
"""

import logging
import math
from typing import Optional, Union

from .base import ImmutableValue
from .box import BoxEdges, split_shorthand
from .calc import CalcExpression, CalcSource
from .color import ColorValue
from .context import ConversionContext, resolve_context
from .length import LengthValue
from .percentage import PercentageValue
from .units import NON_NUMERIC_KEYWORDS

logger = logging.getLogger(__name__)

SizeResult = Union[float, PercentageValue]


def _finite(pixels: Optional[float], value: str) -> Optional[float]:
    if pixels is not None and not math.isfinite(pixels):
        logger.debug(f"Value does not resolve to a finite pixel size: {value!r}")
        return None
    return pixels


class ValueResolver(ImmutableValue):
    """
    Resolves raw CSS values under a fixed ConversionContext.

    Resolvers are immutable. Use with_context() to resolve under different
    viewport/font parameters; concurrent callers each hold their own
    resolver (or pass an explicit context to the module-level functions).
    """

    __slots__ = ('_context',)

    def __init__(self, context: Optional[ConversionContext] = None):
        """
        Initialize the resolver.

        Args:
            context: Viewport/font parameters (defaults when omitted)
        """
        self._init_attr('_context', resolve_context(context))

    @property
    def context(self) -> ConversionContext:
        return self._context

    def with_context(self, context: Optional[ConversionContext]) -> 'ValueResolver':
        """Return a resolver for another context (default context if None)."""
        return ValueResolver(context)

    def is_calc(self, value: str) -> bool:
        return CalcSource.is_valid(value)

    def parse_calc(self, value: str) -> Optional[float]:
        """
        Evaluate a calc() expression to pixels.

        Returns:
            Pixel value, or None if the string is not a supported calc()
        """
        expression = CalcExpression.parse(value) if self.is_calc(value) else None
        if expression is None:
            return None
        return _finite(expression.evaluate(self._context), value)

    def parse_size(self, value: Optional[str]) -> Optional[SizeResult]:
        """
        Resolve a size value (width, height, offsets, radius).

        Args:
            value: Raw value such as '100px', '50%', '2rem' or 'calc(100% - 40px)'

        Returns:
            Pixels as a number, a PercentageValue for percentages (and for
            the calc(<pct> - <length>) pattern, which keeps only the
            percentage), or None for keywords and unrecognized input
        """
        if not isinstance(value, str):
            return None

        stripped = value.strip()
        if not stripped:
            return None

        if self.is_calc(stripped):
            expression = CalcExpression.parse(stripped)
            if expression is None:
                return None
            if expression.is_percentage_minus_pixels():
                return PercentageValue(expression.left.value)
            return _finite(expression.evaluate(self._context), value)

        if stripped.endswith('%'):
            return PercentageValue.parse(stripped)

        if stripped.lower() in NON_NUMERIC_KEYWORDS:
            return None

        length = LengthValue.parse(stripped)
        if length is None:
            logger.debug(f"Unresolvable size value: {value!r}")
            return None
        return _finite(length.to_pixels(self._context), value)

    def resolve_pixels(self, value: Optional[str]) -> Optional[float]:
        """
        Resolve a value that must end up as plain pixels.

        calc() expressions are always evaluated (percentage terms count as
        0); bare percentages and keywords do not resolve.

        Returns:
            Pixel value, or None
        """
        if not isinstance(value, str):
            return None

        stripped = value.strip()
        if self.is_calc(stripped):
            return self.parse_calc(stripped)

        length = LengthValue.parse(stripped)
        if length is None:
            return None
        return _finite(length.to_pixels(self._context), value)

    def parse_padding(self, value: Optional[str]) -> Optional[BoxEdges]:
        """
        Resolve a padding shorthand.

        Args:
            value: One to four space-separated values

        Returns:
            BoxEdges in pixels (negative edges clamped to 0), or None if the
            value count is wrong or any component does not resolve. A
            percentage component has no reference box here, so its number
            is taken as pixels (10% gives a 10px edge).
        """
        if not isinstance(value, str) or not value.strip():
            return None

        parts = split_shorthand(value)
        if not 1 <= len(parts) <= 4:
            logger.debug(f"Box shorthand needs 1 to 4 values: {value!r}")
            return None

        edges = []
        for part in parts:
            pixels = self._shorthand_pixels(part)
            if pixels is None:
                logger.debug(f"Unresolvable box shorthand component {part!r} in {value!r}")
                return None
            edges.append(max(0, pixels))

        return BoxEdges.expand(edges)

    def _shorthand_pixels(self, part: str) -> Optional[float]:
        if part.endswith('%'):
            percentage = PercentageValue.parse(part)
            return percentage.value if percentage is not None else None
        return self.resolve_pixels(part)

    def parse_margin(self, value: Optional[str]) -> Optional[BoxEdges]:
        """Resolve a margin shorthand (same rules as padding)."""
        return self.parse_padding(value)

    def parse_spacing(self, value: Optional[str], fallback: float = 0) -> float:
        """
        Resolve a single spacing value (gap, one padding edge, ...).

        Args:
            value: Raw value, may be None
            fallback: Returned when the value is missing or does not resolve
                to pixels

        Returns:
            Pixel value clamped to >= 0, or fallback
        """
        pixels = self.resolve_pixels(value)
        if pixels is None:
            return fallback
        return max(0, pixels)

    def parse_color(self, value: Optional[str]) -> Optional[ColorValue]:
        return ColorValue.parse(value)

    def __repr__(self):
        return f"ValueResolver({self._context!r})"


def parse_size(value: Optional[str], context: Optional[ConversionContext] = None) -> Optional[SizeResult]:
    return ValueResolver(context).parse_size(value)


def parse_padding(value: Optional[str], context: Optional[ConversionContext] = None) -> Optional[BoxEdges]:
    return ValueResolver(context).parse_padding(value)


def parse_margin(value: Optional[str], context: Optional[ConversionContext] = None) -> Optional[BoxEdges]:
    return ValueResolver(context).parse_margin(value)


def parse_spacing(value: Optional[str], fallback: float = 0,
                  context: Optional[ConversionContext] = None) -> float:
    return ValueResolver(context).parse_spacing(value, fallback)


def parse_calc(value: str, context: Optional[ConversionContext] = None) -> Optional[float]:
    return ValueResolver(context).parse_calc(value)


def parse_color(value: Optional[str]) -> Optional[ColorValue]:
    return ColorValue.parse(value)


def is_calc(value: str) -> bool:
    return CalcSource.is_valid(value)
