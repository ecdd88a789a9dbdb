"""
Conversion context for CSS value resolution.
This module holds the viewport and font parameters that relative units
(rem, em, vw, vh, ...) are resolved against.
"""

import logging
import math
from typing import Any, Optional

from .base import ImmutableValue

logger = logging.getLogger(__name__)

DEFAULT_VIEWPORT_WIDTH = 1920
DEFAULT_VIEWPORT_HEIGHT = 1080
DEFAULT_FONT_SIZE = 16


class ConversionContext(ImmutableValue):
    """
    Immutable viewport/font parameters for a conversion session.

    A context is created once per conversion run (or per call) and passed
    explicitly to every resolution operation. Use replace() to derive a
    context with different parameters.
    """

    __slots__ = ('_viewport_width', '_viewport_height', '_font_size')

    def __init__(self,
                 viewport_width: float = DEFAULT_VIEWPORT_WIDTH,
                 viewport_height: float = DEFAULT_VIEWPORT_HEIGHT,
                 font_size: float = DEFAULT_FONT_SIZE):
        """
        Initialize a conversion context.

        Args:
            viewport_width: Viewport width in pixels
            viewport_height: Viewport height in pixels
            font_size: Base font size in pixels

        Raises:
            ValueError: If any dimension is not a finite positive number
        """
        self._init_attr('_viewport_width', self._check('viewport_width', viewport_width))
        self._init_attr('_viewport_height', self._check('viewport_height', viewport_height))
        self._init_attr('_font_size', self._check('font_size', font_size))

    @staticmethod
    def _check(name: str, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{name} must be a number, got {value!r}")
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"{name} must be a finite positive number, got {value!r}")
        return value

    @property
    def viewport_width(self) -> float:
        return self._viewport_width

    @property
    def viewport_height(self) -> float:
        return self._viewport_height

    @property
    def font_size(self) -> float:
        return self._font_size

    def replace(self, **changes: float) -> 'ConversionContext':
        """
        Create a new context with some parameters changed.

        Args:
            **changes: Any of viewport_width, viewport_height, font_size

        Returns:
            A new ConversionContext; this one is left untouched
        """
        unknown = set(changes) - {'viewport_width', 'viewport_height', 'font_size'}
        if unknown:
            raise ValueError(f"Unknown context parameters: {', '.join(sorted(unknown))}")

        return ConversionContext(
            viewport_width=changes.get('viewport_width', self._viewport_width),
            viewport_height=changes.get('viewport_height', self._viewport_height),
            font_size=changes.get('font_size', self._font_size),
        )

    @classmethod
    def from_config(cls, config) -> 'ConversionContext':
        """
        Build a context from the ``context.*`` keys of a Config.

        Args:
            config: canvas_converter.utils.config.Config instance

        Returns:
            ConversionContext with configured (or default) parameters
        """
        context = cls(
            viewport_width=config.get('context.viewport_width', DEFAULT_VIEWPORT_WIDTH),
            viewport_height=config.get('context.viewport_height', DEFAULT_VIEWPORT_HEIGHT),
            font_size=config.get('context.font_size', DEFAULT_FONT_SIZE),
        )
        logger.debug(f"Conversion context created from config: {context!r}")
        return context

    def __eq__(self, other):
        if not isinstance(other, ConversionContext):
            return NotImplemented
        return (self._viewport_width == other._viewport_width
                and self._viewport_height == other._viewport_height
                and self._font_size == other._font_size)

    def __hash__(self):
        return hash((self._viewport_width, self._viewport_height, self._font_size))

    def __repr__(self):
        return (f"ConversionContext(viewport_width={self._viewport_width}, "
                f"viewport_height={self._viewport_height}, font_size={self._font_size})")


DEFAULT_CONTEXT = ConversionContext()


def resolve_context(context: Optional[ConversionContext]) -> ConversionContext:
    """Return the given context, or the default context when it is None."""
    return context if context is not None else DEFAULT_CONTEXT
