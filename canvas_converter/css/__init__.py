"""
CSS value engine.
This package resolves raw CSS values (lengths, percentages, colors,
calc() expressions and box shorthands) into numbers and colors for the
canvas node model.
"""

from .context import ConversionContext, DEFAULT_CONTEXT, resolve_context
from .units import LengthUnit
from .length import LengthValue
from .percentage import PercentageValue
from .color import ColorValue, NAMED_COLORS
from .calc import CalcExpression, CalcOperator, CalcSource, CalcTerm
from .box import BoxEdges, split_shorthand
from .resolver import (
    ValueResolver,
    is_calc,
    parse_calc,
    parse_color,
    parse_margin,
    parse_padding,
    parse_size,
    parse_spacing,
)

__all__ = [
    'ConversionContext', 'DEFAULT_CONTEXT', 'resolve_context',
    'LengthUnit', 'LengthValue', 'PercentageValue',
    'ColorValue', 'NAMED_COLORS',
    'CalcExpression', 'CalcOperator', 'CalcSource', 'CalcTerm',
    'BoxEdges', 'split_shorthand',
    'ValueResolver', 'is_calc', 'parse_calc', 'parse_color',
    'parse_margin', 'parse_padding', 'parse_size', 'parse_spacing',
]
