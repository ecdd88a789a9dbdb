"""
CSS calc() expressions.

Only a single binary operation is supported: calc(<term> + <term>) or
calc(<term> - <term>), where each term is an unsigned number with an
optional unit (unitless terms are px). Multiplication, division, nested
parentheses, nested calc() and operator chains are rejected rather than
partially evaluated.
"""

import logging
import re
from enum import Enum
from typing import Optional, Union

from .base import ImmutableValue
from .context import ConversionContext, resolve_context
from .length import LengthValue
from .units import PERCENT_UNIT, UNSIGNED_NUMBER_PATTERN, LengthUnit, format_number, parse_number, unit_to_pixels

logger = logging.getLogger(__name__)

CALC_PREFIX = 'calc('
CALC_SUFFIX = ')'

CALC_UNITS = frozenset(unit.value for unit in LengthUnit) | {PERCENT_UNIT}

_TERM_PATTERN = r'(' + UNSIGNED_NUMBER_PATTERN + r')([a-zA-Z]+|%)?'
BINARY_CALC_RE = re.compile(r'^' + _TERM_PATTERN + r'\s*([+-])\s*' + _TERM_PATTERN + r'$')


class CalcOperator(Enum):
    """Operators supported inside calc()."""
    PLUS = "+"
    MINUS = "-"


class CalcTerm(ImmutableValue):
    """One operand of a calc() expression."""

    __slots__ = ('_value', '_unit')

    def __init__(self, value: float, unit: str = LengthUnit.PX.value):
        if isinstance(unit, LengthUnit):
            unit = unit.value
        if not isinstance(unit, str) or unit.lower() not in CALC_UNITS:
            raise ValueError(f"Unsupported calc() term unit: {unit!r}")
        self._init_attr('_value', value)
        self._init_attr('_unit', unit.lower())

    @property
    def value(self) -> float:
        return self._value

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def is_percentage(self) -> bool:
        return self._unit == PERCENT_UNIT

    def __str__(self):
        return f"{format_number(self._value)}{self._unit}"

    def __repr__(self):
        return f"CalcTerm({self._value!r}, {self._unit!r})"

    def __eq__(self, other):
        if not isinstance(other, CalcTerm):
            return NotImplemented
        return self._value == other._value and self._unit == other._unit

    def __hash__(self):
        return hash((self._value, self._unit))


class CalcSource(ImmutableValue):
    """
    A validated calc() string.

    Holds the whitespace-normalized content between the parentheses; str()
    gives back 'calc(<content>)'.
    """

    __slots__ = ('_content',)

    def __init__(self, content: str):
        self._init_attr('_content', content)

    @staticmethod
    def is_valid(text: str) -> bool:
        """
        Check whether a string has the calc(<content>) shape.

        Surrounding whitespace is tolerated; the content must not be empty.
        """
        if not isinstance(text, str):
            return False
        stripped = text.strip()
        if not (stripped.startswith(CALC_PREFIX) and stripped.endswith(CALC_SUFFIX)):
            return False
        return bool(stripped[len(CALC_PREFIX):-len(CALC_SUFFIX)].strip())

    @classmethod
    def from_string(cls, text: str) -> Optional['CalcSource']:
        """
        Wrap a calc() string.

        Returns:
            CalcSource, or None if the string is not a calc() expression
        """
        if not cls.is_valid(text):
            return None
        stripped = text.strip()
        content = ' '.join(stripped[len(CALC_PREFIX):-len(CALC_SUFFIX)].split())
        return cls(content)

    @property
    def content(self) -> str:
        return self._content

    def __str__(self):
        return f"{CALC_PREFIX}{self._content}{CALC_SUFFIX}"

    def __repr__(self):
        return f"CalcSource({str(self)!r})"

    def __eq__(self, other):
        if not isinstance(other, CalcSource):
            return NotImplemented
        return self._content == other._content

    def __hash__(self):
        return hash(self._content)


class CalcExpression(ImmutableValue):
    """A parsed calc(<term> <op> <term>) expression."""

    __slots__ = ('_left', '_operator', '_right')

    def __init__(self, left: CalcTerm, operator: Union[CalcOperator, str], right: CalcTerm):
        self._init_attr('_left', left)
        self._init_attr('_operator', CalcOperator(operator))
        self._init_attr('_right', right)

    @classmethod
    def parse(cls, source: Union[CalcSource, str]) -> Optional['CalcExpression']:
        """
        Parse a calc() expression into its two terms and operator.

        Args:
            source: CalcSource or raw 'calc(...)' string

        Returns:
            CalcExpression, or None if the body is not a single binary
            addition or subtraction
        """
        if not isinstance(source, CalcSource):
            source = CalcSource.from_string(source)
            if source is None:
                return None

        match = BINARY_CALC_RE.match(source.content)
        if not match:
            logger.debug(f"Unsupported calc() body: {source.content!r}")
            return None

        left_number, left_unit, operator, right_number, right_unit = match.groups()
        left_value = parse_number(left_number)
        right_value = parse_number(right_number)
        if left_value is None or right_value is None:
            return None

        left_unit = (left_unit or LengthUnit.PX.value).lower()
        right_unit = (right_unit or LengthUnit.PX.value).lower()
        if left_unit not in CALC_UNITS or right_unit not in CALC_UNITS:
            logger.debug(f"Unknown unit in calc() body: {source.content!r}")
            return None

        return cls(CalcTerm(left_value, left_unit), operator, CalcTerm(right_value, right_unit))

    @property
    def left(self) -> CalcTerm:
        return self._left

    @property
    def operator(self) -> CalcOperator:
        return self._operator

    @property
    def right(self) -> CalcTerm:
        return self._right

    @staticmethod
    def term_to_pixels(term: CalcTerm, context: Optional[ConversionContext] = None) -> float:
        """
        Convert one term to pixels.

        Percentage terms resolve to 0: no reference length is available, so
        calc(50% + 10px) evaluates to 10.
        """
        if term.is_percentage:
            return 0
        return unit_to_pixels(term.value, LengthUnit(term.unit), resolve_context(context))

    def evaluate(self, context: Optional[ConversionContext] = None) -> float:
        """
        Evaluate the expression to pixels.

        Args:
            context: Viewport/font parameters (defaults when omitted)
        """
        context = resolve_context(context)
        left = self.term_to_pixels(self._left, context)
        right = self.term_to_pixels(self._right, context)
        if self._operator == CalcOperator.PLUS:
            return left + right
        return left - right

    def to_length(self, context: Optional[ConversionContext] = None) -> LengthValue:
        return LengthValue.from_pixels(self.evaluate(context))

    def is_percentage_minus_pixels(self) -> bool:
        """
        Detect the calc(100% - 40px) pattern.

        True when the operator is '-', the left term is a percentage and the
        right term is a length.
        """
        return (self._operator == CalcOperator.MINUS
                and self._left.is_percentage
                and not self._right.is_percentage)

    def __str__(self):
        return f"{CALC_PREFIX}{self._left} {self._operator.value} {self._right}{CALC_SUFFIX}"

    def __repr__(self):
        return f"CalcExpression({self._left!r}, {self._operator.value!r}, {self._right!r})"

    def __eq__(self, other):
        if not isinstance(other, CalcExpression):
            return NotImplemented
        return (self._left == other._left
                and self._operator == other._operator
                and self._right == other._right)

    def __hash__(self):
        return hash((self._left, self._operator, self._right))
