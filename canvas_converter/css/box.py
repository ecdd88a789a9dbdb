"""
Box edge values for padding/margin shorthands.
"""

from typing import Dict, List, Optional, Sequence

import tinycss2

from .base import ImmutableValue


def split_shorthand(value: str) -> List[str]:
    """
    Split a shorthand value into its top-level components.

    Function tokens stay whole, so 'calc(1rem + 5px) 10px' yields
    ['calc(1rem + 5px)', '10px'].

    Args:
        value: Raw shorthand value

    Returns:
        List of component strings (empty for blank input)
    """
    tokens = tinycss2.parse_component_value_list(value, skip_comments=True)
    parts = []
    for token in tokens:
        if token.type == 'whitespace':
            continue
        parts.append(tinycss2.serialize([token]).strip())
    return parts


class BoxEdges(ImmutableValue):
    """The four resolved pixel edges of a box."""

    __slots__ = ('_top', '_right', '_bottom', '_left')

    def __init__(self, top: float, right: float, bottom: float, left: float):
        self._init_attr('_top', top)
        self._init_attr('_right', right)
        self._init_attr('_bottom', bottom)
        self._init_attr('_left', left)

    @classmethod
    def expand(cls, values: Sequence[float]) -> Optional['BoxEdges']:
        """
        Apply the CSS 1/2/3/4-value shorthand rule.

        1 value: all edges; 2: vertical, horizontal; 3: top, horizontal,
        bottom; 4: top, right, bottom, left.

        Returns:
            BoxEdges, or None for any other number of values
        """
        count = len(values)
        if count == 1:
            return cls(values[0], values[0], values[0], values[0])
        if count == 2:
            return cls(values[0], values[1], values[0], values[1])
        if count == 3:
            return cls(values[0], values[1], values[2], values[1])
        if count == 4:
            return cls(values[0], values[1], values[2], values[3])
        return None

    @classmethod
    def zero(cls) -> 'BoxEdges':
        return cls(0, 0, 0, 0)

    @property
    def top(self) -> float:
        return self._top

    @property
    def right(self) -> float:
        return self._right

    @property
    def bottom(self) -> float:
        return self._bottom

    @property
    def left(self) -> float:
        return self._left

    def replace(self, **edges: float) -> 'BoxEdges':
        """Return a copy with some edges replaced."""
        return BoxEdges(
            top=edges.get('top', self._top),
            right=edges.get('right', self._right),
            bottom=edges.get('bottom', self._bottom),
            left=edges.get('left', self._left),
        )

    def to_dict(self) -> Dict[str, float]:
        return {'top': self._top, 'right': self._right, 'bottom': self._bottom, 'left': self._left}

    def __repr__(self):
        return (f"BoxEdges(top={self._top}, right={self._right}, "
                f"bottom={self._bottom}, left={self._left})")

    def __eq__(self, other):
        if isinstance(other, dict):
            return self.to_dict() == other
        if not isinstance(other, BoxEdges):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash((self._top, self._right, self._bottom, self._left))
