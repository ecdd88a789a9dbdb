"""
Inline style declarations.
This module parses an element's style attribute and exposes the typed
property getters element converters use, backed by the CSS value resolver.
"""

import logging
import re
from collections.abc import Mapping
from typing import Dict, Iterator, Optional

import tinycss2

from ..css.box import BoxEdges, split_shorthand
from ..css.color import ColorValue
from ..css.resolver import SizeResult, ValueResolver

logger = logging.getLogger(__name__)

# Plain px or unitless numbers only, e.g. '100', '12.5px' (not '10rem', '50%', 'auto')
PX_OR_UNITLESS_RE = re.compile(r'^\d+(?:\.\d+)?(?:px)?$')
INTEGER_RE = re.compile(r'^[-+]?\d+$')

BORDER_STYLES = {'solid', 'dashed', 'dotted', 'double'}
DEFAULT_BORDER_WIDTH = 1
DEFAULT_BORDER_STYLE = 'solid'

BOX_SIDES = ('top', 'right', 'bottom', 'left')


class BorderStyle:
    """Resolved border shorthand."""

    def __init__(self, width: float = DEFAULT_BORDER_WIDTH, style: str = DEFAULT_BORDER_STYLE,
                 color: Optional[ColorValue] = None):
        self.width = width
        self.style = style
        self.color = color if color is not None else ColorValue(0, 0, 0)

    def __repr__(self):
        return f"BorderStyle(width={self.width}, style={self.style!r}, color={self.color!r})"

    def __eq__(self, other):
        if not isinstance(other, BorderStyle):
            return NotImplemented
        return (self.width, self.style, self.color) == (other.width, other.style, other.color)


class StyleDeclarations(Mapping):
    """
    Immutable map of inline style properties.

    Property names are lower-cased; values are kept as written (trimmed).
    Modifying operations return new instances.
    """

    def __init__(self, properties: Optional[Mapping[str, str]] = None,
                 resolver: Optional[ValueResolver] = None):
        """
        Initialize declarations.

        Args:
            properties: Property name to raw value mapping
            resolver: Value resolver for typed getters (default context when omitted)
        """
        self._properties: Dict[str, str] = {
            name.strip().lower(): value.strip()
            for name, value in (properties or {}).items()
            if name and name.strip() and value and value.strip()
        }
        self._resolver = resolver if resolver is not None else ValueResolver()

    @classmethod
    def parse(cls, style_attr: Optional[str], resolver: Optional[ValueResolver] = None) -> 'StyleDeclarations':
        """
        Parse an inline style attribute.

        Malformed declarations are skipped; later declarations win.

        Args:
            style_attr: Style attribute value, e.g. 'width: 50%; padding: 10px'
            resolver: Value resolver for typed getters

        Returns:
            StyleDeclarations (empty for blank input)
        """
        if not style_attr or not style_attr.strip():
            return cls({}, resolver)

        properties = {}
        for node in tinycss2.parse_declaration_list(style_attr, skip_comments=True, skip_whitespace=True):
            if node.type != 'declaration':
                logger.debug(f"Skipping malformed style declaration in {style_attr!r}")
                continue
            value = tinycss2.serialize(node.value).strip()
            if value:
                properties[node.lower_name] = value

        return cls(properties, resolver)

    @classmethod
    def from_dict(cls, properties: Mapping[str, str], resolver: Optional[ValueResolver] = None) -> 'StyleDeclarations':
        return cls(properties, resolver)

    @property
    def resolver(self) -> ValueResolver:
        return self._resolver

    def __getitem__(self, name: str) -> str:
        return self._properties[name.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._properties.get(name.lower(), default)

    def set(self, name: str, value: str) -> 'StyleDeclarations':
        properties = dict(self._properties)
        properties[name] = value
        return StyleDeclarations(properties, self._resolver)

    def remove(self, name: str) -> 'StyleDeclarations':
        properties = {key: value for key, value in self._properties.items() if key != name.lower()}
        return StyleDeclarations(properties, self._resolver)

    def merge(self, override: Mapping[str, str]) -> 'StyleDeclarations':
        """Return declarations with override's properties taking precedence."""
        properties = dict(self._properties)
        properties.update({name.lower(): value for name, value in override.items()})
        return StyleDeclarations(properties, self._resolver)

    def is_empty(self) -> bool:
        return not self._properties

    def __str__(self):
        return '; '.join(f"{name}: {value}" for name, value in self._properties.items())

    def __repr__(self):
        return f"StyleDeclarations({self._properties!r})"

    def __eq__(self, other):
        if isinstance(other, StyleDeclarations):
            return self._properties == other._properties
        if isinstance(other, Mapping):
            return self._properties == dict(other)
        return NotImplemented

    __hash__ = None

    # Sizes

    def _size(self, name: str) -> Optional[SizeResult]:
        return self._resolver.parse_size(self.get(name))

    @property
    def width(self) -> Optional[SizeResult]:
        return self._size('width')

    @property
    def height(self) -> Optional[SizeResult]:
        return self._size('height')

    @property
    def border_radius(self) -> Optional[SizeResult]:
        return self._size('border-radius')

    @property
    def top(self) -> Optional[SizeResult]:
        return self._size('top')

    @property
    def right(self) -> Optional[SizeResult]:
        return self._size('right')

    @property
    def bottom(self) -> Optional[SizeResult]:
        return self._size('bottom')

    @property
    def left(self) -> Optional[SizeResult]:
        return self._size('left')

    def _px_only(self, name: str) -> Optional[float]:
        value = self.get(name)
        if value is None or not PX_OR_UNITLESS_RE.match(value):
            return None
        size = self._resolver.parse_size(value)
        return size if isinstance(size, (int, float)) else None

    @property
    def min_width(self) -> Optional[float]:
        return self._px_only('min-width')

    @property
    def max_width(self) -> Optional[float]:
        return self._px_only('max-width')

    @property
    def min_height(self) -> Optional[float]:
        return self._px_only('min-height')

    @property
    def max_height(self) -> Optional[float]:
        return self._px_only('max-height')

    # Box edges

    def _box(self, prefix: str) -> Optional[BoxEdges]:
        """Resolve a box shorthand with its longhand overrides."""
        shorthand = self.get(prefix)
        box = self._resolver.parse_padding(shorthand) if shorthand else None

        overrides = {}
        for side in BOX_SIDES:
            longhand = self.get(f"{prefix}-{side}")
            if longhand is None:
                continue
            pixels = self._resolver.resolve_pixels(longhand)
            if pixels is not None:
                overrides[side] = max(0, pixels)

        if not overrides:
            return box
        return (box or BoxEdges.zero()).replace(**overrides)

    @property
    def padding(self) -> Optional[BoxEdges]:
        return self._box('padding')

    @property
    def margin(self) -> Optional[BoxEdges]:
        return self._box('margin')

    # Colors and decoration

    @property
    def color(self) -> Optional[ColorValue]:
        return self._resolver.parse_color(self.get('color'))

    @property
    def background_color(self) -> Optional[ColorValue]:
        value = self.get('background-color')
        if value is None:
            value = self.get('background')
        return self._resolver.parse_color(value)

    @property
    def border(self) -> Optional[BorderStyle]:
        value = self.get('border')
        return parse_border(value, self._resolver) if value else None

    @property
    def opacity(self) -> Optional[float]:
        """Opacity in [0, 1]; percentages are accepted."""
        value = self.get('opacity')
        if value is None:
            return None
        if value.endswith('%'):
            size = self._resolver.parse_size(value)
            return min(1.0, size.to_decimal()) if size is not None else None
        try:
            opacity = float(value)
        except ValueError:
            logger.debug(f"Invalid opacity: {value!r}")
            return None
        return max(0.0, min(1.0, opacity))

    @property
    def z_index(self) -> Optional[int]:
        value = self.get('z-index')
        if value is None or not INTEGER_RE.match(value):
            return None
        return int(value)


def parse_border(value: str, resolver: Optional[ValueResolver] = None) -> BorderStyle:
    """
    Parse a border shorthand such as '1px solid #ccc'.

    Components may come in any order; missing ones default to 1px, solid
    and black. Unrecognized components are ignored.

    Args:
        value: Raw border value
        resolver: Value resolver for the width component

    Returns:
        BorderStyle
    """
    resolver = resolver if resolver is not None else ValueResolver()
    border = BorderStyle()

    for part in split_shorthand(value):
        width = resolver.parse_size(part)
        if isinstance(width, (int, float)):
            border.width = width
            continue

        if part.lower() in BORDER_STYLES:
            border.style = part.lower()
            continue

        color = resolver.parse_color(part)
        if color is not None:
            border.color = color
        else:
            logger.debug(f"Ignoring unknown border component {part!r}")

    return border
