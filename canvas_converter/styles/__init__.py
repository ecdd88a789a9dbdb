"""
Inline style handling for element converters.
"""

from .declarations import BorderStyle, StyleDeclarations, parse_border

__all__ = ['BorderStyle', 'StyleDeclarations', 'parse_border']
