"""Tests for inline style declarations."""

import pytest

from canvas_converter.css import BoxEdges, ColorValue, ConversionContext, PercentageValue, ValueResolver
from canvas_converter.styles import BorderStyle, StyleDeclarations, parse_border


class TestStyleDeclarationsParse:
    """StyleDeclarations.parse"""

    def test_parses_declarations(self):
        style = StyleDeclarations.parse('width: 50%; padding: 10px 20px; color: red')
        assert dict(style) == {'width': '50%', 'padding': '10px 20px', 'color': 'red'}

    def test_names_are_lowercased(self):
        style = StyleDeclarations.parse('Background-Color: #FFF')
        assert style['background-color'] == '#FFF'
        assert style.get('BACKGROUND-COLOR') == '#FFF'

    def test_later_declarations_win(self):
        style = StyleDeclarations.parse('width: 10px; width: 20px')
        assert style['width'] == '20px'

    def test_skips_malformed(self):
        style = StyleDeclarations.parse('width 10px; height: 20px; : 3px')
        assert dict(style) == {'height': '20px'}

    def test_keeps_function_values(self):
        style = StyleDeclarations.parse('width: calc(100% - 40px); color: rgb(0, 0, 255);')
        assert style['width'] == 'calc(100% - 40px)'
        assert style.color == ColorValue(0, 0, 255)

    @pytest.mark.parametrize("text", [None, '', '   '])
    def test_blank(self, text):
        assert StyleDeclarations.parse(text).is_empty()


class TestStyleDeclarationsMapping:
    """Mapping behaviour and derived copies"""

    def test_mapping(self):
        style = StyleDeclarations.from_dict({'width': '10px', 'height': '20px'})
        assert len(style) == 2
        assert set(style) == {'width', 'height'}
        assert 'width' in style
        assert style.get('margin') is None

    def test_set_remove_merge_return_copies(self):
        style = StyleDeclarations.from_dict({'width': '10px'})
        assert style.set('height', '5px') == {'width': '10px', 'height': '5px'}
        assert style.remove('width').is_empty()
        assert style.merge({'width': '30px', 'color': 'red'}) == {'width': '30px', 'color': 'red'}
        assert style == {'width': '10px'}

    def test_empty_values_are_dropped(self):
        assert StyleDeclarations.from_dict({'width': '  ', 'height': '1px'}) == {'height': '1px'}

    def test_to_string(self):
        assert str(StyleDeclarations.from_dict({'width': '10px', 'color': 'red'})) == 'width: 10px; color: red'


class TestStyleDeclarationsSizes:
    """Size getters"""

    def test_sizes(self):
        style = StyleDeclarations.parse('width: 50%; height: 2rem; border-radius: 4px; top: calc(1rem + 4px)')
        assert style.width == PercentageValue(50)
        assert style.height == 32
        assert style.border_radius == 4
        assert style.top == 20
        assert style.left is None

    def test_calc_percentage_minus_length(self):
        style = StyleDeclarations.parse('width: calc(100% - 40px)')
        assert style.width == {'value': 100, 'unit': '%'}

    def test_uses_resolver_context(self):
        resolver = ValueResolver(ConversionContext(viewport_width=1000))
        style = StyleDeclarations.parse('width: 10vw', resolver)
        assert style.width == 100

    def test_keywords(self):
        style = StyleDeclarations.parse('width: auto; height: inherit')
        assert style.width is None
        assert style.height is None

    def test_px_only_constraints(self):
        style = StyleDeclarations.parse('min-width: 100; max-width: 12.5px; min-height: 2rem; max-height: 50%')
        assert style.min_width == 100
        assert style.max_width == 12.5
        assert style.min_height is None
        assert style.max_height is None


class TestStyleDeclarationsBox:
    """padding / margin getters"""

    def test_shorthand(self):
        assert StyleDeclarations.parse('padding: 10px 20px').padding == BoxEdges(10, 20, 10, 20)
        assert StyleDeclarations.parse('margin: 1px 2px 3px 4px').margin == BoxEdges(1, 2, 3, 4)

    def test_longhands_override_shorthand(self):
        style = StyleDeclarations.parse('padding: 10px; padding-left: 2rem')
        assert style.padding == BoxEdges(10, 10, 10, 32)

    def test_longhands_without_shorthand(self):
        style = StyleDeclarations.parse('margin-top: 5px; margin-bottom: -3px')
        assert style.margin == BoxEdges(5, 0, 0, 0)

    def test_missing(self):
        assert StyleDeclarations.parse('width: 10px').padding is None

    def test_invalid_shorthand(self):
        assert StyleDeclarations.parse('padding: auto 5px').padding is None

    def test_percentage_shorthand(self):
        assert StyleDeclarations.parse('padding: 10% 5px').padding == BoxEdges(10, 5, 10, 5)


class TestStyleDeclarationsDecoration:
    """color / background / border / opacity / z-index getters"""

    def test_colors(self):
        style = StyleDeclarations.parse('color: #333; background-color: white')
        assert style.color == ColorValue(51, 51, 51)
        assert style.background_color == ColorValue(255, 255, 255)

    def test_background_fallback(self):
        assert StyleDeclarations.parse('background: blue').background_color == ColorValue(0, 0, 255)
        assert StyleDeclarations.parse('background: url(a.png)').background_color is None

    def test_border(self):
        style = StyleDeclarations.parse('border: 2px dashed #ccc')
        assert style.border == BorderStyle(2, 'dashed', ColorValue(204, 204, 204))
        assert StyleDeclarations.parse('width: 1px').border is None

    @pytest.mark.parametrize("text, expected", [
        ('opacity: 0.5', 0.5),
        ('opacity: 50%', 0.5),
        ('opacity: 2', 1.0),
        ('opacity: -1', 0.0),
        ('opacity: 150%', 1.0),
        ('opacity: half', None),
        ('color: red', None),
    ])
    def test_opacity(self, text, expected):
        assert StyleDeclarations.parse(text).opacity == expected

    @pytest.mark.parametrize("text, expected", [
        ('z-index: 10', 10),
        ('z-index: -1', -1),
        ('z-index: auto', None),
        ('z-index: 1.5', None),
    ])
    def test_z_index(self, text, expected):
        assert StyleDeclarations.parse(text).z_index == expected


class TestParseBorder:
    """parse_border"""

    def test_defaults(self):
        assert parse_border('') == BorderStyle(1, 'solid', ColorValue(0, 0, 0))

    def test_any_order(self):
        assert parse_border('red dotted 3px') == BorderStyle(3, 'dotted', ColorValue(255, 0, 0))

    def test_partial(self):
        assert parse_border('dashed') == BorderStyle(1, 'dashed', ColorValue(0, 0, 0))
        assert parse_border('4px') == BorderStyle(4, 'solid', ColorValue(0, 0, 0))

    def test_rgb_color(self):
        assert parse_border('1px solid rgb(0, 128, 0)').color == ColorValue(0, 128, 0)

    def test_relative_width(self):
        assert parse_border('0.5rem solid').width == 8

    def test_unknown_components_ignored(self):
        assert parse_border('2px groovy blue') == BorderStyle(2, 'solid', ColorValue(0, 0, 255))
