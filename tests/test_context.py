"""Tests for the conversion context."""

import pytest

from canvas_converter.css import DEFAULT_CONTEXT, ConversionContext, resolve_context
from canvas_converter.utils import Config


class TestConversionContext:
    """ConversionContext"""

    def test_defaults(self):
        context = ConversionContext()
        assert context.viewport_width == 1920
        assert context.viewport_height == 1080
        assert context.font_size == 16

    def test_custom_values(self):
        context = ConversionContext(viewport_width=1440, viewport_height=900, font_size=14)
        assert (context.viewport_width, context.viewport_height, context.font_size) == (1440, 900, 14)

    @pytest.mark.parametrize("kwargs", [
        {'viewport_width': 0},
        {'viewport_height': -100},
        {'font_size': float('inf')},
        {'font_size': float('nan')},
        {'viewport_width': '1920'},
        {'viewport_width': True},
        {'font_size': None},
    ])
    def test_rejects_invalid(self, kwargs):
        with pytest.raises(ValueError):
            ConversionContext(**kwargs)

    def test_immutable(self):
        context = ConversionContext()
        with pytest.raises(AttributeError):
            context.font_size = 20
        with pytest.raises(AttributeError):
            del context.font_size
        with pytest.raises(AttributeError):
            context.dpi = 96

    def test_replace(self):
        context = ConversionContext()
        changed = context.replace(font_size=20)
        assert changed.font_size == 20
        assert changed.viewport_width == 1920
        assert context.font_size == 16

    def test_replace_rejects_unknown_keys(self):
        with pytest.raises(ValueError):
            ConversionContext().replace(dpi=96)

    def test_equality(self):
        assert ConversionContext() == ConversionContext(1920, 1080, 16)
        assert ConversionContext() != ConversionContext(font_size=12)
        assert hash(ConversionContext()) == hash(ConversionContext())


class TestResolveContext:
    """DEFAULT_CONTEXT and resolve_context"""

    def test_none_resolves_to_default(self):
        assert resolve_context(None) is DEFAULT_CONTEXT
        assert DEFAULT_CONTEXT == ConversionContext()

    def test_explicit_context_is_kept(self):
        context = ConversionContext(font_size=10)
        assert resolve_context(context) is context


class TestContextFromConfig:
    """ConversionContext.from_config"""

    def test_defaults(self):
        assert ConversionContext.from_config(Config()) == ConversionContext()

    def test_overrides(self):
        config = Config()
        config.set('context.viewport_width', 1280)
        config.set('context.font_size', 18)
        context = ConversionContext.from_config(config)
        assert context == ConversionContext(viewport_width=1280, viewport_height=1080, font_size=18)

    def test_invalid_config_value(self):
        config = Config()
        config.set('context.font_size', -1)
        with pytest.raises(ValueError):
            ConversionContext.from_config(config)
