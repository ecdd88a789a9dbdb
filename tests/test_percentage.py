"""Tests for CSS percentage values."""

import pytest

from canvas_converter.css import PercentageValue


class TestPercentageFrom:
    """PercentageValue.from_value"""

    def test_keeps_value(self):
        assert PercentageValue.from_value(50).value == 50

    def test_accepts_range_and_above(self):
        assert PercentageValue.from_value(0).value == 0
        assert PercentageValue.from_value(100).value == 100
        assert PercentageValue.from_value(150).value == 150

    def test_clamps_negative_to_zero(self):
        assert PercentageValue.from_value(-10).value == 0

    def test_unit_is_percent(self):
        assert PercentageValue(50).unit == '%'

    def test_rejects_nan(self):
        with pytest.raises(ValueError):
            PercentageValue(float('nan'))


class TestPercentageParse:
    """PercentageValue.parse"""

    def test_parses_percentages(self):
        assert PercentageValue.parse('75%').value == 75
        assert PercentageValue.parse('0%').value == 0
        assert PercentageValue.parse(' 33.33% ').value == pytest.approx(33.33)

    def test_negative_is_clamped(self):
        assert PercentageValue.parse('-20%').value == 0

    @pytest.mark.parametrize("text", ['auto', '100px', '100', 'invalid', '%', '50 %', ''])
    def test_rejects_non_percentages(self, text):
        assert PercentageValue.parse(text) is None


class TestPercentageConversions:
    """to_decimal / to_pixels"""

    @pytest.mark.parametrize("value", [0, 25, 50, 75, 100, 150, -10])
    def test_to_decimal(self, value):
        assert PercentageValue(value).to_decimal() == pytest.approx(max(value, 0) / 100)

    def test_to_pixels(self):
        assert PercentageValue(50).to_pixels(200) == 100
        assert PercentageValue(50).to_pixels(1000) == 500
        assert PercentageValue(150).to_pixels(100) == 150
        assert PercentageValue(0).to_pixels(100) == 0
        assert PercentageValue(33.33).to_pixels(300) == pytest.approx(99.99)


class TestPercentagePredicates:
    """is_zero / is_full"""

    def test_is_zero(self):
        assert PercentageValue(0).is_zero()
        assert not PercentageValue(1).is_zero()
        assert not PercentageValue(0.1).is_zero()

    def test_is_full(self):
        assert PercentageValue(100).is_full()
        assert not PercentageValue(99.9).is_full()
        assert not PercentageValue(100.1).is_full()
        assert not PercentageValue(50).is_full()


class TestPercentageStringAndEquality:
    """str(), to_dict() and equality"""

    def test_to_string(self):
        assert str(PercentageValue(0)) == '0%'
        assert str(PercentageValue(50)) == '50%'
        assert str(PercentageValue(33.33)) == '33.33%'

    @pytest.mark.parametrize("value", [50, 33.33, 1e-5, 2.5e-7, 1e20])
    def test_string_round_trip(self, value):
        percentage = PercentageValue(value)
        assert PercentageValue.parse(str(percentage)) == percentage

    def test_small_values_are_written_without_exponent(self):
        assert str(PercentageValue(1e-5)) == '0.00001%'
        assert PercentageValue.parse('1e-5%').value == 1e-5

    def test_to_dict(self):
        assert PercentageValue(100).to_dict() == {'value': 100, 'unit': '%'}

    def test_equality(self):
        assert PercentageValue(50) == PercentageValue(50)
        assert PercentageValue(50) != PercentageValue(75)
        assert PercentageValue(50) == {'value': 50, 'unit': '%'}
