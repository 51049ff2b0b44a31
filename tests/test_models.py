"""Tests for colors.models: parsing, validation and canonical text."""

import pytest
from pydantic import ValidationError

from colors.models import HexColor, HslColor, RgbColor, format_number


class TestHexColor:
    def test_short_form(self):
        color = HexColor.try_parse('#abc')
        assert color == HexColor(red='a', green='b', blue='c')
        assert color.is_short

    def test_long_form(self):
        color = HexColor.try_parse('#AABBCC')
        assert color == HexColor(red='AA', green='BB', blue='CC')
        assert not color.is_short

    def test_text_is_lowercase(self):
        assert str(HexColor.try_parse('#0A141E')) == '#0a141e'

    def test_short_form_text_is_expanded(self):
        assert str(HexColor(red='a', green='b', blue='c')) == '#aabbcc'
        assert str(HexColor.try_parse('#F0A')) == '#ff00aa'

    @pytest.mark.parametrize('text', ['', '#', 'abc', '#ab', '#abcd', '#abcdef0', '#ggg', '#12345z', 'aabbcc'])
    def test_non_match(self, text):
        assert HexColor.try_parse(text) is None

    def test_none_is_non_match(self):
        assert HexColor.try_parse(None) is None

    def test_mixed_digit_counts_rejected(self):
        with pytest.raises(ValidationError):
            HexColor(red='a', green='bb', blue='c')

    def test_non_hex_rejected(self):
        with pytest.raises(ValidationError):
            HexColor(red='zz', green='00', blue='00')

    def test_create_returns_none_on_invalid(self):
        assert HexColor.create('x', 'y', 'z') is None
        assert HexColor.create('f', 'f', 'f') == HexColor(red='f', green='f', blue='f')


class TestRgbColor:
    def test_opaque(self):
        color = RgbColor.try_parse('rgb(10, 20, 30)')
        assert color == RgbColor(red=10, green=20, blue=30)
        assert color.alpha == 1.0

    def test_translucent(self):
        assert RgbColor.try_parse('rgba(10, 20, 30, 0.5)') == RgbColor(red=10, green=20, blue=30, alpha=0.5)

    def test_without_spaces(self):
        assert RgbColor.try_parse('rgb(10,20,30)') == RgbColor(red=10, green=20, blue=30)

    @pytest.mark.parametrize('text', [
        'rgb(10, 20)',
        'rgb(10, 20, 30, 0.5, 1)',
        'rgb(10, 20, 30',
        'rgb(a, 20, 30)',
        'rgb(1.5, 20, 30)',
        'rgba(10, 20, 30, half)',
        'RGB(10, 20, 30)',
        'hsl(10, 20%, 30%)',
        'not-a-color',
    ])
    def test_non_match(self, text):
        assert RgbColor.try_parse(text) is None

    @pytest.mark.parametrize('text', ['rgb(256, 0, 0)', 'rgb(-1, 0, 0)', 'rgba(0,0,0,1.5)', 'rgba(0, 0, 0, -0.1)'])
    def test_out_of_range_is_non_match(self, text):
        assert RgbColor.try_parse(text) is None

    def test_out_of_range_construction_raises(self):
        with pytest.raises(ValidationError):
            RgbColor(red=256, green=0, blue=0)
        with pytest.raises(ValidationError):
            RgbColor(red=0, green=0, blue=0, alpha=1.5)

    def test_create_returns_none_on_invalid(self):
        assert RgbColor.create(999, 0, 0) is None

    def test_frozen(self):
        color = RgbColor(red=1, green=2, blue=3)
        with pytest.raises(ValidationError):
            color.red = 4

    def test_equal_fields_are_equal(self):
        assert RgbColor(red=1, green=2, blue=3) == RgbColor(red=1, green=2, blue=3, alpha=1.0)
        assert hash(RgbColor(red=1, green=2, blue=3)) == hash(RgbColor(red=1, green=2, blue=3))

    def test_text(self):
        assert str(RgbColor(red=1, green=2, blue=3)) == 'rgb(1, 2, 3)'
        assert str(RgbColor(red=1, green=2, blue=3, alpha=0.5)) == 'rgba(1, 2, 3, 0.5)'

    def test_alpha_rounded_to_one_decimal(self):
        assert str(RgbColor(red=1, green=2, blue=3, alpha=0.36)) == 'rgba(1, 2, 3, 0.4)'
        assert str(RgbColor(red=1, green=2, blue=3, alpha=0.97)) == 'rgba(1, 2, 3, 1)'

    def test_alpha_halves(self):
        assert str(RgbColor(red=0, green=0, blue=0, alpha=0.15)) == 'rgba(0, 0, 0, 0.2)'
        assert str(RgbColor(red=0, green=0, blue=0, alpha=0.45)) == 'rgba(0, 0, 0, 0.4)'

    def test_nearly_opaque_text_reparses_as_opaque(self):
        text = str(RgbColor(red=1, green=2, blue=3, alpha=0.97))
        assert text == 'rgba(1, 2, 3, 1)'
        reparsed = RgbColor.try_parse(text)
        assert reparsed == RgbColor(red=1, green=2, blue=3)
        assert str(reparsed) == 'rgb(1, 2, 3)'


class TestHslColor:
    def test_opaque(self):
        assert HslColor.try_parse('hsl(120, 50%, 50%)') == HslColor(hue=120, saturation=0.5, lightness=0.5)

    def test_translucent(self):
        color = HslColor.try_parse('hsla(120, 50%, 25%, 0.3)')
        assert color == HslColor(hue=120, saturation=0.5, lightness=0.25, alpha=0.3)

    @pytest.mark.parametrize('text', [
        'hsl(120, 50, 50%)',
        'hsl(120, 50%, 50)',
        'hsl(120, 50%)',
        'hsl(1.5, 50%, 50%)',
        'hsl(120, 50.5%, 50%)',
        'hsla(120, 50%, 50%, x)',
        'hsl(120, 50%, 50%',
        'rgb(1, 2, 3)',
    ])
    def test_non_match(self, text):
        assert HslColor.try_parse(text) is None

    @pytest.mark.parametrize('text', ['hsl(361, 10%, 10%)', 'hsl(10, 101%, 10%)', 'hsl(10, 10%, 101%)', 'hsla(10, 10%, 10%, 2)'])
    def test_out_of_range_is_non_match(self, text):
        assert HslColor.try_parse(text) is None

    def test_out_of_range_construction_raises(self):
        with pytest.raises(ValidationError):
            HslColor(hue=361, saturation=0.1, lightness=0.1)

    def test_text(self):
        assert str(HslColor(hue=120, saturation=0.5, lightness=0.5)) == 'hsl(120, 50%, 50%)'
        assert str(HslColor(hue=120, saturation=0.29, lightness=0.555, alpha=0.5)) == 'hsla(120, 29%, 55.5%, 0.5)'


@pytest.mark.parametrize('cls, text', [
    (RgbColor, 'rgb(10, 20, 30)'),
    (RgbColor, 'rgba(10, 20, 30, 0.5)'),
    (HexColor, '#0a141e'),
    (HslColor, 'hsl(210, 25%, 73%)'),
    (HslColor, 'hsla(120, 50%, 50%, 0.3)'),
])
def test_canonical_text_is_idempotent(cls, text):
    once = str(cls.try_parse(text))
    assert once == text
    assert str(cls.try_parse(once)) == once


def test_format_number():
    assert format_number(50.0) == '50'
    assert format_number(0.29 * 100) == '29'
    assert format_number(55.5) == '55.5'
    assert format_number(1.0) == '1'
