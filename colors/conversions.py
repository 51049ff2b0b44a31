"""
Conversions between HexColor, RgbColor and HslColor with RgbColor as the hub.

Each ordered pair has its own function so callers can see where precision is
lost: hex has no alpha channel, and hsl rounds hue to whole degrees and
saturation/lightness to two decimals.
"""

from .models import OPAQUE, HexColor, HslColor, RgbColor

ACHROMATIC_EPSILON = 0.00001


def hex_from_rgb(rgb: RgbColor) -> HexColor:
    """Convert RgbColor to long-form HexColor, dropping alpha."""
    def h(n: int) -> str:
        return format(n, "02X")

    return HexColor(red=h(rgb.red), green=h(rgb.green), blue=h(rgb.blue))


def rgb_from_hex(hex_color: HexColor) -> RgbColor:
    """Convert HexColor to an opaque RgbColor, expanding short form digits."""
    def cv(digits: str) -> int:
        if hex_color.is_short:
            digits = digits + digits
        return int(digits, 16)

    return RgbColor(
        red=cv(hex_color.red),
        green=cv(hex_color.green),
        blue=cv(hex_color.blue),
        alpha=OPAQUE,
    )


def hue_to_channel(p1: float, p2: float, hue: float) -> float:
    """Interpolate one channel across the six 60 degree sectors of the hue circle."""
    hue = hue % 360
    if hue < 60.0:
        return p1 + (p2 - p1) * hue / 60.0
    if hue < 180.0:
        return p2
    if hue < 240.0:
        return p1 + (p2 - p1) * (240.0 - hue) / 60.0
    return p1


def rgb_from_hsl(hsl: HslColor) -> RgbColor:
    """Convert HslColor to RgbColor, rounding each channel to the nearest integer."""
    h, s, l = hsl.hue, hsl.saturation, hsl.lightness
    if l <= 0.5:
        p2 = l * (1 + s)
    else:
        p2 = l + s - l * s
    p1 = 2.0 * l - p2

    if s == 0.0:
        r = g = b = l
    else:
        r = hue_to_channel(p1, p2, h + 120.0)
        g = hue_to_channel(p1, p2, h)
        b = hue_to_channel(p1, p2, h - 120.0)

    return RgbColor(
        red=int(round(r * 255.0)),
        green=int(round(g * 255.0)),
        blue=int(round(b * 255.0)),
        alpha=hsl.alpha,
    )


def hsl_from_rgb(rgb: RgbColor) -> HslColor:
    """Convert RgbColor to HslColor using the min/max/chroma method."""
    r, g, b = rgb.red / 255.0, rgb.green / 255.0, rgb.blue / 255.0
    max_val = max(r, g, b)
    min_val = min(r, g, b)
    diff = max_val - min_val
    l = (max_val + min_val) / 2.0

    if abs(diff) < ACHROMATIC_EPSILON:
        h = 0.0
        s = 0.0
    else:
        if l <= 0.5:
            s = diff / (max_val + min_val)
        else:
            s = diff / (2 - max_val - min_val)

        r_dist = (max_val - r) / diff
        g_dist = (max_val - g) / diff
        b_dist = (max_val - b) / diff

        if r == max_val:
            h = b_dist - g_dist
        elif g == max_val:
            h = 2 + r_dist - b_dist
        else:
            h = 4 + g_dist - r_dist

        h *= 60
        if h < 0:
            h += 360

    return HslColor(
        hue=int(round(h)),
        saturation=round(s, 2),
        lightness=round(l, 2),
        alpha=rgb.alpha,
    )


def hex_from_hsl(hsl: HslColor) -> HexColor:
    return hex_from_rgb(rgb_from_hsl(hsl))


def hsl_from_hex(hex_color: HexColor) -> HslColor:
    return hsl_from_rgb(rgb_from_hex(hex_color))
