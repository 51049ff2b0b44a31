"""
Template filters over color text: color_to_rgb, color_to_hex, color_to_hsl
and color_extract.

Every filter takes the input value, an ordered sequence of arguments and an
evaluation context, and returns canonical text or None when the input is not
a recognised color.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, MutableMapping, Optional, Sequence, Tuple

from .conversions import (
    hex_from_hsl,
    hex_from_rgb,
    hsl_from_hex,
    hsl_from_rgb,
    rgb_from_hex,
    rgb_from_hsl,
)
from .models import HexColor, HslColor, RgbColor, format_number

logger = logging.getLogger(__name__)

ColorFilter = Callable[..., Optional[str]]


def to_text(value: Any) -> str:
    """Coerce a filter input to text."""
    if value is None:
        return ""
    return str(value)


def color_to_rgb(value: Any, arguments: Sequence[Any] = (), context: Any = None) -> Optional[str]:
    """Convert hex or hsl text to rgb text."""
    text = to_text(value)
    hex_color = HexColor.try_parse(text)
    if hex_color is not None:
        return str(rgb_from_hex(hex_color))
    hsl_color = HslColor.try_parse(text)
    if hsl_color is not None:
        return str(rgb_from_hsl(hsl_color))
    return None


def color_to_hex(value: Any, arguments: Sequence[Any] = (), context: Any = None) -> Optional[str]:
    """Convert rgb or hsl text to hex text."""
    text = to_text(value)
    rgb_color = RgbColor.try_parse(text)
    if rgb_color is not None:
        return str(hex_from_rgb(rgb_color))
    hsl_color = HslColor.try_parse(text)
    if hsl_color is not None:
        return str(hex_from_hsl(hsl_color))
    return None


def color_to_hsl(value: Any, arguments: Sequence[Any] = (), context: Any = None) -> Optional[str]:
    """Convert hex or rgb text to hsl text."""
    text = to_text(value)
    hex_color = HexColor.try_parse(text)
    if hex_color is not None:
        return str(hsl_from_hex(hex_color))
    rgb_color = RgbColor.try_parse(text)
    if rgb_color is not None:
        return str(hsl_from_rgb(rgb_color))
    return None


# Channel extraction ----------------------------------------------

class Channel(str, Enum):
    ALPHA = "alpha"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    HUE = "hue"
    SATURATION = "saturation"
    LIGHTNESS = "lightness"


def percent(fraction: float) -> int:
    return int(round(fraction * 100.0))


CHANNEL_ACCESSORS: Dict[Channel, Callable[[RgbColor, HslColor], str]] = {
    Channel.ALPHA: lambda rgb, hsl: format_number(rgb.alpha),
    Channel.RED: lambda rgb, hsl: str(rgb.red),
    Channel.GREEN: lambda rgb, hsl: str(rgb.green),
    Channel.BLUE: lambda rgb, hsl: str(rgb.blue),
    Channel.HUE: lambda rgb, hsl: str(hsl.hue),
    Channel.SATURATION: lambda rgb, hsl: str(percent(hsl.saturation)),
    Channel.LIGHTNESS: lambda rgb, hsl: str(percent(hsl.lightness)),
}


def parse_any(text: str) -> Optional[Tuple[RgbColor, HslColor]]:
    """Parse hex, rgb or hsl text (in that order) into both rgb and hsl forms."""
    hex_color = HexColor.try_parse(text)
    if hex_color is not None:
        return rgb_from_hex(hex_color), hsl_from_hex(hex_color)
    rgb_color = RgbColor.try_parse(text)
    if rgb_color is not None:
        return rgb_color, hsl_from_rgb(rgb_color)
    hsl_color = HslColor.try_parse(text)
    if hsl_color is not None:
        return rgb_from_hsl(hsl_color), hsl_color
    return None


def color_extract(value: Any, arguments: Sequence[Any] = (), context: Any = None) -> Optional[str]:
    """Extract one named channel (red, green, blue, alpha, hue, saturation, lightness)."""
    colors = parse_any(to_text(value))
    if colors is None:
        return None

    name = arguments[0] if len(arguments) > 0 else ""
    if not isinstance(name, Channel):
        name = to_text(name)
    try:
        channel = Channel(name)
    except ValueError:
        logger.debug("Unknown color channel: %r", name)
        return None

    rgb, hsl = colors
    return CHANNEL_ACCESSORS[channel](rgb, hsl)


# Registration ---------------------------------------------------

COLOR_FILTERS: Dict[str, ColorFilter] = {
    "color_to_rgb": color_to_rgb,
    "color_to_hex": color_to_hex,
    "color_to_hsl": color_to_hsl,
    "color_extract": color_extract,
}


def with_color_filters(filters: MutableMapping[str, ColorFilter]) -> MutableMapping[str, ColorFilter]:
    """Add the color filters to a filter collection and return it."""
    filters.update(COLOR_FILTERS)
    return filters


def apply_color_filter(
    name: str, value: Any, arguments: Sequence[Any] = (), context: Any = None
) -> Optional[str]:
    """Look up a color filter by template name and run it. Unknown names raise KeyError."""
    return COLOR_FILTERS[name](value, arguments, context)
