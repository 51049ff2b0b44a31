from .models import OPAQUE, HexColor, HslColor, RgbColor
from .conversions import (
    hex_from_hsl,
    hex_from_rgb,
    hsl_from_hex,
    hsl_from_rgb,
    rgb_from_hex,
    rgb_from_hsl,
)
from .filters import (
    COLOR_FILTERS,
    Channel,
    apply_color_filter,
    color_extract,
    color_to_hex,
    color_to_hsl,
    color_to_rgb,
    with_color_filters,
)

__all__ = [
    "OPAQUE",
    "HexColor",
    "RgbColor",
    "HslColor",
    "hex_from_rgb",
    "hex_from_hsl",
    "rgb_from_hex",
    "rgb_from_hsl",
    "hsl_from_rgb",
    "hsl_from_hex",
    "COLOR_FILTERS",
    "Channel",
    "apply_color_filter",
    "color_extract",
    "color_to_hex",
    "color_to_hsl",
    "color_to_rgb",
    "with_color_filters",
]
