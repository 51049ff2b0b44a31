"""
Validated color values for the three notations understood by the color filters.

Supported: hex (#rgb, #rrggbb), rgb/rgba functional, hsl/hsla functional.
Each model is frozen and validates its own fields; constructing one with
out-of-range values raises pydantic.ValidationError. Parsing never raises:
malformed text and out-of-range numbers both come back as None.
"""

import logging
import re
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

logger = logging.getLogger(__name__)

OPAQUE = 1.0

# Regular expression patterns
num = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)(?:[eE][+-]?\d+)?"
integer = r"[+-]?\d+"

NUM_RE = re.compile(f"^{num}$")
INT_RE = re.compile(f"^{integer}$")
SEPARATORS_RE = re.compile(r"[(, )]+")
HEX_DIGITS = "0123456789abcdefABCDEF"


def parse_int(token: str) -> Optional[int]:
    """Parse an integer token, None when it is not one."""
    if not INT_RE.match(token):
        return None
    return int(token)


def parse_float(token: str) -> Optional[float]:
    """Parse a decimal token, None when it is not one."""
    if not NUM_RE.match(token):
        return None
    return float(token)


def split_functional(value: str, prefixes: Tuple[str, ...]) -> Optional[List[str]]:
    """Split `name(a, b, c)` text into [name, a, b, c], None if the prefix or closing paren is missing."""
    if not value.startswith(prefixes) or not value.endswith(")"):
        return None
    return [token for token in SEPARATORS_RE.split(value) if token]


def is_hexadecimal(value: str) -> bool:
    return all(c in HEX_DIGITS for c in value)


# HEX -------------------------------------------------------------

class HexColor(BaseModel):
    """Three hexadecimal channels, all short form (1 digit) or all long form (2 digits)."""

    model_config = ConfigDict(frozen=True)

    red: str = Field(min_length=1, max_length=2, description="Red hex digits")
    green: str = Field(min_length=1, max_length=2, description="Green hex digits")
    blue: str = Field(min_length=1, max_length=2, description="Blue hex digits")

    @model_validator(mode="after")
    def check_digits(self) -> "HexColor":
        for name in ("red", "green", "blue"):
            if not is_hexadecimal(getattr(self, name)):
                raise ValueError(f"The {name} value is not hexadecimal")
        if not len(self.red) == len(self.green) == len(self.blue):
            raise ValueError("All channels must use the same number of digits")
        return self

    @property
    def is_short(self) -> bool:
        return len(self.red) == 1

    @classmethod
    def create(cls, red: str, green: str, blue: str) -> Optional["HexColor"]:
        """Build a HexColor, or None when the digits are invalid."""
        try:
            return cls(red=red, green=green, blue=blue)
        except ValidationError:
            return None

    @classmethod
    def try_parse(cls, value: Optional[str]) -> Optional["HexColor"]:
        """Parse `#rgb` or `#rrggbb`."""
        if not isinstance(value, str) or not value.startswith("#"):
            return None
        if len(value) == 4:
            color = cls.create(value[1], value[2], value[3])
        elif len(value) == 7:
            color = cls.create(value[1:3], value[3:5], value[5:7])
        else:
            color = None
        if color is None:
            logger.debug("Not a hex color: %r", value)
        return color

    def __str__(self) -> str:
        if self.is_short:
            return f"#{self.red * 2}{self.green * 2}{self.blue * 2}".lower()
        return f"#{self.red}{self.green}{self.blue}".lower()


# RGB -------------------------------------------------------------

class RgbColor(BaseModel):
    """8-bit red, green and blue with a fractional alpha."""

    model_config = ConfigDict(frozen=True)

    red: int = Field(ge=0, le=255, description="Red (0-255)")
    green: int = Field(ge=0, le=255, description="Green (0-255)")
    blue: int = Field(ge=0, le=255, description="Blue (0-255)")
    alpha: float = Field(default=OPAQUE, ge=0.0, le=1.0, description="Alpha (0-1)")

    @classmethod
    def create(cls, red: int, green: int, blue: int, alpha: float = OPAQUE) -> Optional["RgbColor"]:
        """Build an RgbColor, or None when a channel is out of range."""
        try:
            return cls(red=red, green=green, blue=blue, alpha=alpha)
        except ValidationError:
            return None

    @classmethod
    def try_parse(cls, value: Optional[str]) -> Optional["RgbColor"]:
        """Parse `rgb(r, g, b)` or `rgba(r, g, b, a)`."""
        if not isinstance(value, str):
            return None
        tokens = split_functional(value, ("rgb(", "rgba("))
        color = None
        if tokens is not None and len(tokens) in (4, 5):
            channels = [parse_int(t) for t in tokens[1:4]]
            alpha = parse_float(tokens[4]) if len(tokens) == 5 else OPAQUE
            if None not in channels and alpha is not None:
                color = cls.create(*channels, alpha=alpha)
        if color is None:
            logger.debug("Not an rgb color: %r", value)
        return color

    def __str__(self) -> str:
        if self.alpha == OPAQUE:
            return f"rgb({self.red}, {self.green}, {self.blue})"
        return f"rgba({self.red}, {self.green}, {self.blue}, {format_number(round1(self.alpha))})"


# HSL -------------------------------------------------------------

class HslColor(BaseModel):
    """Hue in whole degrees, saturation and lightness as fractions, plus alpha."""

    model_config = ConfigDict(frozen=True)

    hue: int = Field(ge=0, le=360, description="Hue (0-360)")
    saturation: float = Field(ge=0.0, le=1.0, description="Saturation (0-1)")
    lightness: float = Field(ge=0.0, le=1.0, description="Lightness (0-1)")
    alpha: float = Field(default=OPAQUE, ge=0.0, le=1.0, description="Alpha (0-1)")

    @classmethod
    def create(
        cls, hue: int, saturation: float, lightness: float, alpha: float = OPAQUE
    ) -> Optional["HslColor"]:
        """Build an HslColor, or None when a channel is out of range."""
        try:
            return cls(hue=hue, saturation=saturation, lightness=lightness, alpha=alpha)
        except ValidationError:
            return None

    @classmethod
    def try_parse(cls, value: Optional[str]) -> Optional["HslColor"]:
        """Parse `hsl(h, s%, l%)` or `hsla(h, s%, l%, a)`."""
        if not isinstance(value, str):
            return None
        tokens = split_functional(value, ("hsl(", "hsla("))
        color = None
        if (
            tokens is not None
            and len(tokens) in (4, 5)
            and tokens[2].endswith("%")
            and tokens[3].endswith("%")
        ):
            hue = parse_int(tokens[1])
            saturation = parse_int(tokens[2].rstrip("%"))
            lightness = parse_int(tokens[3].rstrip("%"))
            alpha = parse_float(tokens[4]) if len(tokens) == 5 else OPAQUE
            if None not in (hue, saturation, lightness, alpha):
                color = cls.create(hue, saturation / 100.0, lightness / 100.0, alpha)
        if color is None:
            logger.debug("Not an hsl color: %r", value)
        return color

    def __str__(self) -> str:
        s = format_number(self.saturation * 100.0)
        l = format_number(self.lightness * 100.0)
        if self.alpha == OPAQUE:
            return f"hsl({self.hue}, {s}%, {l}%)"
        return f"hsla({self.hue}, {s}%, {l}%, {format_number(round1(self.alpha))})"


# Formatting helpers ---------------------------------------------

def round1(x: float) -> float:
    """Round to 1 decimal place."""
    return round(x * 10) / 10


def format_number(x: float) -> str:
    """Render a number without a trailing `.0` and without float noise."""
    x = round(x, 10)
    if x == int(x):
        return str(int(x))
    return repr(x)
