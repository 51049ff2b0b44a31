from pydantic import BaseModel, Field
from typing import Literal

class ColorFilterRequest(BaseModel):
    code: str = Field(..., description="The hex, rgb(a) or hsl(a) color code to convert")

class ColorExtractRequest(BaseModel):
    code: str = Field(..., description="The hex, rgb(a) or hsl(a) color code to read from")
    channel: Literal["alpha", "red", "green", "blue", "hue", "saturation", "lightness"] = Field(..., description="The color channel to extract")
