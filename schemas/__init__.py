from .requests import ColorFilterRequest, ColorExtractRequest
from .responses import SuccessResponse, FilterListResponse

__all__ = ["ColorFilterRequest", "ColorExtractRequest", "SuccessResponse", "FilterListResponse"]
