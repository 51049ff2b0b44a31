"""
HTTP endpoints for the color filters. Each filter is one POST operation so it
can also be mounted as an MCP tool.
"""

import logging
from typing import Optional

from fastapi import HTTPException, APIRouter

from colors import COLOR_FILTERS, apply_color_filter
from schemas.requests import (
    ColorExtractRequest,
    ColorFilterRequest,
)
from schemas.responses import FilterListResponse, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def filter_response(name: str, code: str, result: Optional[str]) -> SuccessResponse:
    """Wrap a filter result, turning "no value" into a 400."""
    if result is None:
        logger.info("%s produced no value for %r", name, code)
        raise HTTPException(status_code=400, detail=f"Unrecognised color code: {code!r}")
    return SuccessResponse(success=True, message=result)


@router.post("/color_to_rgb", response_model=SuccessResponse, operation_id="color_to_rgb", description="Convert a hex or hsl(a) color code to rgb(a)")
async def color_to_rgb(request: ColorFilterRequest):
    """Convert hex or hsl color text to rgb text."""
    return filter_response("color_to_rgb", request.code, apply_color_filter("color_to_rgb", request.code))


@router.post("/color_to_hex", response_model=SuccessResponse, operation_id="color_to_hex", description="Convert an rgb(a) or hsl(a) color code to hex")
async def color_to_hex(request: ColorFilterRequest):
    """Convert rgb or hsl color text to hex text."""
    return filter_response("color_to_hex", request.code, apply_color_filter("color_to_hex", request.code))


@router.post("/color_to_hsl", response_model=SuccessResponse, operation_id="color_to_hsl", description="Convert a hex or rgb(a) color code to hsl(a)")
async def color_to_hsl(request: ColorFilterRequest):
    """Convert hex or rgb color text to hsl text."""
    return filter_response("color_to_hsl", request.code, apply_color_filter("color_to_hsl", request.code))


@router.post("/color_extract", response_model=SuccessResponse, operation_id="color_extract", description="Extract a single channel from a hex, rgb(a) or hsl(a) color code")
async def color_extract(request: ColorExtractRequest):
    """Extract one channel from color text."""
    result = apply_color_filter("color_extract", request.code, [request.channel])
    return filter_response("color_extract", request.code, result)


@router.get("/filters", response_model=FilterListResponse, operation_id="list_color_filters", description="List the registered color filter names")
async def list_filters():
    """List the color filter names."""
    return FilterListResponse(filters=sorted(COLOR_FILTERS))
