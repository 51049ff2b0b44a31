"""
Color Filters MCP Server - FastAPI implementation
Provides endpoints for the color_to_rgb, color_to_hex, color_to_hsl and color_extract filters
"""

import logging
from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

from routers import colorFilters_router
from settings import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

app = FastAPI(
    title="Color Filters MCP Server",
    description="A FastAPI server for hex, rgb and hsl color filters",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

app.include_router(colorFilters_router)

if __name__ == "__main__":
    config = get_settings()
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    uvicorn.run(app, host=config.host, port=config.port)
