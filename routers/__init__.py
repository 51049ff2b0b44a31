from .colorFilters import router as colorFilters_router

__all__ = ["colorFilters_router"]
