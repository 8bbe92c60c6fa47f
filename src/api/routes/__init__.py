"""API routes package."""

from .health_routes import router as health_router
from .page_routes import router as page_router
from .search_routes import router as search_router, get_cache_service, get_orchestrator, shutdown_cache_service

__all__ = ["health_router", "page_router", "search_router", "get_cache_service", "get_orchestrator", "shutdown_cache_service"]
