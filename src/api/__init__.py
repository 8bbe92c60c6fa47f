"""API 엔드포인트 패키지 - export only."""

from .routes import health_router, page_router, search_router, get_cache_service, get_orchestrator, shutdown_cache_service

__all__ = ["health_router", "page_router", "search_router", "get_cache_service", "get_orchestrator", "shutdown_cache_service"]
