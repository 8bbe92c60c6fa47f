"""헬스 체크 엔드포인트"""
from fastapi import APIRouter, Depends
from datetime import datetime

from src.schemas.search_schema import HealthResponse
from src.services.impl.cache_service import CacheService
from src.api.routes.search_routes import get_cache_service
from src.core.logging import logger
from src import __version__

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(cache_service: CacheService = Depends(get_cache_service)):
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - Redis 연결 상태 (실패해도 검색은 캐시 없이 동작하므로 degraded)
    """
    redis_ok = await cache_service.health_check()
    if not redis_ok:
        logger.warning("[HEALTH] Redis unreachable, search runs without cache")

    return HealthResponse(
        status="ok" if redis_ok else "degraded",
        timestamp=datetime.now(),
        version=__version__
    )
