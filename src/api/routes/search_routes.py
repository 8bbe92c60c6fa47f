"""Search Routes (Engine Layer)

HTTP Layer가 Engine Layer로 요청을 위임하는 단순한 Translator 역할만 수행합니다.

Example:
    curl "http://127.0.0.1:8080/search?q=sweden&page=1"
    curl "http://127.0.0.1:8080/search?q=sweden"
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from src.core.config import settings
from src.core.logging import logger
from src.engine import CacheAdapter, SearchOrchestrator, SearchRequest
from src.rendering import get_renderer
from src.services.impl.cache_service import CacheService
from src.upstream import get_aggregator

router = APIRouter(tags=["search"])

# 싱글톤 서비스
_cache_service: Optional[CacheService] = None
_orchestrator: Optional[SearchOrchestrator] = None


def get_cache_service() -> CacheService:
    """CacheService 싱글톤"""
    global _cache_service
    if _cache_service is None:
        _cache_service = CacheService()
    return _cache_service


async def shutdown_cache_service() -> None:
    """생성된 CacheService가 있으면 커넥션 풀 정리"""
    global _cache_service
    if _cache_service is not None:
        await _cache_service.close()
        _cache_service = None


def get_orchestrator(
    cache_service: CacheService = Depends(get_cache_service),
) -> SearchOrchestrator:
    """SearchOrchestrator 싱글톤

    Engine Layer의 진입점을 제공합니다.
    """
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = SearchOrchestrator(
            settings=settings,
            cache_service=CacheAdapter(cache_service),
            aggregator=get_aggregator(settings),
            renderer=get_renderer(),
        )
    return _orchestrator


def raw_request_uri(request: Request) -> str:
    """수신한 그대로의 경로 + 쿼리 스트링"""
    query_string = request.url.query
    if query_string:
        return f"{request.url.path}?{query_string}"
    return request.url.path


@router.get("/search", response_class=HTMLResponse)
async def search(
    request: Request,
    q: Optional[str] = Query(None),
    page: Optional[int] = Query(None, ge=0),
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
) -> Response:
    """메타 검색 페이지

    Flow:
        1. 쿼리 파라미터/쿠키 수집
        2. Engine에 위임 (Cache → Aggregation)
        3. 결과를 HTTP Response로 변환

    실패는 예외로 전파되어 app의 예외 핸들러가 에러 응답으로 변환합니다.
    """
    search_request = SearchRequest(
        query=q,
        page=page,
        raw_uri=raw_request_uri(request),
        engine_cookie=request.cookies.get(settings.preference_cookie_name),
    )

    outcome = await orchestrator.search(search_request)

    if outcome.is_redirect:
        return RedirectResponse(url=outcome.location or "/", status_code=302)

    logger.debug(
        f"[API] search served: status={outcome.status.value}, elapsed_ms={outcome.elapsed_ms:.1f}"
    )
    return HTMLResponse(content=outcome.body or "", status_code=200)
