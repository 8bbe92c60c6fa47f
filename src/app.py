"""FastAPI 앱 팩토리"""
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from src.core.config import settings
from src.core.exceptions import MetaSearchException, RenderException
from src.core.logging import logger
from src.api import health_router, page_router, search_router, shutdown_cache_service
from src.api.routes.page_routes import PUBLIC_DIR
from src.rendering import get_renderer
from src.schemas.search_schema import ErrorResponse
from src.upstream import shutdown_shared_http_client


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info(
        f"Starting application on http://{settings.binding_ip_addr}:{settings.port} "
        f"(engines={settings.upstream_search_engines})"
    )
    yield
    logger.info("Shutting down application...")
    await shutdown_shared_http_client()
    await shutdown_cache_service()


async def meta_search_exception_handler(request: Request, exc: MetaSearchException) -> JSONResponse:
    """요청 단위 치명적 실패 → 에러 응답 (부분 응답 없음)"""
    logger.error(f"[API] Request failed: path={request.url.path}, error={exc}")
    body = ErrorResponse(error_code=exc.error_code, message=exc.message)
    return JSONResponse(status_code=500, content=body.model_dump())


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """404는 렌더링된 페이지로, 그 외 HTTP 예외는 기본 처리"""
    if exc.status_code != 404:
        return await http_exception_handler(request, exc)

    try:
        page_content = get_renderer().render("404", settings.style.model_dump())
    except RenderException:
        return await http_exception_handler(request, exc)
    return HTMLResponse(content=page_content, status_code=404)


def create_app() -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan
    )

    app.add_exception_handler(MetaSearchException, meta_search_exception_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(page_router)
    app.include_router(search_router)

    # 테마/색상 CSS
    app.mount("/static", StaticFiles(directory=str(PUBLIC_DIR / "static")), name="static")

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
