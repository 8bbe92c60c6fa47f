"""정적 성격의 페이지 엔드포인트 (index / about / settings / robots.txt)"""
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from src.core.config import settings
from src.rendering import TemplateRenderer, get_renderer

router = APIRouter(tags=["pages"])

PUBLIC_DIR = Path(__file__).resolve().parents[2] / "public"


def render_page(renderer: TemplateRenderer, template_name: str, status_code: int = 200) -> HTMLResponse:
    """설정된 스타일만으로 렌더링되는 페이지"""
    page_content = renderer.render(template_name, settings.style.model_dump())
    return HTMLResponse(content=page_content, status_code=status_code)


@router.get("/", response_class=HTMLResponse)
async def index(renderer: TemplateRenderer = Depends(get_renderer)):
    """메인 검색 페이지"""
    return render_page(renderer, "index")


@router.get("/about", response_class=HTMLResponse)
async def about(renderer: TemplateRenderer = Depends(get_renderer)):
    """소개 페이지"""
    return render_page(renderer, "about")


@router.get("/settings", response_class=HTMLResponse)
async def settings_page(renderer: TemplateRenderer = Depends(get_renderer)):
    """설정 페이지"""
    return render_page(renderer, "settings")


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots_data():
    """robots.txt"""
    page_content = (PUBLIC_DIR / "robots.txt").read_text(encoding="ascii")
    return PlainTextResponse(content=page_content, media_type="text/plain; charset=ascii")
