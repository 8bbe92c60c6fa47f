"""템플릿 렌더러 (Jinja2)

템플릿 이름과 데이터(dict)를 받아 HTML 문자열을 돌려줍니다.
정의되지 않은 변수 참조도 실패로 처리합니다(StrictUndefined).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from src.core.exceptions import RenderException
from src.core.logging import logger

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


class TemplateRenderer:
    def __init__(self, templates_dir: Optional[Path] = None) -> None:
        self.templates_dir = Path(templates_dir or TEMPLATES_DIR)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
        )

    def render(self, template_name: str, data: Mapping[str, Any]) -> str:
        """템플릿 렌더링

        Args:
            template_name: 확장자 없는 템플릿 이름 (예: "search")
            data: 템플릿 컨텍스트

        Raises:
            RenderException: 템플릿 없음/문법 오류/변수 누락
        """
        try:
            template = self.env.get_template(f"{template_name}.html")
            return template.render(**data)
        except TemplateError as e:
            logger.error(f"[RENDER] {template_name}: {type(e).__name__}: {e}")
            raise RenderException(template_name, f"{type(e).__name__}: {e}") from e


_renderer: Optional[TemplateRenderer] = None


def get_renderer() -> TemplateRenderer:
    """TemplateRenderer 싱글톤"""
    global _renderer
    if _renderer is None:
        _renderer = TemplateRenderer()
    return _renderer
