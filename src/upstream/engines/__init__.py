"""Upstream engines package.

ENGINE_CLASSES: 설정/쿠키에서 쓰는 엔진 이름 → 구현 클래스
"""

from typing import Dict, Optional, Type

from src.upstream.http_client import SharedHttpClient

from .base import UpstreamEngine
from .duckduckgo import DuckDuckGo
from .searx import Searx

ENGINE_CLASSES: Dict[str, Type[UpstreamEngine]] = {
    DuckDuckGo.name: DuckDuckGo,
    Searx.name: Searx,
}


def build_engine_registry(http_client: Optional[SharedHttpClient] = None) -> Dict[str, UpstreamEngine]:
    return {name: cls(http_client) for name, cls in ENGINE_CLASSES.items()}


__all__ = ["UpstreamEngine", "DuckDuckGo", "Searx", "ENGINE_CLASSES", "build_engine_registry"]
