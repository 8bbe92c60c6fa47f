"""Upstream layer - 업스트림 검색 엔진 호출과 결과 집계.

- Aggregator: 선택된 엔진 동시 호출 + 병합
- UpstreamEngine: 엔진 어댑터 공통 인터페이스 (DuckDuckGo, Searx)
- SharedHttpClient: 프로세스 공유 curl_cffi 세션
"""

from typing import Optional

from src.core.config import Settings, settings

from .aggregator import Aggregator, merge_results
from .engines import ENGINE_CLASSES, UpstreamEngine, build_engine_registry
from .http_client import SharedHttpClient, UpstreamResponse, get_shared_http_client, shutdown_shared_http_client

_aggregator: Optional[Aggregator] = None


def get_aggregator(config: Optional[Settings] = None) -> Aggregator:
    """Aggregator 싱글톤"""
    global _aggregator
    if _aggregator is None:
        config = config or settings
        _aggregator = Aggregator.from_settings(config, build_engine_registry())
    return _aggregator


__all__ = [
    "Aggregator",
    "merge_results",
    "ENGINE_CLASSES",
    "UpstreamEngine",
    "build_engine_registry",
    "SharedHttpClient",
    "UpstreamResponse",
    "get_shared_http_client",
    "shutdown_shared_http_client",
    "get_aggregator",
]
