"""업스트림 검색 엔진 공통 인터페이스.

각 엔진은 URL 구성(build_url)과 순수 파싱(parse)만 구현합니다.
네트워크 fetch와 상태 코드 검증은 UpstreamEngine.results()가 담당합니다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from src.core.exceptions import UpstreamEngineException
from src.core.logging import logger
from src.schemas.search_schema import SearchResultItem
from src.upstream.http_client import SharedHttpClient, get_shared_http_client


class UpstreamEngine(ABC):
    name: str = ""

    def __init__(self, http_client: Optional[SharedHttpClient] = None) -> None:
        self.http_client = http_client or get_shared_http_client()

    @abstractmethod
    def build_url(self, query: str, page: int) -> str:
        ...

    @abstractmethod
    def parse(self, html: str) -> List[SearchResultItem]:
        ...

    def request_headers(self) -> Optional[Dict[str, str]]:
        return None

    async def results(self, query: str, page: int, *, timeout_s: float) -> List[SearchResultItem]:
        """엔진 검색 실행

        Raises:
            UpstreamEngineException: 전송 실패, 200이 아닌 응답, 파싱 실패
        """
        url = self.build_url(query, page)
        response = await self.http_client.fetch(
            self.name, url, timeout_s=timeout_s, headers=self.request_headers()
        )
        if response.status == 429:
            raise UpstreamEngineException(
                self.name, "rate limited", details={"url": url, "status": response.status}
            )
        if response.status != 200:
            raise UpstreamEngineException(
                self.name, f"unexpected status {response.status}", details={"url": url, "status": response.status}
            )

        try:
            items = self.parse(response.text)
        except UpstreamEngineException:
            raise
        except Exception as e:
            raise UpstreamEngineException(self.name, f"parse failed: {type(e).__name__}: {e}") from e

        for item in items:
            item.add_engines(self.name)

        logger.debug(
            f"[UPSTREAM] {self.name}: {len(items)} result(s) for page={page} in {response.elapsed_ms:.0f}ms"
        )
        return items
