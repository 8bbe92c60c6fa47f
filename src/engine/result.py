"""Search Outcome - Standardized Orchestrator Result

오케스트레이터가 HTTP 계층에 돌려주는 표준 결과 형식입니다.
실패는 결과가 아니라 예외(MetaSearchException)로 전달됩니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SearchStatus(str, Enum):
    """검색 처리 경로"""

    REDIRECT = "redirect"  # 빈 검색어 → 루트로 리다이렉트
    CACHE_HIT = "cache_hit"  # 캐시 히트
    CACHE_MISS = "cache_miss"  # 업스트림 집계 후 캐시 저장


@dataclass
class SearchOutcome:
    """검색 요청 처리 결과

    Attributes:
        status: 처리 경로
        body: 렌더링된 페이지 (리다이렉트면 None)
        location: 리다이렉트 대상
        cache_key: 사용한 캐시 키 (정규화 URL)
        page: 유효 페이지
        elapsed_ms: 소요 시간 (밀리초)
        shared: 다른 요청의 동시 계산 결과를 공유했는지 여부
    """

    status: SearchStatus
    body: Optional[str] = None
    location: Optional[str] = None
    cache_key: Optional[str] = None
    page: Optional[int] = None
    elapsed_ms: float = 0.0
    shared: bool = False

    @property
    def is_redirect(self) -> bool:
        return self.status == SearchStatus.REDIRECT

    @property
    def from_cache_hit(self) -> bool:
        return self.status == SearchStatus.CACHE_HIT

    @classmethod
    def redirect(cls, location: str = "/", elapsed_ms: float = 0.0) -> "SearchOutcome":
        """리다이렉트 결과 생성"""
        return cls(status=SearchStatus.REDIRECT, location=location, elapsed_ms=elapsed_ms)

    @classmethod
    def from_cache(
        cls, body: str, cache_key: str, page: int, elapsed_ms: float
    ) -> "SearchOutcome":
        """캐시 히트 결과 생성

        Args:
            body: 렌더링된 페이지
            cache_key: 캐시 키
            page: 유효 페이지
            elapsed_ms: 소요 시간 (밀리초)

        Returns:
            SearchOutcome: 캐시 히트 결과
        """
        return cls(
            status=SearchStatus.CACHE_HIT,
            body=body,
            cache_key=cache_key,
            page=page,
            elapsed_ms=elapsed_ms,
        )

    @classmethod
    def from_aggregation(
        cls, body: str, cache_key: str, page: int, elapsed_ms: float, shared: bool = False
    ) -> "SearchOutcome":
        """캐시 miss 후 집계 결과 생성

        Args:
            body: 렌더링된 페이지
            cache_key: 캐시 키
            page: 유효 페이지
            elapsed_ms: 소요 시간 (밀리초)
            shared: single flight로 다른 요청의 결과를 받았는지 여부

        Returns:
            SearchOutcome: 캐시 miss 결과
        """
        return cls(
            status=SearchStatus.CACHE_MISS,
            body=body,
            cache_key=cache_key,
            page=page,
            elapsed_ms=elapsed_ms,
            shared=shared,
        )
