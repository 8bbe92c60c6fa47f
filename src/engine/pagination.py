"""Pagination Normalizer

유효 페이지와 캐시 키(정규화된 전체 URL)를 결정합니다.

- page 없음  → 1페이지, 수신 URI 그대로 + "&page=1"
- page <= 1 → 1페이지, "/search?q={query}&page=1"
- page > 1  → 선언된 페이지, "/search?q={query}&page={page}"

page 없는 요청과 page=1 요청이 같은 캐시 엔트리를 쓰도록 하기 위한 분기입니다.
퍼센트 인코딩이나 파라미터 재정렬은 하지 않습니다.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PageResolution:
    page: int
    cache_key: str


def resolve_page(
    query: str,
    page: Optional[int],
    raw_uri: str,
    host: str,
    port: int,
) -> PageResolution:
    """유효 페이지와 캐시 키 계산

    Args:
        query: 검색어 (공백 아닌 값)
        page: 선언된 페이지 번호
        raw_uri: 경로 + 쿼리 스트링
        host: 바인딩 주소
        port: 바인딩 포트

    Returns:
        PageResolution
    """
    if page is None:
        return PageResolution(page=1, cache_key=f"http://{host}:{port}{raw_uri}&page=1")

    effective_page = page if page > 1 else 1
    return PageResolution(
        page=effective_page,
        cache_key=f"http://{host}:{port}/search?q={query}&page={effective_page}",
    )
