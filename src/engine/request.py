"""Search Request - HTTP 계층에서 엔진으로 넘기는 요청 단위"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SearchRequest:
    """요청마다 한 번 생성되는 검색 요청

    Attributes:
        query: 검색어 (q)
        page: 선언된 페이지 번호 (page), 없으면 None
        raw_uri: 수신한 그대로의 경로 + 쿼리 스트링 (예: "/search?q=sweden")
        engine_cookie: 엔진 선택 쿠키 원문
    """

    query: Optional[str]
    page: Optional[int]
    raw_uri: str
    engine_cookie: Optional[str] = None
