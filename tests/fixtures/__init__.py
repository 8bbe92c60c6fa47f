"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/str)
- 엔진/네트워크 의존 없음
"""

from .cache_cases import CACHE_CASES
from .cookie_cases import COOKIE_CASES
from .upstream_html import DUCKDUCKGO_HTML, DUCKDUCKGO_NO_RESULTS_HTML, SEARX_HTML, SEARX_NO_RESULTS_HTML

__all__ = [
    "CACHE_CASES",
    "COOKIE_CASES",
    "DUCKDUCKGO_HTML",
    "DUCKDUCKGO_NO_RESULTS_HTML",
    "SEARX_HTML",
    "SEARX_NO_RESULTS_HTML",
]
