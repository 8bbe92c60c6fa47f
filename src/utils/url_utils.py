"""URL 파싱 유틸리티"""
from urllib.parse import urlparse, parse_qs


def normalize_href(href: str, base_url: str) -> str:
    """상대/프로토콜-상대 href를 절대 URL로 정규화합니다.

    - "//host/path" -> "https://host/path"
    - "/path" -> "{base_url}/path"
    - "http(s)://..." -> 그대로
    """
    if not href:
        return ""

    h = href.strip()
    if not h:
        return ""

    if h.startswith("//"):
        return f"https:{h}"

    if h.startswith("/"):
        return f"{base_url.rstrip('/')}{h}"

    return h


def unwrap_redirect_href(href: str, param: str = "uddg") -> str:
    """검색 엔진 리다이렉트 링크에서 실제 목적지 URL을 꺼냅니다.

    Examples:
        >>> unwrap_redirect_href("//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.com%2F&rut=abc")
        'https://example.com/'
        >>> unwrap_redirect_href("https://example.com/")
        'https://example.com/'
    """
    if not href:
        return ""

    parsed = urlparse(normalize_href(href, "https://duckduckgo.com"))
    target = parse_qs(parsed.query).get(param)
    if target and target[0]:
        return target[0]

    return normalize_href(href, "https://duckduckgo.com")


def display_url(url: str) -> str:
    """화면 표시용 URL (스킴 제거)"""
    if not url:
        return ""
    for prefix in ("https://", "http://"):
        if url.startswith(prefix):
            return url[len(prefix):]
    return url
