"""SearX/SearXNG 인스턴스 업스트림 엔진."""

from __future__ import annotations

from typing import Dict, List, Optional
from urllib.parse import quote_plus

from selectolax.parser import HTMLParser

from src.core.config import settings
from src.core.exceptions import UpstreamEngineException
from src.schemas.search_schema import SearchResultItem
from src.upstream.http_client import SharedHttpClient
from src.utils.url_utils import display_url, normalize_href

from .base import UpstreamEngine

_TOO_MANY_REQUESTS = "too many requests"


class Searx(UpstreamEngine):
    name = "searx"

    def __init__(self, http_client: Optional[SharedHttpClient] = None, base_url: Optional[str] = None) -> None:
        super().__init__(http_client)
        self.base_url = (base_url or settings.searx_base_url).rstrip("/")

    def build_url(self, query: str, page: int) -> str:
        return f"{self.base_url}/search?q={quote_plus(query)}&pageno={max(page, 1)}"

    def request_headers(self) -> Optional[Dict[str, str]]:
        # 일부 인스턴스는 쿠키 없는 요청을 봇으로 간주합니다.
        return {"Cookie": "categories=general; language=auto; safesearch=2"}

    def parse(self, html: str) -> List[SearchResultItem]:
        tree = HTMLParser(html)

        dialog = tree.css_first(".dialog-error")
        if dialog is not None:
            message = dialog.text(strip=True).lower()
            if _TOO_MANY_REQUESTS in message:
                raise UpstreamEngineException(self.name, "rate limited")
            return []

        items: List[SearchResultItem] = []
        for node in tree.css("article.result, div.result"):
            link = node.css_first("h3 > a")
            if link is None:
                continue

            visiting_url = normalize_href(link.attributes.get("href") or "", self.base_url)
            if not visiting_url:
                continue

            content = node.css_first(".content")
            items.append(
                SearchResultItem(
                    title=link.text(strip=True),
                    url=display_url(visiting_url),
                    visiting_url=visiting_url,
                    description=content.text(strip=True) if content is not None else "",
                )
            )
        return items
