"""DuckDuckGo (HTML 버전) 업스트림 엔진."""

from __future__ import annotations

from typing import Dict, List, Optional
from urllib.parse import quote_plus

from selectolax.parser import HTMLParser

from src.core.exceptions import UpstreamEngineException
from src.schemas.search_schema import SearchResultItem
from src.utils.url_utils import display_url, unwrap_redirect_href

from .base import UpstreamEngine

BASE_URL = "https://html.duckduckgo.com/html/"

# 챌린지 페이지에만 나타나는 지문
_BLOCK_MARKERS = ("anomaly-modal", "challenge-form")

# HTML 버전은 페이지당 30건
_RESULTS_PER_PAGE = 30


class DuckDuckGo(UpstreamEngine):
    name = "duckduckgo"

    def request_headers(self) -> Optional[Dict[str, str]]:
        return {"Referer": "https://duckduckgo.com/"}

    def build_url(self, query: str, page: int) -> str:
        q = quote_plus(query)
        if page <= 1:
            return f"{BASE_URL}?q={q}&s=&dc=&v=1&o=json&api=/d.js"
        offset = (page - 1) * _RESULTS_PER_PAGE
        return f"{BASE_URL}?q={q}&s={offset}&dc={offset + 1}&v=1&o=json&api=/d.js"

    def parse(self, html: str) -> List[SearchResultItem]:
        if any(marker in html for marker in _BLOCK_MARKERS):
            raise UpstreamEngineException(self.name, "blocked by challenge page")

        tree = HTMLParser(html)
        if tree.css_first(".no-results") is not None:
            return []

        items: List[SearchResultItem] = []
        for node in tree.css("div.result"):
            classes = node.attributes.get("class") or ""
            if "result--ad" in classes:
                continue

            link = node.css_first("a.result__a")
            if link is None:
                continue

            visiting_url = unwrap_redirect_href(link.attributes.get("href") or "")
            if not visiting_url:
                continue

            url_node = node.css_first(".result__url")
            snippet = node.css_first(".result__snippet")

            items.append(
                SearchResultItem(
                    title=link.text(strip=True),
                    url=url_node.text(strip=True) if url_node is not None else display_url(visiting_url),
                    visiting_url=visiting_url,
                    description=snippet.text(strip=True) if snippet is not None else "",
                )
            )
        return items
