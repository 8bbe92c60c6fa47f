"""HTTP 엔드포인트 테스트 (FastAPI TestClient)

오케스트레이터 의존성을 Fake 협력자로 교체하므로 Redis/업스트림 호출이 없습니다.
"""

import re
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.api import get_cache_service, get_orchestrator
from src.app import app
from src.engine import SearchOrchestrator
from tests.fakes import DummyCache, FakeAggregator, FakeRenderer, make_settings
from tests.fixtures import COOKIE_CASES


@pytest.fixture
def aggregator() -> FakeAggregator:
    return FakeAggregator()


@pytest.fixture
def cache_service() -> MagicMock:
    service = MagicMock()
    service.health_check = AsyncMock(return_value=True)
    return service


@pytest.fixture
def client(aggregator, cache_service):
    orchestrator = SearchOrchestrator(
        settings=make_settings(),
        cache_service=DummyCache(),
        aggregator=aggregator,
        renderer=FakeRenderer(),
    )
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_cache_service] = lambda: cache_service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestSearchEndpoint:
    def test_search_renders_results(self, client, aggregator):
        response = client.get("/search", params={"q": "sweden"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.text.startswith("<search>")
        assert aggregator.calls[0]["query"] == "sweden"
        assert aggregator.calls[0]["page"] == 1

    def test_page_parameter(self, client, aggregator):
        response = client.get("/search", params={"q": "sweden", "page": 3})

        assert response.status_code == 200
        assert aggregator.calls[0]["page"] == 3

    @pytest.mark.parametrize("url", ["/search", "/search?q=", "/search?q=&page=2"])
    def test_empty_query_redirects_home(self, client, aggregator, url):
        response = client.get(url, follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/"
        assert aggregator.calls == []

    def test_negative_page_is_rejected(self, client):
        response = client.get("/search", params={"q": "sweden", "page": -1})

        assert response.status_code == 422

    def test_preference_cookie_selects_engines(self, client, aggregator):
        response = client.get(
            "/search",
            params={"q": "sweden"},
            headers={"Cookie": f"appCookie={COOKIE_CASES['valid']}"},
        )

        assert response.status_code == 200
        assert aggregator.calls[0]["engines"] == ["duckduckgo"]

    def test_malformed_cookie_returns_error(self, client, aggregator):
        response = client.get(
            "/search",
            params={"q": "sweden"},
            headers={"Cookie": "appCookie=not-json"},
        )

        assert response.status_code == 500
        body = response.json()
        assert body["status"] == "error"
        assert body["error_code"] == "INVALID_PREFERENCE_COOKIE"
        assert aggregator.calls == []

    def test_aggregation_failure_returns_error(self, client, aggregator):
        from src.core.exceptions import AggregationException

        aggregator.error = AggregationException("All upstream engines failed")

        response = client.get("/search", params={"q": "sweden"})

        assert response.status_code == 500
        assert response.json()["error_code"] == "AGGREGATION_ERROR"


class TestPages:
    @pytest.mark.parametrize("path", ["/", "/about", "/settings"])
    def test_static_pages(self, client, path):
        response = client.get(path)

        assert response.status_code == 200
        assert "metasurf" in response.text

    def test_robots_txt(self, client):
        response = client.get("/robots.txt")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "User-agent" in response.text

    def test_unknown_path_renders_404_page(self, client):
        response = client.get("/no/such/page")

        assert response.status_code == 404
        assert "404 Page Not Found" in response.text


class TestHealth:
    def test_healthy(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_degraded_without_redis(self, client, cache_service):
        cache_service.health_check.return_value = False

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"


class TestStaticAssets:
    def test_default_stylesheets_are_served(self, client):
        for path in ("/static/themes/simple.css", "/static/colorschemes/catppuccin-mocha.css"):
            response = client.get(path)

            assert response.status_code == 200
            assert response.headers["content-type"].startswith("text/css")

    def test_stylesheets_linked_from_pages_resolve(self, client):
        html = client.get("/").text
        links = re.findall(r'href="(/static/[^"]+)"', html)

        assert len(links) == 2
        for link in links:
            assert client.get(link).status_code == 200

    def test_unknown_stylesheet_is_404(self, client):
        response = client.get("/static/themes/missing.css")

        assert response.status_code == 404
