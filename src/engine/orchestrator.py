"""Search Orchestrator - Main Engine Entry Point

Coordinates the search request pipeline:
1. Pagination normalization (effective page, cache key)
2. Cache lookup
3. Hit: deserialize → render
4. Miss: engine selection → aggregation → enrichment → cache write → render

Failures after the cache branch are raised as MetaSearchException subclasses.
There is no partial response and no retry at this layer.
"""

from time import time
from typing import Optional

from pydantic import ValidationError

from src.core.config import Settings
from src.core.exceptions import (
    AggregationException,
    CacheConnectionException,
    CacheException,
    CacheSerializationException,
    MetaSearchException,
    RenderException,
)
from src.core.logging import logger, sanitize_for_log
from src.schemas.search_schema import SearchResultSet

from .engine_selector import select_engines
from .enricher import enrich
from .pagination import resolve_page
from .request import SearchRequest
from .result import SearchOutcome
from .single_flight import SingleFlight

SEARCH_TEMPLATE = "search"


class SearchOrchestrator:
    """검색 요청 오케스트레이터

    요청 간 공유 상태를 갖지 않습니다. 설정은 생성 시점에 주입받습니다.
    (single flight를 켠 경우 진행 중 계산 테이블만 공유됩니다.)
    """

    def __init__(
        self,
        settings: Settings,
        cache_service,
        aggregator,
        renderer,
        single_flight: Optional[SingleFlight] = None,
    ):
        """
        Args:
            settings: 불변 설정 객체
            cache_service: 캐시 (async get/set 구현)
            aggregator: 업스트림 애그리게이터 (async aggregate 구현)
            renderer: 템플릿 렌더러 (render 구현)
            single_flight: 동시 miss 합치기 (없으면 설정에 따라 생성)
        """
        if settings is None:
            raise ValueError("settings must not be None")
        if not cache_service:
            raise ValueError("cache_service must not be None")
        if not aggregator:
            raise ValueError("aggregator must not be None")
        if not renderer:
            raise ValueError("renderer must not be None")

        self.settings = settings
        self.cache = cache_service
        self.aggregator = aggregator
        self.renderer = renderer
        if single_flight is None and settings.search_single_flight:
            single_flight = SingleFlight()
        self.single_flight = single_flight

    async def search(self, request: SearchRequest) -> SearchOutcome:
        """검색 요청 처리

        Args:
            request: 검색 요청

        Returns:
            SearchOutcome: 리다이렉트 또는 렌더링된 페이지

        Raises:
            MetaSearchException: 쿠키/역직렬화/집계/직렬화/캐시 저장/렌더링 실패
        """
        started = time()
        query = request.query

        if query is None or not query.strip():
            logger.info("[SEARCH] Empty query, redirecting to /")
            return SearchOutcome.redirect("/", elapsed_ms=(time() - started) * 1000)

        resolution = resolve_page(
            query,
            request.page,
            request.raw_uri,
            self.settings.binding_ip_addr,
            self.settings.port,
        )
        logger.info(
            f"[SEARCH] query='{sanitize_for_log(query)}', page={resolution.page}"
        )

        cached = await self._try_cache(resolution.cache_key)
        if cached is not None:
            result_set = self._deserialize(cached, resolution.cache_key)
            body = self._render(result_set)
            logger.info(f"[SEARCH] Served from cache: page={resolution.page}")
            return SearchOutcome.from_cache(
                body=body,
                cache_key=resolution.cache_key,
                page=resolution.page,
                elapsed_ms=(time() - started) * 1000,
            )

        shared = False
        if self.single_flight is not None:
            result_set, shared = await self.single_flight.do(
                resolution.cache_key,
                lambda: self._compute(query, resolution.page, resolution.cache_key, request.engine_cookie),
            )
        else:
            result_set = await self._compute(
                query, resolution.page, resolution.cache_key, request.engine_cookie
            )

        body = self._render(result_set)
        logger.info(
            f"[SEARCH] Served from aggregation: page={resolution.page}, "
            f"results={len(result_set.results)}, shared={shared}"
        )
        return SearchOutcome.from_aggregation(
            body=body,
            cache_key=resolution.cache_key,
            page=resolution.page,
            elapsed_ms=(time() - started) * 1000,
            shared=shared,
        )

    async def _try_cache(self, cache_key: str) -> Optional[str]:
        """캐시 조회 시도

        키 없음과 저장소 장애 모두 miss로 취급하되, 장애는 경고 로그로 구분합니다.

        Returns:
            Optional[str]: 히트 시 직렬화된 결과, 미스 시 None
        """
        try:
            cached = await self.cache.get(cache_key)
        except Exception as e:
            logger.warning(
                f"[CACHE_DEGRADED] Cache lookup failed, treating as miss: {type(e).__name__}: {e}"
            )
            return None

        if cached is None:
            logger.debug(f"[CACHE] miss: {cache_key}")
            return None

        logger.debug(f"[CACHE] hit: {cache_key}")
        return cached

    async def _compute(
        self, query: str, page: int, cache_key: str, engine_cookie: Optional[str]
    ) -> SearchResultSet:
        """캐시 miss 경로: 엔진 선택 → 집계 → 보강 → 캐시 저장"""
        engines = select_engines(engine_cookie, self.settings.upstream_search_engines)
        logger.debug(f"[SEARCH] engines={engines}")

        result_set = await self._aggregate(query, page, engines)
        enrich(result_set, self.settings.style)

        payload = self._serialize(result_set)
        await self._save_to_cache(payload, cache_key)
        return result_set

    async def _aggregate(self, query: str, page: int, engines: list[str]) -> SearchResultSet:
        try:
            result_set = await self.aggregator.aggregate(
                query,
                page,
                self.settings.aggregator_random_delay,
                self.settings.debug,
                engines,
            )
        except MetaSearchException:
            raise
        except Exception as e:
            logger.error(f"[SEARCH] Aggregation failed: {type(e).__name__}: {e}", exc_info=True)
            raise AggregationException(
                f"Aggregation failed: {type(e).__name__}",
                details={"error": str(e)},
            ) from e

        if not isinstance(result_set, SearchResultSet):
            raise AggregationException(
                "Aggregator returned no result set",
                details={"type": type(result_set).__name__},
            )
        return result_set

    def _serialize(self, result_set: SearchResultSet) -> str:
        try:
            return result_set.model_dump_json()
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize result set: {e}")
            raise CacheSerializationException("serialize", str(e)) from e

    def _deserialize(self, cached: str, cache_key: str) -> SearchResultSet:
        try:
            return SearchResultSet.model_validate_json(cached)
        except ValidationError as e:
            logger.error(f"Failed to deserialize cache: {cache_key}: {e.error_count()} error(s)")
            raise CacheSerializationException(
                "deserialize", "cached payload is not a valid result set",
                details={"key": cache_key},
            ) from e

    async def _save_to_cache(self, payload: str, cache_key: str) -> None:
        """결과를 캐시에 저장

        Raises:
            CacheException: 저장 실패 (cache_write_best_effort=False일 때)
        """
        try:
            await self.cache.set(payload, cache_key)
        except Exception as e:
            if self.settings.cache_write_best_effort:
                logger.warning(
                    f"[CACHE_DEGRADED] Cache write failed, serving anyway: {type(e).__name__}: {e}"
                )
                return

            logger.error(f"[CACHE] Cache write failed: {type(e).__name__}: {e}")
            if isinstance(e, CacheException):
                raise
            raise CacheConnectionException(
                message="Failed to write cache",
                error_code="CACHE_WRITE_FAILED",
                details={"error": str(e)},
            ) from e

    def _render(self, result_set: SearchResultSet) -> str:
        try:
            return self.renderer.render(SEARCH_TEMPLATE, result_set.model_dump(mode="json"))
        except RenderException:
            raise
        except Exception as e:
            raise RenderException(SEARCH_TEMPLATE, f"{type(e).__name__}: {e}") from e
