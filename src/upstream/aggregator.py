"""Upstream Aggregator

선택된 업스트림 엔진들을 동시에 호출하고 결과를 하나의 SearchResultSet으로 합칩니다.

- 순위 조정은 하지 않습니다. 도착 순서대로, URL 기준 중복만 제거합니다.
- 알 수 없는 엔진 이름은 경고 후 건너뜁니다.
- 선택된 엔진이 전부 실패하면 AggregationException.
"""

from __future__ import annotations

import asyncio
import random
from typing import Dict, List, Optional, Sequence

from src.core.config import Settings
from src.core.exceptions import AggregationException
from src.core.logging import logger, sanitize_for_log
from src.schemas.search_schema import SearchResultItem, SearchResultSet
from src.upstream.engines import UpstreamEngine


class Aggregator:
    def __init__(
        self,
        engines: Dict[str, UpstreamEngine],
        request_timeout_s: float = 30.0,
        random_delay_range: tuple[int, int] = (1, 10),
    ) -> None:
        if not engines:
            raise ValueError("engines must not be empty")
        self.engines = engines
        self.request_timeout_s = request_timeout_s
        self.random_delay_range = random_delay_range

    @classmethod
    def from_settings(cls, config: Settings, engines: Dict[str, UpstreamEngine]) -> "Aggregator":
        return cls(
            engines=engines,
            request_timeout_s=config.upstream_request_timeout_s,
            random_delay_range=(
                config.aggregator_random_delay_min_s,
                config.aggregator_random_delay_max_s,
            ),
        )

    async def aggregate(
        self,
        query: str,
        page: int,
        random_delay: bool,
        debug: bool,
        engines: Sequence[str],
    ) -> SearchResultSet:
        """업스트림 엔진 결과 집계

        Args:
            query: 검색어
            page: 유효 페이지
            random_delay: 요청 전 랜덤 지연 여부 (봇 탐지 완화)
            debug: 디버그 모드 (지연 생략)
            engines: 호출할 엔진 이름 목록

        Raises:
            AggregationException: 사용할 수 있는 엔진이 없거나 모두 실패한 경우
        """
        selected: List[UpstreamEngine] = []
        for name in engines:
            engine = self.engines.get(name)
            if engine is None:
                logger.warning(f"[AGGREGATOR] Unknown upstream engine skipped: {name}")
                continue
            selected.append(engine)

        if not selected:
            raise AggregationException(
                "No usable upstream engines selected",
                details={"engines": list(engines)},
            )

        if random_delay and not debug:
            delay_s = random.randint(*self.random_delay_range)
            logger.debug(f"[AGGREGATOR] random delay {delay_s}s")
            await asyncio.sleep(delay_s)

        logger.info(
            f"[AGGREGATOR] query='{sanitize_for_log(query)}', page={page}, "
            f"engines={[engine.name for engine in selected]}"
        )

        outcomes = await asyncio.gather(
            *(engine.results(query, page, timeout_s=self.request_timeout_s) for engine in selected),
            return_exceptions=True,
        )

        batches: List[List[SearchResultItem]] = []
        failures: Dict[str, str] = {}
        for engine, outcome in zip(selected, outcomes):
            if isinstance(outcome, asyncio.CancelledError):
                raise outcome
            if isinstance(outcome, BaseException):
                logger.warning(f"[AGGREGATOR] {engine.name} failed: {type(outcome).__name__}: {outcome}")
                failures[engine.name] = str(outcome)
                continue
            batches.append(outcome)

        if not batches:
            raise AggregationException("All upstream engines failed", details={"failures": failures})

        return SearchResultSet(results=merge_results(batches), page_query=query, page=page)


def merge_results(batches: Sequence[Sequence[SearchResultItem]]) -> List[SearchResultItem]:
    """URL 기준 중복 제거. 먼저 도착한 항목을 유지하고 엔진 이름만 누적합니다."""
    merged: Dict[str, SearchResultItem] = {}
    for batch in batches:
        for item in batch:
            existing: Optional[SearchResultItem] = merged.get(item.visiting_url)
            if existing is None:
                merged[item.visiting_url] = item
                continue
            for engine in item.engine:
                existing.add_engines(engine)
    return list(merged.values())
