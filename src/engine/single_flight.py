"""Single Flight - 같은 키에 대한 동시 계산을 하나로 합칩니다.

계산은 선두 요청과 분리된 Task로 실행되고, 선두/후속 요청 모두 shield로 기다립니다.
선두 요청이 취소(클라이언트 연결 종료 등)되어도 계산은 계속되고 후속 요청은 결과를 받습니다.
계산이 끝나면 키는 즉시 제거되므로 결과를 보관하지 않습니다(보관은 캐시의 몫).
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Dict, Generic, Tuple, TypeVar

from src.core.logging import logger

T = TypeVar("T")


class SingleFlight(Generic[T]):
    def __init__(self) -> None:
        self._inflight: Dict[str, asyncio.Task] = {}

    def in_flight(self, key: str) -> bool:
        return key in self._inflight

    async def do(self, key: str, fn: Callable[[], Awaitable[T]]) -> Tuple[T, bool]:
        """fn을 키당 한 번만 실행

        Returns:
            (결과, 공유 여부) - 다른 요청의 계산 결과를 받았으면 True
        """
        existing = self._inflight.get(key)
        if existing is not None:
            logger.debug(f"[SINGLE_FLIGHT] joining in-flight computation: key={key}")
            return await asyncio.shield(existing), True

        task = asyncio.ensure_future(fn())
        self._inflight[key] = task
        task.add_done_callback(lambda done: self._release(key, done))
        return await asyncio.shield(task), False

    def _release(self, key: str, task: asyncio.Task) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        # 기다리는 요청이 모두 취소된 경우 "exception was never retrieved" 경고 방지
        if not task.cancelled() and task.exception() is not None:
            logger.debug(f"[SINGLE_FLIGHT] computation failed: key={key}, error={task.exception()!r}")
