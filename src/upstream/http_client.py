"""업스트림 엔진 공용 HTTP 클라이언트 (curl_cffi)

브라우저 TLS 지문(impersonate)을 쓰는 AsyncSession 하나를 프로세스 전체가 공유합니다.
상태 코드 판단은 엔진 몫이고, 여기서는 전송 실패만 엔진 이름을 붙여 예외로 올립니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from time import time
from typing import Dict, Optional

from curl_cffi.requests import AsyncSession

from src.core.config import settings
from src.core.exceptions import UpstreamEngineException
from src.core.logging import logger

_ACCEPT_HTML = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


@dataclass(frozen=True)
class UpstreamResponse:
    status: int
    text: str
    elapsed_ms: float


class SharedHttpClient:
    def __init__(self) -> None:
        self._session: Optional[AsyncSession] = None

    @property
    def session(self) -> AsyncSession:
        # 생성 사이에 await가 없으므로 중복 생성되지 않습니다.
        if self._session is None:
            self._session = AsyncSession(
                impersonate=settings.upstream_http_impersonate,
                max_clients=settings.upstream_http_max_clients,
                allow_redirects=True,
                trust_env=False,
            )
        return self._session

    async def fetch(
        self,
        engine: str,
        url: str,
        *,
        timeout_s: float,
        headers: Optional[Dict[str, str]] = None,
    ) -> UpstreamResponse:
        """GET 요청

        엔진별 헤더는 기본 헤더(User-Agent, Accept) 위에 덮어씁니다.

        Raises:
            UpstreamEngineException: 연결/타임아웃 등 전송 실패
        """
        merged = {
            "User-Agent": settings.upstream_user_agent,
            "Accept": _ACCEPT_HTML,
            "Accept-Language": "en-US,en;q=0.8",
        }
        merged.update(headers or {})

        started = time()
        try:
            resp = await self.session.get(url, headers=merged, timeout=timeout_s)
        except Exception as e:
            logger.info(f"[HTTP_CLIENT] {engine} GET failed: {type(e).__name__}: {e}")
            raise UpstreamEngineException(
                engine, f"request failed: {type(e).__name__}", details={"url": url}
            ) from e

        return UpstreamResponse(
            status=resp.status_code,
            text=resp.text or "",
            elapsed_ms=(time() - started) * 1000,
        )

    async def close(self) -> None:
        if self._session is None:
            return
        session, self._session = self._session, None
        await session.close()


_shared_http_client = SharedHttpClient()


def get_shared_http_client() -> SharedHttpClient:
    return _shared_http_client


async def shutdown_shared_http_client() -> None:
    await _shared_http_client.close()
