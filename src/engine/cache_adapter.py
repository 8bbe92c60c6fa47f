"""Cache Adapter - 정규화 URL 키를 Redis 키로 바꿔 CacheService에 위임"""

from typing import Optional

from src.core.logging import logger
from src.services.impl.cache_service import CacheService
from src.utils.hash_utils import generate_cache_key


class CacheAdapter:
    """Cache 서비스 어댑터

    SearchOrchestrator가 기대하는 async get/set 인터페이스를 제공합니다.
    예외는 삼키지 않습니다. miss 강등 여부는 오케스트레이터가 결정합니다.
    """

    def __init__(self, cache_service: Optional[CacheService] = None):
        """
        Args:
            cache_service: CacheService 인스턴스 (없으면 내부 생성)
        """
        if cache_service is None:
            self.cache_service = CacheService()
        else:
            self.cache_service = cache_service

    async def get(self, page_url: str) -> Optional[str]:
        """캐시 조회

        Args:
            page_url: 정규화된 페이지 URL (캐시 키)

        Returns:
            직렬화된 검색 결과 또는 None

        Raises:
            CacheConnectionException: 저장소에 접근할 수 없는 경우
        """
        key = generate_cache_key(page_url)
        logger.debug(f"[CACHE] get page_url={page_url} key={key}")
        return await self.cache_service.get(key)

    async def set(self, value: str, page_url: str) -> None:
        """캐시 저장

        Args:
            value: 직렬화된 검색 결과
            page_url: 정규화된 페이지 URL (캐시 키)

        Raises:
            CacheConnectionException: 저장 실패
        """
        key = generate_cache_key(page_url)
        logger.debug(f"[CACHE] set page_url={page_url} key={key}")
        await self.cache_service.set(value, key)
