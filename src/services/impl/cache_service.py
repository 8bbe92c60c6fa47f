"""Redis 캐시 서비스 - 캐싱 로직만 담당 (redis.asyncio)"""
from typing import Optional
from redis.asyncio import Redis

from src.core.config import settings
from src.core.logging import logger
from src.core.exceptions import CacheConnectionException


class CacheService:
    """Redis 캐시 관리 서비스

    문자열 키/문자열 값만 다룹니다. 직렬화는 호출자(오케스트레이터)의 몫입니다.
    모든 명령은 await 되므로 Redis가 느려도 이벤트 루프를 막지 않습니다.
    """

    def __init__(self, redis_url: Optional[str] = None, ttl: Optional[int] = None):
        """Redis 클라이언트 초기화

        연결은 첫 명령 시점에 커넥션 풀에서 열립니다. Redis가 죽어 있어도
        서비스 생성은 실패하지 않으며, 조회는 miss로 강등됩니다.
        """
        self.ttl = ttl or settings.cache_ttl
        try:
            self.redis_client = Redis.from_url(
                redis_url or settings.redis_url,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5
            )
        except Exception as e:
            logger.error(f"Invalid Redis configuration: {e}")
            raise CacheConnectionException(
                message="Redis client initialization failed",
                error_code="CACHE_CONN_FAILED",
                details={"reason": str(e)}
            )

    async def get(self, key: str) -> Optional[str]:
        """
        캐시된 값 조회

        Args:
            key: Redis 키

        Returns:
            저장된 문자열 또는 None (키 없음)

        Raises:
            CacheConnectionException: Redis에 접근할 수 없는 경우
        """
        try:
            cached_data = await self.redis_client.get(key)
        except Exception as e:
            logger.error(f"Cache read error: {e}")
            raise CacheConnectionException(
                message="Cache read failed",
                error_code="CACHE_READ_FAILED",
                details={"key": key, "error": str(e)}
            )

        if cached_data is None:
            logger.info(f"Cache miss for key: {key}")
            return None

        logger.info(f"Cache hit for key: {key}")
        return cached_data

    async def set(self, value: str, key: str) -> bool:
        """
        값 저장 (TTL은 서비스 설정값)

        Raises:
            CacheConnectionException: 저장 실패
        """
        try:
            await self.redis_client.setex(key, self.ttl, value)
        except Exception as e:
            logger.error(f"Cache write error: {e}")
            raise CacheConnectionException(
                message="Failed to write cache",
                error_code="CACHE_WRITE_FAILED",
                details={"key": key, "error": str(e)}
            )

        logger.info(f"Cache set for key: {key}, TTL: {self.ttl}s")
        return True

    async def health_check(self) -> bool:
        """Redis 연결 상태 확인"""
        try:
            await self.redis_client.ping()
            return True
        except Exception:
            return False

    async def close(self) -> None:
        """커넥션 풀 정리 (앱 종료 시)"""
        try:
            await self.redis_client.aclose()
        except Exception as e:
            logger.debug(f"[CACHE] close failed: {type(e).__name__}: {e}")
