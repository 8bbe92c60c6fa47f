"""CacheAdapter 단위 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from src.core.exceptions import CacheConnectionException
from src.engine.cache_adapter import CacheAdapter
from src.utils.hash_utils import generate_cache_key

PAGE_URL = "http://127.0.0.1:8080/search?q=sweden&page=1"


@pytest.mark.asyncio
async def test_cache_adapter_get_hashes_page_url():
    """정규화 URL은 해시된 Redis 키로 조회된다."""
    mock_cache_service = AsyncMock()
    mock_cache_service.get = AsyncMock(return_value='{"cached": true}')

    adapter = CacheAdapter(cache_service=mock_cache_service)
    result = await adapter.get(PAGE_URL)

    assert result == '{"cached": true}'
    mock_cache_service.get.assert_awaited_once_with(generate_cache_key(PAGE_URL))


@pytest.mark.asyncio
async def test_cache_adapter_get_miss():
    """캐시 미스 케이스."""
    mock_cache_service = AsyncMock()
    mock_cache_service.get = AsyncMock(return_value=None)

    adapter = CacheAdapter(cache_service=mock_cache_service)
    assert await adapter.get(PAGE_URL) is None


@pytest.mark.asyncio
async def test_cache_adapter_get_propagates_connection_error():
    """장애를 삼키지 않는다 (miss 강등은 오케스트레이터가 결정)."""
    mock_cache_service = AsyncMock()
    mock_cache_service.get = AsyncMock(side_effect=CacheConnectionException("Cache read failed"))

    adapter = CacheAdapter(cache_service=mock_cache_service)
    with pytest.raises(CacheConnectionException):
        await adapter.get(PAGE_URL)


@pytest.mark.asyncio
async def test_cache_adapter_set():
    """캐시 저장."""
    mock_cache_service = AsyncMock()
    mock_cache_service.set = AsyncMock(return_value=True)

    adapter = CacheAdapter(cache_service=mock_cache_service)
    await adapter.set('{"results": []}', PAGE_URL)

    mock_cache_service.set.assert_awaited_once_with('{"results": []}', generate_cache_key(PAGE_URL))


@pytest.mark.asyncio
async def test_cache_adapter_set_propagates_error():
    mock_cache_service = AsyncMock()
    mock_cache_service.set = AsyncMock(side_effect=CacheConnectionException("Failed to write cache"))

    adapter = CacheAdapter(cache_service=mock_cache_service)
    with pytest.raises(CacheConnectionException):
        await adapter.set("{}", PAGE_URL)
