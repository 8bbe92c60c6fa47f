"""해싱 유틸리티"""
import hashlib


def hash_string(text: str) -> str:
    """
    문자열을 MD5 해시로 변환

    Args:
        text: 해시할 문자열

    Returns:
        MD5 해시 문자열
    """
    return hashlib.md5(text.encode()).hexdigest()


def generate_cache_key(page_url: str) -> str:
    """
    정규화된 페이지 URL로 Redis 캐시 키 생성

    Args:
        page_url: 페이지네이션 정규화를 거친 검색 URL

    Returns:
        Redis 캐시 키
    """
    return f"search:{hash_string(page_url)}"
