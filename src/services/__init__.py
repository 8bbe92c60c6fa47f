"""비즈니스 로직 서비스 - export only."""

from .impl import CacheService

__all__ = ["CacheService"]
