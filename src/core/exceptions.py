"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class MetaSearchException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 캐시 관련 예외
class CacheException(MetaSearchException):
    """캐시 관련 예외"""
    def __init__(self, message: str, error_code: str = "CACHE_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CACHE_ERROR", details)


class CacheConnectionException(CacheException):
    """캐시 연결/읽기/쓰기 실패"""
    def __init__(self, message: str, error_code: str = "CACHE_CONNECTION_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CACHE_CONNECTION_ERROR", details)


class CacheSerializationException(CacheException):
    """캐시 직렬화/역직렬화 오류"""
    def __init__(self, operation: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Cache {operation} failed: {reason}"
        super().__init__(message, "CACHE_SERIALIZATION_ERROR",
                        details or {"operation": operation, "reason": reason})


# 사용자 선호(쿠키) 관련 예외
class PreferenceException(MetaSearchException):
    """사용자 선호 설정 관련 예외"""
    def __init__(self, message: str, error_code: str = "PREFERENCE_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "PREFERENCE_ERROR", details)


class InvalidPreferenceCookieException(PreferenceException):
    """엔진 선택 쿠키를 해석할 수 없음"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Malformed preference cookie: {reason}"
        super().__init__(message, "INVALID_PREFERENCE_COOKIE", details or {"reason": reason})


# 업스트림/집계 관련 예외
class AggregationException(MetaSearchException):
    """업스트림 결과 집계 실패"""
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, "AGGREGATION_ERROR", details)


class UpstreamEngineException(MetaSearchException):
    """단일 업스트림 엔진 요청/파싱 실패"""
    def __init__(self, engine: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Upstream engine '{engine}' failed: {reason}"
        super().__init__(message, "UPSTREAM_ENGINE_ERROR",
                        details or {"engine": engine, "reason": reason})


# 렌더링 관련 예외
class RenderException(MetaSearchException):
    """템플릿 렌더링 실패"""
    def __init__(self, template_name: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to render template '{template_name}': {reason}"
        super().__init__(message, "RENDER_ERROR",
                        details or {"template": template_name, "reason": reason})
