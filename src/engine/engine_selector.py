"""Engine Selector - 요청별 업스트림 엔진 목록 결정"""

from typing import Optional, Sequence

from pydantic import ValidationError

from src.core.exceptions import InvalidPreferenceCookieException
from src.core.logging import logger
from src.schemas.search_schema import PreferenceCookie


def _dedupe(engines: Sequence[str]) -> list[str]:
    seen: list[str] = []
    for name in engines:
        name = name.strip()
        if name and name not in seen:
            seen.append(name)
    return seen


def select_engines(cookie_value: Optional[str], default_engines: Sequence[str]) -> list[str]:
    """쿠키가 있으면 쿠키의 엔진 목록, 없으면 설정 기본값

    Args:
        cookie_value: appCookie 원문 (JSON)
        default_engines: 설정의 기본 엔진 목록

    Returns:
        비어 있지 않은 엔진 이름 목록

    Raises:
        InvalidPreferenceCookieException: 쿠키를 해석할 수 없는 경우
    """
    defaults = _dedupe(default_engines)

    if cookie_value is None:
        return defaults

    try:
        preference = PreferenceCookie.model_validate_json(cookie_value)
    except ValidationError as e:
        logger.warning(f"[ENGINES] Malformed preference cookie: {e.error_count()} error(s)")
        raise InvalidPreferenceCookieException(
            reason="cookie is not a valid preference payload",
            details={"error_count": e.error_count()},
        ) from e

    engines = _dedupe(preference.engines)
    if not engines:
        logger.info("[ENGINES] Preference cookie selects no engines, using defaults")
        return defaults

    return engines
