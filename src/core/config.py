"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator, model_validator

from src.schemas.search_schema import Style


class Settings(BaseSettings):
    """애플리케이션 설정 (불변)

    오케스트레이터에는 생성 시점에 명시적으로 주입됩니다.
    """

    # 서버 바인딩 (캐시 키의 host/port 구성에도 사용)
    binding_ip_addr: str = "127.0.0.1"
    port: int = 8080

    # Redis
    redis_url: str = "redis://127.0.0.1:8082"
    cache_ttl: int = 60  # 1분

    # 디버그 모드에서는 랜덤 지연을 건너뜁니다.
    debug: bool = False

    # 애그리게이터
    aggregator_random_delay: bool = False
    aggregator_random_delay_min_s: int = 1
    aggregator_random_delay_max_s: int = 10

    # 업스트림 검색 엔진
    upstream_search_engines: list[str] = ["duckduckgo", "searx"]
    upstream_request_timeout_s: float = 30.0
    upstream_user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    upstream_http_impersonate: str = "chrome110"
    upstream_http_max_clients: int = 20
    searx_base_url: str = "https://searx.work"

    # 화면 스타일
    style_theme: str = "simple"
    style_colorscheme: str = "catppuccin-mocha"

    # 사용자 선호 엔진 쿠키
    preference_cookie_name: str = "appCookie"

    # NOTE: 기본값은 '캐시 저장 실패 = 요청 실패'.
    # True면 저장 실패를 로그만 남기고 응답은 그대로 반환합니다.
    cache_write_best_effort: bool = False

    # 동일 캐시 키에 대한 동시 miss를 1회 계산으로 합칩니다.
    search_single_flight: bool = False

    # API
    api_title: str = "metasurf"
    api_version: str = "1.0.0"
    api_description: str = "Cache-First 전략으로 업스트림 검색 엔진 호출을 줄이는 메타 검색 서비스"

    # 로깅
    log_level: str = "INFO"

    @property
    def style(self) -> Style:
        return Style(theme=self.style_theme, colorscheme=self.style_colorscheme)

    @field_validator("cache_ttl")
    @classmethod
    def validate_cache_ttl(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("cache_ttl must be positive")
        return v

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("upstream_request_timeout_s")
    @classmethod
    def validate_upstream_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("upstream_request_timeout_s must be positive")
        return v

    @field_validator("upstream_search_engines")
    @classmethod
    def validate_upstream_search_engines(cls, v: list[str]) -> list[str]:
        engines = [name.strip() for name in v if name and name.strip()]
        if not engines:
            raise ValueError("upstream_search_engines must not be empty")
        return engines

    @field_validator("redis_url")
    @classmethod
    def validate_redis_url(cls, v: str) -> str:
        if not v:
            raise ValueError("redis_url must not be empty")
        return v

    @model_validator(mode="after")
    def validate_random_delay_bounds(self) -> "Settings":
        if self.aggregator_random_delay_min_s < 0:
            raise ValueError("aggregator_random_delay_min_s must be >= 0")
        if self.aggregator_random_delay_min_s > self.aggregator_random_delay_max_s:
            raise ValueError("aggregator random delay min must not exceed max")
        return self

    class Config:
        env_file = ".env"
        case_sensitive = False
        frozen = True


settings = Settings()
