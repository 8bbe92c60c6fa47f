"""Pydantic 스키마 정의 (검색 결과 / 쿠키 / 응답)"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class Style(BaseModel):
    """화면 스타일 메타데이터"""
    theme: str = Field(..., description="테마 이름")
    colorscheme: str = Field(..., description="테마 색상 구성")


class PreferenceCookie(BaseModel):
    """클라이언트 쿠키(appCookie)에 담긴 사용자 선호 설정

    세 필드 모두 필수이며, 엔진 선택에는 engines만 사용합니다.
    """
    theme: str = Field(..., description="사용 중인 테마")
    colorscheme: str = Field(..., description="사용 중인 색상 구성")
    engines: list[str] = Field(..., description="UI에서 선택한 업스트림 엔진")


class SearchResultItem(BaseModel):
    """업스트림 엔진이 반환한 개별 검색 결과"""
    title: str = Field(..., description="결과 제목")
    url: str = Field(..., description="표시용 URL")
    visiting_url: str = Field(..., description="실제 이동 URL")
    description: str = Field("", description="요약")
    engine: list[str] = Field(default_factory=list, description="이 결과를 반환한 엔진 목록")

    def add_engines(self, engine: str) -> None:
        if engine not in self.engine:
            self.engine.append(engine)


class SearchResultSet(BaseModel):
    """집계된 검색 결과 묶음.

    - 캐시 miss 시 애그리게이터가 생성하고 Enricher가 한 번만 수정합니다.
    - 이후에는 렌더링되거나 JSON으로 직렬화되어 캐시에 저장됩니다.
    """
    results: list[SearchResultItem] = Field(default_factory=list, description="검색 결과")
    page_query: str = Field(..., description="검색어")
    page: int = Field(1, ge=1, description="유효 페이지 번호")
    style: Optional[Style] = Field(None, description="화면 스타일")
    empty_result_set: bool = Field(False, description="빈 결과 화면 표시 여부")

    def add_style(self, style: Style) -> None:
        self.style = style

    def is_empty_result_set(self) -> bool:
        return len(self.results) == 0

    def set_empty_result_set(self) -> None:
        self.empty_result_set = True


class ErrorResponse(BaseModel):
    """요청 실패 응답"""
    status: str = Field("error", description="항상 error")
    error_code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str = Field(..., description="ok | degraded")
    timestamp: datetime
    version: str
