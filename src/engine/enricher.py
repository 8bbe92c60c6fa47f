"""Result Enricher - 집계 직후 스타일과 빈 결과 플래그를 붙입니다."""

from src.schemas.search_schema import SearchResultSet, Style


def enrich(result_set: SearchResultSet, style: Style) -> SearchResultSet:
    """스타일 부착 + 빈 결과 플래그 설정

    캐시 miss에서만 한 번 호출됩니다. 캐시된 값은 이미 보강되어 있습니다.
    """
    result_set.add_style(style)
    if result_set.is_empty_result_set():
        result_set.set_empty_result_set()
    return result_set
