"""Engine Selector 유닛 테스트"""
import pytest

from src.core.exceptions import InvalidPreferenceCookieException, PreferenceException
from src.engine.engine_selector import select_engines
from tests.fixtures import COOKIE_CASES

DEFAULTS = ["engineA", "engineB"]


class TestSelectEngines:
    def test_no_cookie_uses_defaults(self):
        """쿠키 없음 → 설정 기본값 그대로"""
        assert select_engines(None, DEFAULTS) == ["engineA", "engineB"]

    def test_cookie_engines_override_defaults(self):
        assert select_engines(COOKIE_CASES["valid"], DEFAULTS) == ["duckduckgo"]

    def test_cookie_engines_are_deduplicated_in_order(self):
        assert select_engines(COOKIE_CASES["valid_duplicates"], DEFAULTS) == ["searx", "duckduckgo"]

    @pytest.mark.parametrize("case", ["empty_engines", "blank_engines"])
    def test_cookie_without_engines_falls_back_to_defaults(self, case):
        """빈 선택은 애그리게이터로 넘기지 않는다"""
        assert select_engines(COOKIE_CASES[case], DEFAULTS) == DEFAULTS

    @pytest.mark.parametrize("case", ["not_json", "missing_engines", "engines_not_list", "truncated"])
    def test_malformed_cookie_raises(self, case):
        """잘못된 쿠키는 기본값으로 조용히 대체하지 않는다"""
        with pytest.raises(InvalidPreferenceCookieException) as exc_info:
            select_engines(COOKIE_CASES[case], DEFAULTS)

        assert exc_info.value.error_code == "INVALID_PREFERENCE_COOKIE"
        assert isinstance(exc_info.value, PreferenceException)

    def test_empty_string_cookie_is_malformed(self):
        with pytest.raises(InvalidPreferenceCookieException):
            select_engines("", DEFAULTS)

    def test_defaults_are_not_mutated(self):
        defaults = ["engineA", "engineB"]
        result = select_engines(None, defaults)
        result.append("other")
        assert defaults == ["engineA", "engineB"]
