"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Dummy/Fake 주입 (tests/fakes.py)

금지:
- 실제 Redis / 업스트림 네트워크 호출
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.fakes import DummyCache, FakeAggregator, FakeRenderer, make_settings  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def test_settings():
    return make_settings()


@pytest.fixture
def dummy_cache() -> DummyCache:
    return DummyCache()


@pytest.fixture
def fake_aggregator() -> FakeAggregator:
    return FakeAggregator()


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()
