"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path
from typing import List, Optional

import pytest

# Add src directory to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

# Environment setup
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from inference_cache.domain.interfaces import ITextGenerationProvider  # noqa: E402
from inference_cache.domain.models import GenerationOptions  # noqa: E402
from inference_cache.infrastructure.cache import ResponseCache  # noqa: E402


class FakeClock:
    """수동으로 진행시키는 monotonic clock"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedProvider(ITextGenerationProvider):
    """
    미리 정한 결과를 순서대로 반환하는 Provider

    outcomes의 각 항목이 예외면 raise, 문자열이면 반환합니다.
    항목을 모두 소진하면 마지막 항목을 반복합니다.
    """

    def __init__(self, outcomes: Optional[List[object]] = None):
        self.outcomes = list(outcomes or ["generated"])
        self.calls: List[str] = []
        self.options: List[GenerationOptions] = []

    async def generate(self, prompt: str, options: GenerationOptions) -> str:
        self.calls.append(prompt)
        self.options.append(options)
        index = min(len(self.calls), len(self.outcomes)) - 1
        outcome = self.outcomes[index]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> ResponseCache:
    """기본 설정의 응답 캐시 (가짜 시계 사용)"""
    return ResponseCache(
        max_items=100,
        max_size_bytes=10 * 1024 * 1024,
        ttl_seconds=3600.0,
        clock=clock,
    )


@pytest.fixture
def scripted_provider() -> ScriptedProvider:
    return ScriptedProvider()


@pytest.fixture
def make_provider():
    """ScriptedProvider 팩토리"""
    return ScriptedProvider
