"""
Resilient 텍스트 생성기

Upstream Provider 호출을 재시도 정책과 하드 타임아웃으로 감싸서
CachedInferenceGateway에 넘길 수 있는 ``generate(prompt)`` 함수를 만듭니다.

타임아웃은 asyncio.wait_for로 재시도 루프 전체에 걸리며, 기한이 지나면
진행 중인 upstream 호출 task를 취소하고 UpstreamTimeoutError를 발생시킵니다.
"""

import asyncio
from dataclasses import replace
from typing import Any, Awaitable, Callable, Optional

from ..domain.errors import ErrorCode, handle_error
from ..domain.interfaces import IRetryPolicy, ITextGenerationProvider
from ..domain.models import GenerationOptions
from ..infrastructure.logging import get_logger

logger = get_logger(__name__, component="ResilientTextGenerator")

DEFAULT_TIMEOUT_SECONDS = 25.0


class ResilientTextGenerator:
    """
    재시도 + 타임아웃이 적용된 텍스트 생성기

    Attributes:
        timeout_seconds: 재시도를 포함한 전체 시도 제한 시간 (초)
        default_options: 기본 생성 파라미터
    """

    def __init__(
        self,
        provider: ITextGenerationProvider,
        retry_policy: IRetryPolicy,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        default_options: Optional[GenerationOptions] = None,
    ):
        """
        Args:
            provider: Upstream 텍스트 생성 Provider
            retry_policy: 재시도 정책
            timeout_seconds: 하드 타임아웃 (초, 기본: 25)
            default_options: 기본 생성 파라미터

        Raises:
            ValueError: timeout_seconds가 0 이하인 경우
        """
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds는 0보다 커야 합니다.")

        self.provider = provider
        self.retry_policy = retry_policy
        self.timeout_seconds = timeout_seconds
        self.default_options = default_options or GenerationOptions()

    async def generate(
        self,
        prompt: str,
        options: Optional[GenerationOptions] = None,
    ) -> str:
        """
        재시도와 타임아웃을 적용하여 텍스트 생성

        Args:
            prompt: 입력 프롬프트
            options: 생성 파라미터 (None이면 default_options)

        Returns:
            생성된 텍스트

        Raises:
            UpstreamTimeoutError: timeout_seconds 초과
            UpstreamAuthError / UpstreamBadRequestError: 즉시 전파
            UpstreamRateLimitedError / UpstreamGenericError: 재시도 소진 후 전파
        """
        options = options or self.default_options

        try:
            return await asyncio.wait_for(
                self.retry_policy.execute(self.provider.generate, prompt, options),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise handle_error(
                ErrorCode.API_TIMEOUT,
                timeout=self.timeout_seconds,
                model=options.model,
            ) from e

    async def __call__(self, prompt: str) -> str:
        return await self.generate(prompt)

    def with_options(self, **overrides: Any) -> Callable[[str], Awaitable[str]]:
        """
        기본 파라미터 일부를 바꾼 generate 함수 반환

        Example:
            >>> generate = generator.with_options(max_tokens=800, temperature=0.3)
            >>> await gateway.cached_inference(prompt, generate)
        """
        options = replace(self.default_options, **overrides)

        async def generate(prompt: str) -> str:
            return await self.generate(prompt, options)

        return generate
