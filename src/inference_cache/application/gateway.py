"""
캐시 기반 추론 게이트웨이

느리고 실패할 수 있는 upstream 호출을 프롬프트 해시 기반으로 메모이제이션합니다.
캐시는 순수한 최적화 계층이므로 언제든 비활성화할 수 있어야 합니다.

흐름:
    캐시 비활성화 → generate 직접 호출 (캐시 부수효과 없음)
    캐시 조회 → 히트: 디코딩 후 반환
             → 미스/만료: generate 호출 → 성공 시 인코딩 후 저장 → 반환
                                      → 실패 시 그대로 전파 (저장 안 함)
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, TypeVar

from ..domain.exceptions import SerializationError
from ..domain.interfaces import ICacheCodec
from ..infrastructure.cache import JsonCodec, ResponseCache, hash_prompt
from ..infrastructure.logging import get_logger

logger = get_logger(__name__, component="CachedInferenceGateway")

T = TypeVar("T")

_MISS = object()


class CachedInferenceGateway:
    """
    ResponseCache 앞단의 메모이제이션 게이트웨이

    동일 키에 대한 동시 미스는 기본적으로 각각 generate를 호출합니다.
    collapse_in_flight=True이면 진행 중인 생성 작업을 공유하여
    generate 호출을 한 번으로 줄입니다.

    Attributes:
        cache: 응답 캐시
        codec: 값 ↔ 문자열 변환기
        enabled: 프로세스 전역 캐시 활성화 여부
        collapse_in_flight: 동시 중복 생성 병합 여부
    """

    def __init__(
        self,
        cache: ResponseCache,
        codec: Optional[ICacheCodec] = None,
        enabled: bool = True,
        collapse_in_flight: bool = False,
    ):
        self.cache = cache
        self.codec = codec or JsonCodec()
        self.enabled = enabled
        self.collapse_in_flight = collapse_in_flight
        self._in_flight: Dict[str, "asyncio.Future[Any]"] = {}

    async def cached_inference(
        self,
        prompt: str,
        generate: Callable[[str], Awaitable[T]],
        *,
        use_cache: bool = True,
    ) -> T:
        """
        캐시를 거쳐 추론 결과 반환

        Args:
            prompt: 프롬프트 텍스트 (해시되어 캐시 키가 됨)
            generate: 미스 시 호출할 async 생성 함수
            use_cache: False이면 이번 호출만 캐시를 우회

        Returns:
            캐시된 값 또는 새로 생성된 값

        Raises:
            generate가 던진 예외 (캐시에는 아무것도 저장되지 않음)
        """
        value, _hit = await self.cached_inference_with_source(
            prompt, generate, use_cache=use_cache
        )
        return value

    async def cached_inference_with_source(
        self,
        prompt: str,
        generate: Callable[[str], Awaitable[T]],
        *,
        use_cache: bool = True,
    ) -> Tuple[T, bool]:
        """
        cached_inference와 같지만 캐시 히트 여부를 함께 반환

        진행 중인 생성에 합류한 호출은 히트가 아닙니다.

        Returns:
            (값, 캐시 히트 여부)
        """
        if not self.enabled or not use_cache:
            logger.info("Cache disabled. Generating fresh response.")
            return await generate(prompt), False

        key = hash_prompt(prompt)

        cached = self._lookup(key)
        if cached is not _MISS:
            logger.info("Cache hit! Returning cached response.", key_prefix=key[:16])
            return cached, True

        logger.info("Cache miss. Generating fresh response.", key_prefix=key[:16])

        if self.collapse_in_flight:
            return await self._join_or_start(key, prompt, generate), False
        return await self._generate_and_store(key, prompt, generate), False

    @property
    def in_flight_count(self) -> int:
        """진행 중인 병합 생성 작업 수"""
        return len(self._in_flight)

    def _lookup(self, key: str) -> Any:
        raw = self.cache.get(key)
        if raw is None:
            return _MISS

        try:
            return self.codec.decode(raw)
        except Exception as e:
            # 주입된 codec의 예외도 포함, 손상된 항목은 제거하고 미스로 처리
            logger.warning(
                "Cached value could not be decoded, regenerating",
                key_prefix=key[:16],
                error=_describe(e),
            )
            self.cache.delete(key)
            return _MISS

    async def _generate_and_store(
        self,
        key: str,
        prompt: str,
        generate: Callable[[str], Awaitable[T]],
    ) -> T:
        value = await generate(prompt)

        try:
            encoded = self.codec.encode(value)
        except Exception as e:
            logger.warning(
                "Generated value could not be encoded, not caching",
                key_prefix=key[:16],
                error=_describe(e),
            )
            return value

        self.cache.set(key, encoded)
        return value

    async def _join_or_start(
        self,
        key: str,
        prompt: str,
        generate: Callable[[str], Awaitable[T]],
    ) -> T:
        future = self._in_flight.get(key)
        if future is None:
            future = asyncio.ensure_future(self._generate_and_store(key, prompt, generate))
            self._in_flight[key] = future
            future.add_done_callback(lambda _f: self._in_flight.pop(key, None))
        else:
            logger.debug("Joining in-flight generation", key_prefix=key[:16])

        # 한 호출자가 취소되어도 다른 대기자를 위해 생성 작업은 계속됨
        return await asyncio.shield(future)


def _describe(error: Exception) -> str:
    if isinstance(error, SerializationError):
        return error.message
    return f"{type(error).__name__}: {error}"
