"""
Retry Policy 구현

시도 횟수에 비례해 늘어나는 대기 시간과 jitter를 포함한 재시도 정책입니다.
"""

import asyncio
import logging
import random
from typing import Any, Callable, TypeVar, Coroutine, Type, Tuple, Optional

from ...domain.interfaces import IRetryPolicy
from ...domain.exceptions import RetryableError


logger = logging.getLogger(__name__)

T = TypeVar("T")


class LinearBackoffRetryPolicy(IRetryPolicy):
    """
    선형 Backoff 재시도 정책

    n번째 실패 후 대기 시간 = min(base_delay * n, max_delay) + jitter.
    Jitter를 추가하여 동시 요청들의 재시도가 한꺼번에 몰리는 것을 방지합니다.
    """

    def __init__(
        self,
        max_attempts: int = 3,
        base_delay: float = 0.5,
        max_delay: float = 10.0,
        jitter: float = 0.1,
        retryable_exceptions: Optional[Tuple[Type[BaseException], ...]] = None,
        sleep: Callable[[float], Coroutine[Any, Any, None]] = asyncio.sleep,
    ):
        """
        Args:
            max_attempts: 최대 시도 횟수 (초기 시도 포함)
            base_delay: 기본 대기 시간 (초)
            max_delay: 최대 대기 시간 (초)
            jitter: Jitter 비율 (0.0 ~ 1.0)
            retryable_exceptions: 재시도 가능한 예외 타입들 (None이면 RetryableError)
            sleep: 대기 함수 (테스트에서 교체 가능)
        """
        if max_attempts < 1:
            raise ValueError("max_attempts는 1 이상이어야 합니다.")
        if base_delay <= 0:
            raise ValueError("base_delay는 0보다 커야 합니다.")
        if max_delay < base_delay:
            raise ValueError("max_delay는 base_delay 이상이어야 합니다.")
        if not 0 <= jitter <= 1:
            raise ValueError("jitter는 0.0 ~ 1.0 사이여야 합니다.")

        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.jitter = jitter
        self.retryable_exceptions = retryable_exceptions or (RetryableError,)
        self._sleep = sleep

    @classmethod
    def from_retry_count(cls, retry_count: int, **kwargs: Any) -> "LinearBackoffRetryPolicy":
        """추가 재시도 횟수로 정책 생성 (retry_count=2 → 총 3회 시도)"""
        return cls(max_attempts=retry_count + 1, **kwargs)

    def is_retryable(self, error: Exception) -> bool:
        """
        주어진 예외가 재시도 가능한지 판단

        Args:
            error: 발생한 예외

        Returns:
            재시도 가능 여부
        """
        return isinstance(error, self.retryable_exceptions)

    def _calculate_delay(self, attempt: int) -> float:
        """
        재시도 대기 시간 계산

        Args:
            attempt: 방금 실패한 시도 번호 (1부터 시작)

        Returns:
            지연 시간 (초)
        """
        delay = min(self.base_delay * attempt, self.max_delay)
        return delay + delay * self.jitter * random.random()

    async def execute(
        self,
        func: Callable[..., Coroutine[Any, Any, T]],
        *args: Any,
        **kwargs: Any
    ) -> T:
        """
        재시도 로직으로 함수 실행

        Args:
            func: 실행할 async 함수
            *args: 함수 인자
            **kwargs: 함수 키워드 인자

        Returns:
            함수 실행 결과

        Raises:
            Exception: 재시도 횟수 초과 또는 재시도 불가능한 예외 발생 시 마지막 예외
        """
        for attempt in range(1, self.max_attempts + 1):
            try:
                logger.debug(f"[RetryPolicy] 시도 {attempt}/{self.max_attempts}")
                result = await func(*args, **kwargs)

                if attempt > 1:
                    logger.info(
                        f"[RetryPolicy] 재시도 성공 (시도 {attempt}/{self.max_attempts})"
                    )
                return result

            except Exception as e:
                # 재시도 불가능한 예외는 즉시 전파 (재시도 예산 소모 없음)
                if not self.is_retryable(e):
                    logger.debug(
                        f"[RetryPolicy] 재시도 불가능한 예외: {type(e).__name__}"
                    )
                    raise

                if attempt >= self.max_attempts:
                    logger.error(
                        f"[RetryPolicy] 재시도 횟수 초과 ({self.max_attempts}회): {e}"
                    )
                    raise

                delay = self._calculate_delay(attempt)
                logger.warning(
                    f"[RetryPolicy] 재시도 대기 "
                    f"(시도 {attempt}/{self.max_attempts}, {delay:.2f}초 후): {e}"
                )
                await self._sleep(delay)

        raise RuntimeError("예상치 못한 재시도 로직 오류")
