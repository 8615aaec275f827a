"""
Retry Policy 단위 테스트

선형 Backoff 재시도 정책을 검증합니다.
"""

import pytest

from inference_cache.application.resilience import LinearBackoffRetryPolicy
from inference_cache.domain.exceptions import (
    UpstreamAuthError,
    UpstreamBadRequestError,
    UpstreamGenericError,
    UpstreamRateLimitedError,
)


class RecordingSleep:
    """대기 시간을 기록만 하는 sleep 대체"""

    def __init__(self):
        self.delays = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class TestRetryPolicyBasicBehavior:
    """Retry Policy 기본 동작 테스트"""

    @pytest.mark.asyncio
    async def test_successful_execution_on_first_try(self):
        """
        첫 시도에서 성공하면 재시도하지 않아야 합니다.
        """
        # Given
        sleep = RecordingSleep()
        policy = LinearBackoffRetryPolicy(max_attempts=3, sleep=sleep)

        async def successful_func():
            return "success"

        # When
        result = await policy.execute(successful_func)

        # Then
        assert result == "success"
        assert sleep.delays == []

    @pytest.mark.asyncio
    async def test_retry_on_retryable_error(self):
        """
        재시도 가능한 예외 발생 시 재시도해야 합니다.
        """
        # Given: 두 번 실패 후 성공하는 함수
        sleep = RecordingSleep()
        policy = LinearBackoffRetryPolicy(max_attempts=3, base_delay=0.01, jitter=0, sleep=sleep)
        call_count = 0

        async def failing_then_success():
            nonlocal call_count
            call_count += 1
            if call_count < 3:
                raise UpstreamGenericError(error="HTTP 503")
            return "success"

        # When
        result = await policy.execute(failing_then_success)

        # Then: 3번 시도 후 성공
        assert result == "success"
        assert call_count == 3
        assert len(sleep.delays) == 2

    @pytest.mark.asyncio
    async def test_rate_limit_is_retried(self):
        """호출 한도 초과는 재시도 대상"""
        policy = LinearBackoffRetryPolicy(max_attempts=2, sleep=RecordingSleep())
        call_count = 0

        async def rate_limited_once():
            nonlocal call_count
            call_count += 1
            if call_count == 1:
                raise UpstreamRateLimitedError()
            return "ok"

        assert await policy.execute(rate_limited_once) == "ok"
        assert call_count == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [UpstreamAuthError(), UpstreamBadRequestError(error="bad input"), ValueError("boom")],
    )
    async def test_no_retry_on_non_retryable_error(self, error):
        """
        재시도 불가능한 예외는 재시도 예산을 쓰지 않고 즉시 전파되어야 합니다.
        """
        # Given
        sleep = RecordingSleep()
        policy = LinearBackoffRetryPolicy(max_attempts=3, sleep=sleep)
        call_count = 0

        async def non_retryable():
            nonlocal call_count
            call_count += 1
            raise error

        # When/Then
        with pytest.raises(type(error)):
            await policy.execute(non_retryable)

        assert call_count == 1
        assert sleep.delays == []

    @pytest.mark.asyncio
    async def test_raises_last_error_when_attempts_exhausted(self):
        """재시도 횟수 초과 시 마지막 예외 전파"""
        policy = LinearBackoffRetryPolicy(max_attempts=3, sleep=RecordingSleep())
        call_count = 0

        async def always_failing():
            nonlocal call_count
            call_count += 1
            raise UpstreamRateLimitedError(attempt=call_count)

        with pytest.raises(UpstreamRateLimitedError) as exc_info:
            await policy.execute(always_failing)

        assert call_count == 3
        assert exc_info.value.context["attempt"] == 3

    @pytest.mark.asyncio
    async def test_passes_arguments_through(self):
        """함수 인자 전달 테스트"""
        policy = LinearBackoffRetryPolicy(max_attempts=1)

        async def echo(prompt, *, suffix):
            return prompt + suffix

        assert await policy.execute(echo, "a", suffix="b") == "ab"


class TestRetryPolicyDelay:
    """대기 시간 계산 테스트"""

    def test_delay_scales_with_attempt_number(self):
        """대기 시간은 시도 번호에 비례"""
        policy = LinearBackoffRetryPolicy(base_delay=0.5, max_delay=10.0, jitter=0)

        assert policy._calculate_delay(1) == pytest.approx(0.5)
        assert policy._calculate_delay(2) == pytest.approx(1.0)
        assert policy._calculate_delay(3) == pytest.approx(1.5)

    def test_delay_is_capped(self):
        """max_delay를 넘지 않음"""
        policy = LinearBackoffRetryPolicy(base_delay=1.0, max_delay=2.0, jitter=0)

        assert policy._calculate_delay(10) == pytest.approx(2.0)

    def test_jitter_bounds(self):
        """Jitter는 delay * jitter 범위 안에서 추가됨"""
        policy = LinearBackoffRetryPolicy(base_delay=1.0, max_delay=10.0, jitter=0.5)

        for _ in range(50):
            delay = policy._calculate_delay(2)
            assert 2.0 <= delay <= 3.0

    @pytest.mark.asyncio
    async def test_sleeps_between_attempts(self):
        """실패 사이에 계산된 시간만큼 대기"""
        sleep = RecordingSleep()
        policy = LinearBackoffRetryPolicy(max_attempts=3, base_delay=0.2, jitter=0, sleep=sleep)

        async def always_failing():
            raise UpstreamGenericError()

        with pytest.raises(UpstreamGenericError):
            await policy.execute(always_failing)

        assert sleep.delays == pytest.approx([0.2, 0.4])


class TestRetryPolicyConfiguration:
    """설정 검증 테스트"""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_attempts": 0},
            {"base_delay": 0},
            {"base_delay": 2.0, "max_delay": 1.0},
            {"jitter": 1.5},
        ],
    )
    def test_invalid_configuration(self, kwargs):
        with pytest.raises(ValueError):
            LinearBackoffRetryPolicy(**kwargs)

    def test_from_retry_count(self):
        """retry_count=2 → 총 3회 시도"""
        policy = LinearBackoffRetryPolicy.from_retry_count(2, base_delay=0.1)

        assert policy.max_attempts == 3
        assert policy.base_delay == 0.1

    def test_is_retryable(self):
        policy = LinearBackoffRetryPolicy()

        assert policy.is_retryable(UpstreamGenericError())
        assert policy.is_retryable(UpstreamRateLimitedError())
        assert not policy.is_retryable(UpstreamAuthError())
        assert not policy.is_retryable(RuntimeError())
