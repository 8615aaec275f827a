"""
Domain 계층 예외 정의.

Upstream 텍스트 생성 호출의 실패 분류와 캐시 계층 내부 오류를 정의합니다.

실패 분류 (호출자가 사용자 메시지를 구분하기 위해 사용):
    - UpstreamTimeoutError: 하드 타임아웃 초과 (재시도 포함 전체 시간)
    - UpstreamAuthError: 인증/인가 실패, 재시도하지 않음
    - UpstreamBadRequestError: 잘못된 요청, 재시도하지 않음
    - UpstreamRateLimitedError: 호출 한도 초과, 백오프 후 재시도
    - UpstreamGenericError: 기타 실패, 백오프 후 재시도

캐시 미스는 예외가 아니라 ``None`` 반환으로 표현합니다.

Examples:
    >>> from inference_cache.domain.exceptions import UpstreamTimeoutError
    >>> raise UpstreamTimeoutError(timeout=25)
"""

from typing import Any, Optional

from .errors import (
    ErrorCode,
    InferenceCacheError,
    handle_error,
    register_error_class,
)


class RetryableError(Exception):
    """재시도 가능한 예외의 마커 클래스"""
    pass


class UpstreamError(InferenceCacheError):
    """
    Upstream 텍스트 생성 실패의 기본 클래스

    Attributes:
        kind: 실패 분류 ("timeout", "authentication", "rate_limit",
              "bad_request", "generic")
    """

    kind = "generic"
    default_code = ErrorCode.API_REQUEST_FAILED

    def __init__(
        self,
        error_code: Optional[ErrorCode] = None,
        original_error: Optional[Exception] = None,
        **context: Any
    ):
        super().__init__(
            error_code or self.default_code,
            original_error=original_error,
            **context
        )

    @property
    def retryable(self) -> bool:
        """재시도 가능 여부"""
        return isinstance(self, RetryableError)


class UpstreamTimeoutError(UpstreamError):
    """하드 타임아웃 초과 (재시도 예산을 포함한 전체 시도)"""

    kind = "timeout"
    default_code = ErrorCode.API_TIMEOUT


class UpstreamAuthError(UpstreamError):
    """인증/인가 실패 (재시도 불가)"""

    kind = "authentication"
    default_code = ErrorCode.API_KEY_INVALID


class UpstreamBadRequestError(UpstreamError):
    """요청 형식 오류 (재시도 불가)"""

    kind = "bad_request"
    default_code = ErrorCode.API_BAD_REQUEST


class UpstreamRateLimitedError(UpstreamError, RetryableError):
    """호출 한도 초과 (재시도 가능)"""

    kind = "rate_limit"
    default_code = ErrorCode.API_RATE_LIMIT_EXCEEDED


class UpstreamGenericError(UpstreamError, RetryableError):
    """기타 upstream 실패 (재시도 가능)"""

    kind = "generic"
    default_code = ErrorCode.API_REQUEST_FAILED


class SerializationError(InferenceCacheError):
    """
    캐시 값 인코딩/디코딩 실패

    게이트웨이 내부에서만 사용되며 요청 경로로 전파되지 않습니다.
    """

    def __init__(
        self,
        error_code: ErrorCode = ErrorCode.CACHE_SERIALIZATION_FAILED,
        original_error: Optional[Exception] = None,
        **context: Any
    ):
        context.setdefault("key", "")
        super().__init__(error_code, original_error=original_error, **context)


register_error_class(ErrorCode.API_TIMEOUT, UpstreamTimeoutError)
register_error_class(ErrorCode.API_KEY_INVALID, UpstreamAuthError)
register_error_class(ErrorCode.API_BAD_REQUEST, UpstreamBadRequestError)
register_error_class(ErrorCode.API_RATE_LIMIT_EXCEEDED, UpstreamRateLimitedError)
register_error_class(ErrorCode.API_REQUEST_FAILED, UpstreamGenericError)
register_error_class(ErrorCode.CACHE_SERIALIZATION_FAILED, SerializationError)


__all__ = [
    "RetryableError",
    "UpstreamError",
    "UpstreamTimeoutError",
    "UpstreamAuthError",
    "UpstreamBadRequestError",
    "UpstreamRateLimitedError",
    "UpstreamGenericError",
    "SerializationError",
    "InferenceCacheError",
    "ErrorCode",
    "handle_error",
]
