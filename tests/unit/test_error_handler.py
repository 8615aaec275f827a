"""
에러 시스템 단위 테스트
"""

import pytest

from inference_cache.domain.errors import (
    ErrorCode,
    InferenceCacheError,
    format_error_message,
    handle_error,
)
from inference_cache.domain.exceptions import (
    SerializationError,
    UpstreamAuthError,
    UpstreamBadRequestError,
    UpstreamGenericError,
    UpstreamRateLimitedError,
    UpstreamTimeoutError,
)


class TestErrorCodes:
    def test_category(self):
        assert ErrorCode.API_TIMEOUT.category == "API"
        assert ErrorCode.CONFIG_INVALID.category == "Config"
        assert ErrorCode.CACHE_SERIALIZATION_FAILED.category == "Cache"

    def test_str(self):
        assert str(ErrorCode.API_TIMEOUT) == "API_TIMEOUT (4006)"


class TestErrorMessages:
    def test_template_is_filled(self):
        message = format_error_message(ErrorCode.API_TIMEOUT, timeout=25)
        assert message == (
            "The AI model took too long to respond (25s). Please try a simpler query."
        )

    def test_missing_context_renders_unknown(self):
        message = format_error_message(ErrorCode.API_REQUEST_FAILED)
        assert message == "Failed to generate AI response: unknown"


class TestHandleError:
    """handle_error 매핑 테스트"""

    @pytest.mark.parametrize(
        "error_code, error_class, kind, retryable",
        [
            (ErrorCode.API_TIMEOUT, UpstreamTimeoutError, "timeout", False),
            (ErrorCode.API_KEY_INVALID, UpstreamAuthError, "authentication", False),
            (ErrorCode.API_BAD_REQUEST, UpstreamBadRequestError, "bad_request", False),
            (ErrorCode.API_RATE_LIMIT_EXCEEDED, UpstreamRateLimitedError, "rate_limit", True),
            (ErrorCode.API_REQUEST_FAILED, UpstreamGenericError, "generic", True),
        ],
    )
    def test_upstream_error_classes(self, error_code, error_class, kind, retryable):
        error = handle_error(error_code, log=False)

        assert type(error) is error_class
        assert error.kind == kind
        assert error.retryable is retryable

    def test_serialization_error_mapping(self):
        error = handle_error(ErrorCode.CACHE_SERIALIZATION_FAILED, log=False, key="abc")
        assert isinstance(error, SerializationError)
        assert "abc" in error.message

    def test_unmapped_code_uses_base_class(self):
        error = handle_error(ErrorCode.UNKNOWN_ERROR, log=False, error="boom")
        assert type(error) is InferenceCacheError

    def test_original_error_fills_error_context(self):
        original = ConnectionError("connection reset")
        error = handle_error(ErrorCode.API_REQUEST_FAILED, original_error=original, log=False)

        assert error.original_error is original
        assert error.message == "Failed to generate AI response: connection reset"


class TestInferenceCacheError:
    def test_to_dict(self):
        error = UpstreamTimeoutError(timeout=25, model="m")

        assert error.to_dict() == {
            "error_code": "API_TIMEOUT",
            "error_number": 4006,
            "category": "API",
            "message": error.message,
            "context": {"timeout": 25, "model": "m"},
        }

    def test_str_includes_code(self):
        error = UpstreamAuthError()
        assert str(error).startswith("[API_KEY_INVALID (4002)] ")
