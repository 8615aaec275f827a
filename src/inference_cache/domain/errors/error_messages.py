"""에러 메시지 템플릿

각 에러 코드에 대한 사용자 친화적인 메시지를 제공합니다.
메시지는 대시보드에 그대로 노출되므로 영어로 작성합니다.
"""

from typing import Dict, Any
from .error_codes import ErrorCode


# 에러 코드별 메시지 템플릿
ERROR_MESSAGES: Dict[ErrorCode, str] = {
    # Config 관련
    ErrorCode.CONFIG_INVALID: (
        "Invalid configuration value for '{field_name}': {error}"
    ),
    # API 관련
    ErrorCode.API_KEY_INVALID: (
        "Authentication error with AI provider. Please check your API token."
    ),
    ErrorCode.API_RATE_LIMIT_EXCEEDED: (
        "Too many requests to the AI service. Please try again in a moment."
    ),
    ErrorCode.API_REQUEST_FAILED: (
        "Failed to generate AI response: {error}"
    ),
    ErrorCode.API_BAD_REQUEST: (
        "The AI provider rejected the request: {error}"
    ),
    ErrorCode.API_TIMEOUT: (
        "The AI model took too long to respond ({timeout}s). "
        "Please try a simpler query."
    ),
    # Cache 관련
    ErrorCode.CACHE_SERIALIZATION_FAILED: (
        "Failed to serialize cached response (key: '{key}'): {error}"
    ),
    # 기타
    ErrorCode.UNKNOWN_ERROR: (
        "An unknown error occurred: {error}"
    ),
}


class _MissingAsUnknown(dict):
    def __missing__(self, key: str) -> str:
        return "unknown"


def get_error_message(error_code: ErrorCode) -> str:
    """에러 코드에 해당하는 메시지 템플릿 반환

    Args:
        error_code: 에러 코드

    Returns:
        에러 메시지 템플릿
    """
    return ERROR_MESSAGES.get(error_code, "An unknown error occurred: {error}")


def format_error_message(error_code: ErrorCode, **context: Any) -> str:
    """에러 메시지 템플릿에 컨텍스트를 채워 반환

    템플릿에 필요한 키가 context에 없으면 "unknown"으로 채웁니다.

    Args:
        error_code: 에러 코드
        **context: 템플릿 변수

    Returns:
        완성된 에러 메시지

    Examples:
        >>> format_error_message(ErrorCode.API_TIMEOUT, timeout=25)
        'The AI model took too long to respond (25s). Please try a simpler query.'
    """
    return get_error_message(error_code).format_map(_MissingAsUnknown(context))
