"""
Resilience 패키지

재시도 정책 등 탄력성 관련 기능을 제공합니다.
"""

from .retry_policy import LinearBackoffRetryPolicy

__all__ = [
    "LinearBackoffRetryPolicy",
]
