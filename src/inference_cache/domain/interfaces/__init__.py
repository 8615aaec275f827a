"""
Domain 인터페이스
"""

from .codec import ICacheCodec
from .retry_policy import IRetryPolicy
from .text_generation import ITextGenerationProvider

__all__ = [
    "ICacheCodec",
    "IRetryPolicy",
    "ITextGenerationProvider",
]
