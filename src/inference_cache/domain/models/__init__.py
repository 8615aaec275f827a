"""
Domain 모델
"""

from .cache import CacheEntry, CacheStats
from .generation import GenerationOptions, DEFAULT_MODEL

__all__ = [
    "CacheEntry",
    "CacheStats",
    "GenerationOptions",
    "DEFAULT_MODEL",
]
