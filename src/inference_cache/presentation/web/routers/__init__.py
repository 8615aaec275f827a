"""
웹 API 라우터
"""

from .ai import router as ai_router
from .ai_cache import router as ai_cache_router
from .health import router as health_router

__all__ = ["ai_router", "ai_cache_router", "health_router"]
