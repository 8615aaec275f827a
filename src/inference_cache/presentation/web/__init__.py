"""
웹 프레젠테이션 계층 (FastAPI)
"""

from .app import create_app

__all__ = ["create_app"]
