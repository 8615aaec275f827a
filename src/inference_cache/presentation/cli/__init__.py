"""
CLI 프레젠테이션 계층
"""

from .cache_commands import cli, main

__all__ = ["cli", "main"]
