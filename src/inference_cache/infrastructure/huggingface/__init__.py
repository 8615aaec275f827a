"""
Hugging Face Inference API 연동
"""

from .client import HuggingFaceTextGenerator

__all__ = ["HuggingFaceTextGenerator"]
