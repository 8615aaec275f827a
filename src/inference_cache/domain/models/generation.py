"""
텍스트 생성 옵션 모델
"""

from dataclasses import dataclass, field


DEFAULT_MODEL = "mistralai/Mistral-7B-v0.1"


@dataclass(frozen=True)
class GenerationOptions:
    """
    Upstream 텍스트 생성 파라미터

    Attributes:
        max_tokens: 최대 생성 토큰 수
        temperature: 샘플링 온도
        top_p: nucleus sampling 임계값
        model: 모델 식별자
    """
    max_tokens: int = 512
    temperature: float = 0.7
    top_p: float = 0.95
    model: str = field(default=DEFAULT_MODEL)
