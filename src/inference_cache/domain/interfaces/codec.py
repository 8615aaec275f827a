"""
캐시 값 Codec 인터페이스

캐시는 값을 불투명한 문자열로만 다룹니다. 값 타입과 문자열 사이의
변환은 호출자가 주입한 codec이 담당합니다.
"""

from abc import ABC, abstractmethod
from typing import Any


class ICacheCodec(ABC):
    """캐시 값 인코딩/디코딩 인터페이스"""

    @abstractmethod
    def encode(self, value: Any) -> str:
        """값을 문자열로 인코딩 (실패 시 SerializationError)"""
        pass

    @abstractmethod
    def decode(self, text: str) -> Any:
        """문자열을 값으로 디코딩 (실패 시 SerializationError)"""
        pass
