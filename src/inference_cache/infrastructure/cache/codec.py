"""
JSON 기반 캐시 값 Codec
"""

import json
from typing import Any

from ...domain.exceptions import SerializationError
from ...domain.interfaces import ICacheCodec


class JsonCodec(ICacheCodec):
    """
    json.dumps / json.loads 기반 codec

    JSON으로 왕복 가능한 값(dict, list, str, 숫자, bool, None)만 지원합니다.
    """

    def __init__(self, ensure_ascii: bool = False):
        self.ensure_ascii = ensure_ascii

    def encode(self, value: Any) -> str:
        try:
            return json.dumps(value, ensure_ascii=self.ensure_ascii, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(original_error=e) from e

    def decode(self, text: str) -> Any:
        try:
            return json.loads(text)
        except (TypeError, ValueError) as e:
            raise SerializationError(original_error=e) from e
