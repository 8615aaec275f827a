"""
구조화된 로깅 설정 모듈

structlog 라이브러리를 사용하여 JSON 형식 로그를 출력하고,
component 등 메타데이터를 자동으로 포함합니다.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

import structlog
from structlog.processors import JSONRenderer
from structlog.stdlib import add_log_level

# JSON 직렬화 가능한 타입 정의
JSONSerializable = Union[str, int, float, bool, None, dict, list]

LOG_FILE_NAME = "inference-cache.log"
ERROR_LOG_FILE_NAME = "inference-cache-error.log"


def configure_structlog(
    log_dir: Optional[str] = None,
    log_level: str = "INFO",
    enable_json: bool = True,
) -> None:
    """
    structlog를 설정합니다.

    Args:
        log_dir: 로그 파일 디렉토리 (None이면 콘솔에만 출력)
        log_level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_json: JSON 형식 출력 활성화 여부 (False시 콘솔 형식)

    Example:
        >>> configure_structlog(log_dir="logs", log_level="INFO", enable_json=True)
        >>> logger = get_logger(__name__, component="ResponseCache")
        >>> logger.info("Cache cleared", previous_size=3)
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if enable_json:
        processors.append(JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        # 메인 로그: 10MB, 에러 로그: 5MB
        handlers.append(
            logging.handlers.RotatingFileHandler(
                str(log_path / LOG_FILE_NAME),
                maxBytes=10 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8"
            )
        )
        error_handler = logging.handlers.RotatingFileHandler(
            str(log_path / ERROR_LOG_FILE_NAME),
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8"
        )
        error_handler.setLevel(logging.ERROR)
        handlers.append(error_handler)

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper(), logging.INFO),
        handlers=handlers,
        force=True
    )


def get_logger(name: str, **context: JSONSerializable) -> structlog.stdlib.BoundLogger:
    """
    구조화된 로거를 가져옵니다.

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)
        **context: 기본 컨텍스트 (JSON 직렬화 가능한 타입만 허용)
                  예: component, model 등

    Returns:
        BoundLogger 인스턴스 (메타데이터가 바인딩된 로거)

    Example:
        >>> logger = get_logger(__name__, component="Gateway")
        >>> logger.info("Cache hit", key_prefix="3f2a9c01")
    """
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger
