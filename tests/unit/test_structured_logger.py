"""
Tests for structured logging

inference_cache/infrastructure/logging/structured_logger.py 테스트
"""

import json
import logging
from pathlib import Path

import pytest

from inference_cache.infrastructure.logging import configure_structlog, get_logger


@pytest.fixture(autouse=True)
def restore_root_logging():
    """테스트가 바꾼 root 핸들러 복원"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.mark.unit
class TestStructuredLogger:
    """구조화된 로깅 테스트"""

    def test_configure_structlog_creates_log_files(self, tmp_path: Path):
        """configure_structlog이 로그 디렉토리와 파일을 생성하는지 테스트"""
        log_dir = tmp_path / "logs"

        configure_structlog(log_dir=str(log_dir), log_level="INFO", enable_json=True)

        assert log_dir.exists()
        assert (log_dir / "inference-cache.log").exists()
        assert (log_dir / "inference-cache-error.log").exists()

    def test_json_lines_include_context(self, tmp_path: Path):
        """JSON 출력 모드에서 바인딩된 컨텍스트가 포함되는지 테스트"""
        log_dir = tmp_path / "logs"
        configure_structlog(log_dir=str(log_dir), log_level="INFO", enable_json=True)

        logger = get_logger("tests.structured_logger.json", component="ResponseCache")
        logger.info("Cache cleared", previous_size=3)

        lines = [
            json.loads(line)
            for line in (log_dir / "inference-cache.log").read_text().splitlines()
            if line
        ]
        record = next(line for line in lines if line["event"] == "Cache cleared")
        assert record["component"] == "ResponseCache"
        assert record["previous_size"] == 3
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_error_log_only_receives_errors(self, tmp_path: Path):
        """에러 로그 파일에는 ERROR 이상만 기록"""
        log_dir = tmp_path / "logs"
        configure_structlog(log_dir=str(log_dir), log_level="INFO", enable_json=True)

        logger = get_logger("tests.structured_logger.errors")
        logger.info("just info")
        logger.error("something failed")

        content = (log_dir / "inference-cache-error.log").read_text()
        assert "something failed" in content
        assert "just info" not in content

    def test_level_filtering(self, tmp_path: Path):
        log_dir = tmp_path / "logs"
        configure_structlog(log_dir=str(log_dir), log_level="WARNING", enable_json=True)

        logger = get_logger("tests.structured_logger.level")
        logger.info("hidden message")
        logger.warning("visible message")

        content = (log_dir / "inference-cache.log").read_text()
        assert "visible message" in content
        assert "hidden message" not in content

    def test_console_mode_writes_log_file(self, tmp_path: Path):
        """콘솔 출력 모드 테스트"""
        log_dir = tmp_path / "logs"
        configure_structlog(log_dir=str(log_dir), log_level="INFO", enable_json=False)

        logger = get_logger("tests.structured_logger.console")
        logger.info("console message", key="value")

        assert "console message" in (log_dir / "inference-cache.log").read_text()
