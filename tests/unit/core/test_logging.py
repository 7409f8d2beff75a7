"""
core/logging.py 테스트

로깅 핸들러 구성 및 레벨 파싱
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import pytest

from core.logging import get_log_file_path, parse_log_level, setup_logging


@pytest.fixture
def restore_root_logger():
    """루트 로거 핸들러/레벨 복구"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """setup_logging 테스트"""

    def test_console_only(self, restore_root_logger: None) -> None:
        """log_dir 없으면 stderr 콘솔 핸들러만"""
        root = setup_logging("replay", console_level=logging.WARNING)

        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
        assert handler.level == logging.WARNING

    def test_with_file_handler(self, temp_dir: Path, restore_root_logger: None) -> None:
        """log_dir 지정 시 파일 핸들러 추가"""
        log_dir = temp_dir / "logs"

        root = setup_logging("replay", log_dir=log_dir)

        file_handlers = [
            h for h in root.handlers if isinstance(h, TimedRotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert log_dir.is_dir()

        logging.getLogger("replay.test").info("hello")
        file_handlers[0].flush()
        content = get_log_file_path("replay", log_dir).read_text(encoding="utf-8")
        assert "hello" in content

    def test_repeated_setup_does_not_duplicate(self, restore_root_logger: None) -> None:
        """반복 호출 시 핸들러 중복 없음"""
        setup_logging("replay")
        root = setup_logging("replay")

        assert len(root.handlers) == 1


class TestParseLogLevel:
    """parse_log_level 테스트"""

    def test_names(self) -> None:
        """대소문자 무시"""
        assert parse_log_level("debug") == logging.DEBUG
        assert parse_log_level(" WARNING ") == logging.WARNING

    def test_int_passthrough(self) -> None:
        """정수는 그대로"""
        assert parse_log_level(logging.ERROR) == logging.ERROR

    def test_unknown(self) -> None:
        """알 수 없는 이름"""
        with pytest.raises(ValueError):
            parse_log_level("LOUD")


class TestLogFilePath:
    """get_log_file_path 테스트"""

    def test_path(self, temp_dir: Path) -> None:
        """프로세스 이름 기반 파일명"""
        assert get_log_file_path("replay", temp_dir) == temp_dir / "replay.log"
