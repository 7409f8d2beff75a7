"""
오류 핸들러

이벤트 단위 오류(IngestError, LedgerError)를 보고하는 핸들러.
오류는 파이프라인을 중단시키지 않음.
"""

import logging
from typing import Awaitable, Callable, Protocol

logger = logging.getLogger(__name__)


class ErrorHandler(Protocol):
    """오류 핸들러 인터페이스"""

    async def handle_error(self, error: Exception) -> None:
        """오류 처리

        Args:
            error: 보고할 오류
        """
        ...


class LoggingErrorHandler:
    """로그로 오류를 보고하는 핸들러

    로그 형식: "{text}: {error}"

    Args:
        text: 로그 메시지 앞에 붙는 문구
        level: 로그 레벨 (기본: WARNING)
    """

    def __init__(self, text: str = "Error", level: int = logging.WARNING):
        self.text = text
        self.level = level

    async def handle_error(self, error: Exception) -> None:
        logger.log(
            self.level,
            f"{self.text}: {error}",
            extra={"error_type": type(error).__name__},
        )


class CallbackErrorHandler:
    """비동기 콜백을 오류 핸들러로 감싸는 어댑터

    Args:
        callback: 오류를 받는 비동기 함수
    """

    def __init__(self, callback: Callable[[Exception], Awaitable[None]]):
        self._callback = callback

    async def handle_error(self, error: Exception) -> None:
        await self._callback(error)
