"""
Dispatcher 모듈

이벤트 소스를 읽어 단일 소비자 태스크로 Ledger에 전달
"""

from replay.dispatcher.dispatcher import Dispatcher
from replay.dispatcher.error_handler import (
    CallbackErrorHandler,
    ErrorHandler,
    LoggingErrorHandler,
)
from replay.dispatcher.handler import TransactionHandler
from replay.dispatcher.report import PipelineReport

__all__ = [
    "Dispatcher",
    "TransactionHandler",
    "PipelineReport",
    "ErrorHandler",
    "LoggingErrorHandler",
    "CallbackErrorHandler",
]
