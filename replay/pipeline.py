"""
Replay 파이프라인

이벤트 소스 → Ledger → 스냅샷 출력 연결 헬퍼
"""

from adapters.interfaces import IEventSource, ISnapshotSink
from core.ledger import InMemoryLedger
from core.types import EmissionPolicy
from replay.dispatcher import (
    Dispatcher,
    ErrorHandler,
    LoggingErrorHandler,
    PipelineReport,
    TransactionHandler,
)


async def run_pipeline(
    source: IEventSource,
    sink: ISnapshotSink,
    policy: EmissionPolicy = EmissionPolicy.BATCH,
    ledger: InMemoryLedger | None = None,
    error_handler: ErrorHandler | None = None,
) -> PipelineReport:
    """이벤트 소스를 끝까지 재생

    Args:
        source: 이벤트 소스
        sink: 스냅샷 출력
        policy: 스냅샷 출력 정책 (기본: BATCH)
        ledger: 사용할 Ledger (None이면 새로 생성)
        error_handler: 이벤트 오류 보고 핸들러 (None이면 로그)

    Returns:
        실행 통계
    """
    handler = TransactionHandler(
        ledger=ledger if ledger is not None else InMemoryLedger(),
        sink=sink,
        policy=policy,
        error_handler=error_handler or LoggingErrorHandler("Error processing transaction"),
    )
    dispatcher = Dispatcher(
        handler,
        source_error_handler=error_handler or LoggingErrorHandler("An error from the event source"),
    )
    return await dispatcher.dispatch_with_source(source)
