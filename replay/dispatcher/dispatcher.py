"""
Dispatcher

이벤트 소스를 순서대로 읽어 무제한 큐로 단일 소비자 태스크에 전달.
소스가 끝나면 큐를 닫고 소비자가 모두 처리할 때까지 대기.
"""

import asyncio
import logging

from adapters.interfaces import IEventSource, IngestError
from replay.dispatcher.error_handler import ErrorHandler, LoggingErrorHandler
from replay.dispatcher.handler import EventQueue, TransactionHandler
from replay.dispatcher.report import PipelineReport

logger = logging.getLogger(__name__)


class Dispatcher:
    """이벤트 Dispatcher

    - 생산자: dispatch_with_source()가 소스를 순회하며 큐에 적재
    - 소비자: TransactionHandler 태스크 1개
    - IngestError는 오류 핸들러로 보고하고 건너뜀
    - 큐 용량 제한 없음 (소비자가 느려도 생산자를 막지 않음)

    Args:
        handler: 이벤트 소비자
        source_error_handler: IngestError 보고 핸들러

    사용 예시:
    ```python
    handler = TransactionHandler(InMemoryLedger(), CsvSnapshotSink())
    dispatcher = Dispatcher(handler)

    report = await dispatcher.dispatch_with_source(CsvEventSource(path))
    ```
    """

    def __init__(
        self,
        handler: TransactionHandler,
        source_error_handler: ErrorHandler | None = None,
    ):
        self.handler = handler
        self.source_error_handler = source_error_handler or LoggingErrorHandler(
            "An error from the event source"
        )

    async def dispatch_with_source(self, source: IEventSource) -> PipelineReport:
        """소스가 끝날 때까지 이벤트 전달

        소스 자체가 실패해도 지금까지 받은 이벤트는 모두 처리하고 정상 종료.

        Args:
            source: 이벤트 소스

        Returns:
            실행 통계
        """
        report = PipelineReport()
        queue: EventQueue = asyncio.Queue()
        consumer = asyncio.create_task(self.handler.handle(queue, report))

        try:
            await self._pump(source, queue, consumer, report)
        finally:
            # 큐 닫기 → 소비자 종료 대기
            queue.put_nowait(None)

        await consumer

        logger.info(
            "Dispatch completed",
            extra=report.to_dict(),
        )
        return report

    async def _pump(
        self,
        source: IEventSource,
        queue: EventQueue,
        consumer: asyncio.Task,
        report: PipelineReport,
    ) -> None:
        """소스 → 큐 적재"""
        try:
            async for item in source:
                # 소비자가 먼저 죽었으면 더 적재하지 않음 (await consumer에서 예외 전파)
                if consumer.done():
                    logger.error("Consumer stopped before the source was exhausted")
                    return

                if isinstance(item, IngestError):
                    report.ingest_errors += 1
                    await self.source_error_handler.handle_error(item)
                    continue

                report.events_received += 1
                queue.put_nowait(item)
        except Exception as e:
            report.source_failed = True
            logger.error(
                f"Event source failed: {e}",
                extra={"events_received": report.events_received},
                exc_info=True,
            )
