"""
Transaction Handler

큐에서 이벤트를 순서대로 꺼내 Ledger에 반영하고 스냅샷 출력.
Dispatcher가 단일 소비자 태스크로 실행함.
"""

import asyncio
import logging
from typing import Sequence

from adapters.interfaces import ISnapshotSink
from core.domain.events import AccountSnapshot, TransactionEvent
from core.ledger import InMemoryLedger, LedgerError
from core.types import EmissionPolicy
from replay.dispatcher.error_handler import ErrorHandler, LoggingErrorHandler
from replay.dispatcher.report import PipelineReport

logger = logging.getLogger(__name__)

# None은 큐 종료 표시 (채널 닫힘)
EventQueue = asyncio.Queue[TransactionEvent | None]


class TransactionHandler:
    """거래 이벤트 소비자

    출력 정책:
    - BATCH: 큐가 닫힌 뒤 all_snapshots()를 한 번 출력
    - PER_EVENT: 이벤트 반영 성공 시마다 해당 계좌 스냅샷 출력

    Args:
        ledger: 거래를 반영할 Ledger
        sink: 스냅샷 출력
        policy: 출력 정책 (기본: BATCH)
        error_handler: LedgerError 보고 핸들러
    """

    def __init__(
        self,
        ledger: InMemoryLedger,
        sink: ISnapshotSink,
        policy: EmissionPolicy = EmissionPolicy.BATCH,
        error_handler: ErrorHandler | None = None,
    ):
        self.ledger = ledger
        self.sink = sink
        self.policy = EmissionPolicy(policy)
        self.error_handler = error_handler or LoggingErrorHandler(
            "Error processing transaction"
        )

        # 첫 출력 여부 (헤더 제어용, 핸들러 인스턴스 단위)
        self._has_written = False

    async def handle(self, queue: EventQueue, report: PipelineReport) -> None:
        """큐가 닫힐 때까지 이벤트 처리

        Args:
            queue: 이벤트 큐 (None 수신 시 종료)
            report: 통계를 기록할 리포트
        """
        while True:
            event = await queue.get()
            try:
                if event is None:
                    break
                await self._process(event, report)
            finally:
                queue.task_done()

        if self.policy == EmissionPolicy.BATCH:
            snapshots = await self.ledger.all_snapshots()
            await self._emit(snapshots, report)

        logger.debug(
            "Transaction handler drained",
            extra={"applied": report.events_applied, "rejected": report.rejected_events},
        )

    async def _process(self, event: TransactionEvent, report: PipelineReport) -> None:
        try:
            account_id = await self.ledger.process_transaction(
                event.account_id, event.tx_id, event
            )
        except LedgerError as e:
            # 이벤트 폐기 후 보고 (재시도 없음)
            report.ledger_errors[e.kind] += 1
            await self.error_handler.handle_error(e)
            return

        report.events_applied += 1

        if self.policy == EmissionPolicy.PER_EVENT:
            snapshot = await self.ledger.snapshot(account_id)
            await self._emit([snapshot], report)

    async def _emit(
        self,
        snapshots: Sequence[AccountSnapshot],
        report: PipelineReport,
    ) -> None:
        await self.sink.write(snapshots, first_write=not self._has_written)
        self._has_written = True
        report.snapshots_written += len(snapshots)
