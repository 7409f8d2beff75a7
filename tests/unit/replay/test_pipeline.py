"""
run_pipeline / 오류 핸들러 테스트
"""

import io
import logging

import pytest

from adapters.csvfile import CsvSnapshotSink
from adapters.interfaces import IngestError
from adapters.mock import MockEventSource, MockSnapshotSink
from core.domain.events import TransactionEvent
from core.ledger import InMemoryLedger
from core.ledger.errors import LockedAccountError
from core.types import EmissionPolicy
from replay.dispatcher import CallbackErrorHandler, LoggingErrorHandler
from replay.pipeline import run_pipeline


class TestRunPipeline:
    """run_pipeline 테스트"""

    @pytest.mark.asyncio
    async def test_reference_scenario_to_csv(
        self, reference_events: list[TransactionEvent]
    ) -> None:
        """참조 시나리오 CSV 출력"""
        stream = io.StringIO()

        report = await run_pipeline(MockEventSource(reference_events), CsvSnapshotSink(stream))

        assert stream.getvalue() == (
            "client,available,held,total,locked\n"
            "1,60702.514,752.56,61455.074,false\n"
            "2,6690.43,0,6690.43,false\n"
            # Decimal 지수 유지 (held 45.768 해소 후 0.000)
            "3,8328.446,0.000,8328.446,true\n"
        )
        assert report.events_applied == 18

    @pytest.mark.asyncio
    async def test_uses_given_ledger(self) -> None:
        """주입한 Ledger에 반영"""
        ledger = InMemoryLedger()

        await run_pipeline(
            MockEventSource([TransactionEvent.deposit(5, 1, "2")]),
            MockSnapshotSink(),
            ledger=ledger,
        )

        assert await ledger.contains(5) is True
        assert ledger.get_stats()["processed_count"] == 1

    @pytest.mark.asyncio
    async def test_shared_error_handler(self) -> None:
        """하나의 핸들러로 파싱/거부 오류 모두 수신"""
        received: list[Exception] = []

        async def on_error(error: Exception) -> None:
            received.append(error)

        await run_pipeline(
            MockEventSource(
                [
                    IngestError("bad", line=2),
                    TransactionEvent.deposit(1, 1, "1"),
                    TransactionEvent.dispute(1, 1),
                    TransactionEvent.chargeback(1, 1),
                    TransactionEvent.deposit(1, 2, "1"),
                ]
            ),
            MockSnapshotSink(),
            policy=EmissionPolicy.PER_EVENT,
            error_handler=CallbackErrorHandler(on_error),
        )

        assert isinstance(received[0], IngestError)
        assert isinstance(received[1], LockedAccountError)
        assert len(received) == 2

    @pytest.mark.asyncio
    async def test_policy_accepts_string(self) -> None:
        """정책은 문자열 값도 허용"""
        sink = MockSnapshotSink()

        await run_pipeline(
            MockEventSource([TransactionEvent.deposit(1, 1, "1")]),
            sink,
            policy="per_event",  # type: ignore[arg-type]
        )

        assert len(sink.writes) == 1


class TestLoggingErrorHandler:
    """LoggingErrorHandler 테스트"""

    @pytest.mark.asyncio
    async def test_logs_with_prefix(self, caplog: pytest.LogCaptureFixture) -> None:
        """접두 문구와 함께 로그"""
        handler = LoggingErrorHandler("Error processing transaction")

        with caplog.at_level(logging.WARNING):
            await handler.handle_error(LockedAccountError(7))

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert record.getMessage().startswith("Error processing transaction: ")
        assert "Transaction 7 was ignored" in record.getMessage()
        assert record.error_type == "LockedAccountError"

    @pytest.mark.asyncio
    async def test_custom_level(self, caplog: pytest.LogCaptureFixture) -> None:
        """로그 레벨 지정"""
        handler = LoggingErrorHandler("Source", level=logging.ERROR)

        with caplog.at_level(logging.WARNING):
            await handler.handle_error(IngestError("bad", line=1))

        assert caplog.records[0].levelno == logging.ERROR
        assert caplog.records[0].getMessage() == "Source: line 1: bad"
