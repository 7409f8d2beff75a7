"""
파이프라인 실행 결과
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any


@dataclass
class PipelineReport:
    """파이프라인 실행 통계

    Attributes:
        events_received: 소스에서 받은 이벤트 수 (IngestError 제외)
        events_applied: Ledger에 반영된 이벤트 수
        ingest_errors: 파싱 실패로 건너뛴 레코드 수
        ledger_errors: Ledger가 거부한 이벤트 수 (오류 종류별)
        snapshots_written: 출력된 스냅샷 수
        source_failed: 이벤트 소스가 도중에 실패했는지 여부
    """

    events_received: int = 0
    events_applied: int = 0
    ingest_errors: int = 0
    ledger_errors: Counter[str] = field(default_factory=Counter)
    snapshots_written: int = 0
    source_failed: bool = False

    @property
    def rejected_events(self) -> int:
        """Ledger가 거부한 이벤트 총수"""
        return sum(self.ledger_errors.values())

    @property
    def failed_records(self) -> int:
        """실패한 레코드 총수 (파싱 실패 + 거부)"""
        return self.ingest_errors + self.rejected_events

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (로깅용)"""
        return {
            "events_received": self.events_received,
            "events_applied": self.events_applied,
            "ingest_errors": self.ingest_errors,
            "ledger_errors": dict(self.ledger_errors),
            "snapshots_written": self.snapshots_written,
            "source_failed": self.source_failed,
        }
