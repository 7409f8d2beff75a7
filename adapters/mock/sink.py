"""
Mock 스냅샷 출력

테스트용 Mock SnapshotSink.
ISnapshotSink Protocol 준수.
"""

from dataclasses import dataclass
from typing import Sequence

from core.domain.events import AccountSnapshot


@dataclass(frozen=True)
class SnapshotWriteRecord:
    """출력 기록"""

    snapshots: tuple[AccountSnapshot, ...]
    first_write: bool


class MockSnapshotSink:
    """Mock 스냅샷 출력

    모든 write 호출을 기록하여 테스트에서 검증 가능.

    사용 예시:
    ```python
    sink = MockSnapshotSink()

    await run_pipeline(source, sink)

    assert len(sink.writes) == 1
    assert sink.writes[0].first_write is True
    ```
    """

    def __init__(self) -> None:
        self.writes: list[SnapshotWriteRecord] = []

    async def write(
        self,
        snapshots: Sequence[AccountSnapshot],
        first_write: bool,
    ) -> None:
        self.writes.append(
            SnapshotWriteRecord(snapshots=tuple(snapshots), first_write=first_write)
        )

    @property
    def snapshots(self) -> list[AccountSnapshot]:
        """출력된 전체 스냅샷 (순서대로)"""
        return [snapshot for record in self.writes for snapshot in record.snapshots]

    def latest_by_account(self) -> dict[int, AccountSnapshot]:
        """계좌별 마지막 스냅샷"""
        return {snapshot.account_id: snapshot for snapshot in self.snapshots}

    def clear(self) -> None:
        """기록 초기화"""
        self.writes.clear()
