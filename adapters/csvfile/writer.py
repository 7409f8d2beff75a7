"""
CSV 스냅샷 출력

계좌 스냅샷을 client,available,held,total,locked CSV로 출력.
헤더는 first_write=True일 때만 출력 (전역 카운터 사용 안 함).
"""

import csv
import sys
from decimal import Decimal
from typing import Sequence, TextIO

from core.constants import CsvColumns
from core.domain.events import AccountSnapshot


def format_decimal(value: Decimal) -> str:
    """지수 표기 없이 Decimal 문자열 변환"""
    return f"{value:f}"


def format_snapshot_row(snapshot: AccountSnapshot) -> list[str]:
    """스냅샷을 CSV 행으로 변환"""
    record = snapshot.to_record()
    return [
        str(record["client"]),
        format_decimal(record["available"]),
        format_decimal(record["held"]),
        format_decimal(record["total"]),
        "true" if record["locked"] else "false",
    ]


class CsvSnapshotSink:
    """CSV 스냅샷 출력

    ISnapshotSink Protocol 구현.

    Args:
        stream: 출력 스트림 (None이면 호출 시점의 sys.stdout)
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream
        self._rows_written = 0

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def rows_written(self) -> int:
        """출력한 스냅샷 행 수 (헤더 제외)"""
        return self._rows_written

    async def write(
        self,
        snapshots: Sequence[AccountSnapshot],
        first_write: bool,
    ) -> None:
        stream = self.stream
        writer = csv.writer(stream, lineterminator="\n")

        if first_write:
            writer.writerow(CsvColumns.SNAPSHOT)

        for snapshot in snapshots:
            writer.writerow(format_snapshot_row(snapshot))
            self._rows_written += 1

        stream.flush()
