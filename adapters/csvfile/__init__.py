"""
CSV 어댑터

거래 CSV 입력과 계좌 스냅샷 CSV 출력.
"""

from adapters.csvfile.models import TransactionRecord
from adapters.csvfile.reader import CsvEventSource
from adapters.csvfile.writer import CsvSnapshotSink

__all__ = [
    "TransactionRecord",
    "CsvEventSource",
    "CsvSnapshotSink",
]
