"""
CSV 이벤트 소스

거래 CSV 파일을 한 줄씩 읽어 TransactionEvent로 변환.
잘못된 레코드는 IngestError로 내보내고 스트림은 계속 진행.

형식:
    type,client,tx,amount
    deposit,1,1,1.0
    dispute,1,1
"""

import asyncio
import csv
import logging
from pathlib import Path
from typing import AsyncIterator

from pydantic import ValidationError

from adapters.csvfile.models import TransactionRecord, describe_validation_error
from adapters.interfaces import IngestError, SourceItem
from core.constants import CsvColumns

logger = logging.getLogger(__name__)

# 필수 헤더 (amount는 생략 가능)
REQUIRED_COLUMNS = ("type", "client", "tx")


class CsvEventSource:
    """CSV 이벤트 소스

    IEventSource Protocol 구현.
    - 첫 줄은 헤더 (컬럼 순서는 자유)
    - 모든 필드의 앞뒤 공백 제거
    - amount 컬럼은 생략하거나 비워둘 수 있음
    - 빈 줄은 무시
    - 한 번만 순회 가능

    Args:
        path: CSV 파일 경로
        encoding: 파일 인코딩

    사용 예시:
    ```python
    source = CsvEventSource(Path("transactions.csv"))

    async for item in source:
        if isinstance(item, IngestError):
            logger.warning(f"Skipped: {item}")
            continue
        await ledger.process_transaction(item.account_id, item.tx_id, item)
    ```
    """

    def __init__(self, path: Path, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding
        self._consumed = False

        # 통계
        self._row_count = 0
        self._error_count = 0

    def __aiter__(self) -> AsyncIterator[SourceItem]:
        if self._consumed:
            raise RuntimeError(f"CSV source already consumed: {self.path}")
        self._consumed = True
        return self._stream()

    async def _stream(self) -> AsyncIterator[SourceItem]:
        with self.path.open(newline="", encoding=self.encoding) as file:
            reader = csv.reader(file)
            header: list[str] | None = None

            for row in reader:
                fields = [value.strip() for value in row]

                # 빈 줄 무시
                if not any(fields):
                    continue

                if header is None:
                    header = [name.lower() for name in fields]
                    missing = [name for name in REQUIRED_COLUMNS if name not in header]
                    if missing:
                        # 헤더가 잘못되면 나머지 줄도 해석 불가 → 스트림 종료
                        self._error_count += 1
                        logger.error(
                            f"CSV header missing columns: {missing}",
                            extra={"path": str(self.path)},
                        )
                        yield IngestError(
                            f"header missing columns {missing}, expected {list(CsvColumns.EVENT)}",
                            line=reader.line_num,
                        )
                        return
                    continue

                self._row_count += 1
                item = self._parse_row(header, fields, reader.line_num)
                if isinstance(item, IngestError):
                    self._error_count += 1
                yield item

                # 소비자 태스크에 실행 기회 양보
                await asyncio.sleep(0)

        logger.debug(
            f"CSV source exhausted: {self.path}",
            extra={"rows": self._row_count, "errors": self._error_count},
        )

    def _parse_row(self, header: list[str], fields: list[str], line: int) -> SourceItem:
        """한 줄을 이벤트로 변환"""
        if len(fields) > len(header):
            return IngestError(
                f"expected at most {len(header)} fields, got {len(fields)}",
                line=line,
            )

        # 뒤쪽 컬럼 생략 허용 (flexible)
        values = dict(zip(header, fields))
        data = {name: values.get(name) for name in CsvColumns.EVENT}

        try:
            record = TransactionRecord.model_validate(data)
        except ValidationError as e:
            return IngestError(describe_validation_error(e), line=line)

        return record.to_event()

    def get_stats(self) -> dict[str, int]:
        """통계 반환"""
        return {
            "row_count": self._row_count,
            "error_count": self._error_count,
        }
