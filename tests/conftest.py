"""
pytest 공통 fixture 정의

Ledger / 파이프라인 테스트용 이벤트 및 CSV 파일 fixture
"""

import tempfile
from pathlib import Path
from typing import Callable, Iterator

import pytest

from core.config.loader import Settings
from core.domain.events import TransactionEvent


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_settings() -> Iterator[None]:
    """Settings 싱글턴 초기화 (테스트 간 격리)"""
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def write_csv(temp_dir: Path) -> Callable[[str, str], Path]:
    """CSV 파일 작성 헬퍼

    사용: path = write_csv("type,client,tx,amount\\ndeposit,1,1,1.0\\n")
    """

    def _write(content: str, name: str = "transactions.csv") -> Path:
        path = temp_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def reference_events() -> list[TransactionEvent]:
    """참조 시나리오 이벤트 (3개 계좌, 입력 순서 그대로)

    기대 결과:
    - client 1: available 60702.514, held 752.56, total 61455.074, unlocked
    - client 2: available 6690.43, held 0, total 6690.43, unlocked
    - client 3: available 8328.446, held 0, total 8328.446, locked
    """
    return [
        TransactionEvent.deposit(1, 1, "55467.44"),
        TransactionEvent.deposit(1, 2, "547.44"),
        TransactionEvent.deposit(3, 4, "5577.6"),
        TransactionEvent.deposit(2, 3, "2344"),
        TransactionEvent.withdrawal(3, 7, "334.756"),
        TransactionEvent.withdrawal(1, 9, "752.56"),
        TransactionEvent.dispute(1, 9),
        TransactionEvent.deposit(3, 11, "4446.23"),
        TransactionEvent.withdrawal(3, 13, "45.768"),
        TransactionEvent.dispute(3, 13),
        TransactionEvent.deposit(1, 15, "6759.754"),
        TransactionEvent.resolve(3, 13),
        TransactionEvent.withdrawal(3, 17, "657.43"),
        TransactionEvent.dispute(3, 17),
        TransactionEvent.deposit(2, 18, "4346.43"),
        TransactionEvent.withdrawal(1, 19, "456"),
        TransactionEvent.chargeback(3, 17),
        TransactionEvent.withdrawal(1, 20, "111"),
    ]


REFERENCE_CSV = """type,client,tx,amount
deposit,1,1,55467.44
deposit,1,2,547.44
deposit,3,4,5577.6
deposit,2,3,2344
withdrawal,3,7,334.756
withdrawal,1,9,752.56
dispute,1,9,
deposit,3,11,4446.23
withdrawal,3,13,45.768
dispute,3,13,
deposit,1,15,6759.754
resolve,3,13,
withdrawal,3,17,657.43
dispute,3,17,
deposit,2,18,4346.43
withdrawal,1,19,456
chargeback,3,17,
withdrawal,1,20,111
"""


@pytest.fixture
def reference_csv(write_csv: Callable[..., Path]) -> Path:
    """참조 시나리오 CSV 파일"""
    return write_csv(REFERENCE_CSV)
