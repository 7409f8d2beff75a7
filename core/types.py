"""
타입 정의 모듈

Enum 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class TransactionType(str, Enum):
    """거래 유형

    CSV 레코드의 type 컬럼 값과 동일 (소문자).
    """

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"

    @property
    def moves_funds(self) -> bool:
        """금액을 직접 가지는 거래인지 (입금/출금)"""
        return self in (TransactionType.DEPOSIT, TransactionType.WITHDRAWAL)


class EmissionPolicy(str, Enum):
    """스냅샷 출력 정책

    - BATCH: 이벤트 소스를 모두 처리한 뒤 전체 계좌 스냅샷 1회 출력
    - PER_EVENT: 이벤트 처리 성공 시마다 해당 계좌 스냅샷 출력
    """

    BATCH = "batch"
    PER_EVENT = "per_event"
