"""
거래 이벤트 / 스냅샷 도메인 모델

입력 이벤트(TransactionEvent)와 출력 스냅샷(AccountSnapshot)은 불변.
모든 금액은 Decimal 타입 사용 (float 금지).
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from core.types import TransactionType


@dataclass(frozen=True)
class TransactionEvent:
    """거래 이벤트

    amount는 입금/출금에만 존재.
    분쟁/해소/지불거절은 tx_id로 이전 거래를 참조함.

    Attributes:
        account_id: 계좌 ID (client, u16)
        tx_id: 거래 ID (tx, u32)
        kind: 거래 유형
        amount: 거래 금액 (입금/출금만)
    """

    account_id: int
    tx_id: int
    kind: TransactionType
    amount: Decimal | None = None

    def __post_init__(self) -> None:
        if self.amount is None:
            return
        if isinstance(self.amount, float):
            raise TypeError("amount는 Decimal이어야 합니다 (float 금지)")
        if not self.amount.is_finite():
            raise ValueError(f"amount는 유한한 값이어야 합니다: {self.amount}")
        if self.amount < 0:
            raise ValueError(f"amount는 음수일 수 없습니다: {self.amount}")

    @classmethod
    def deposit(cls, account_id: int, tx_id: int, amount: Decimal | str) -> "TransactionEvent":
        """입금 이벤트 생성 헬퍼"""
        return cls(account_id, tx_id, TransactionType.DEPOSIT, Decimal(amount))

    @classmethod
    def withdrawal(cls, account_id: int, tx_id: int, amount: Decimal | str) -> "TransactionEvent":
        """출금 이벤트 생성 헬퍼"""
        return cls(account_id, tx_id, TransactionType.WITHDRAWAL, Decimal(amount))

    @classmethod
    def dispute(cls, account_id: int, tx_id: int) -> "TransactionEvent":
        """분쟁 이벤트 생성 헬퍼"""
        return cls(account_id, tx_id, TransactionType.DISPUTE)

    @classmethod
    def resolve(cls, account_id: int, tx_id: int) -> "TransactionEvent":
        """분쟁 해소 이벤트 생성 헬퍼"""
        return cls(account_id, tx_id, TransactionType.RESOLVE)

    @classmethod
    def chargeback(cls, account_id: int, tx_id: int) -> "TransactionEvent":
        """지불거절 이벤트 생성 헬퍼"""
        return cls(account_id, tx_id, TransactionType.CHARGEBACK)


@dataclass
class Balance:
    """계좌 잔액

    Attributes:
        available: 사용 가능 금액 (= total - held)
        held: 분쟁으로 보류된 금액 (= total - available)
    """

    available: Decimal = field(default_factory=Decimal)
    held: Decimal = field(default_factory=Decimal)

    @property
    def total(self) -> Decimal:
        """총 잔액 (저장하지 않고 계산)"""
        return self.available + self.held


@dataclass(frozen=True)
class AccountSnapshot:
    """계좌 스냅샷

    특정 시점의 계좌 상태를 읽은 불변 값.
    """

    account_id: int
    available: Decimal
    held: Decimal
    total: Decimal
    locked: bool

    def to_record(self) -> dict[str, Any]:
        """출력 레코드로 변환 (CSV 컬럼명 기준)"""
        return {
            "client": self.account_id,
            "available": self.available,
            "held": self.held,
            "total": self.total,
            "locked": self.locked,
        }
