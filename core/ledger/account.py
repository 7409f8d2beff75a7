"""
Account Aggregate

계좌 상태 머신. 거래 이벤트를 순서대로 적용하여 잔액 계산.

전이 규칙 (전제 조건은 순서대로 검사, 첫 실패 시 상태 변경 없이 중단):
- 공통: 잠긴 계좌 → LockedAccount
- DEPOSIT: 거래 ID 순서 검사 → 금액 필수 → available 증가
- WITHDRAWAL: 거래 ID 순서 검사 → 금액 필수 → 잔액 검사 → available 감소
- DISPUTE: 미분쟁 검사 → 원거래 조회 → 잔액 검사 → available → held 이동
- RESOLVE: 분쟁 중 검사 → 원거래 조회 → held → available 이동
- CHARGEBACK: 분쟁 중 검사 → 원거래 조회 → held 차감 후 계좌 잠금
"""

import logging
from decimal import Decimal

from core.domain.events import AccountSnapshot, Balance, TransactionEvent
from core.ledger.aggregate import Aggregate
from core.ledger.errors import (
    DisputedTransactionError,
    InsufficientFundsError,
    LockedAccountError,
    MissingAmountError,
    SuspiciousTransactionError,
    TransactionNotFoundError,
)
from core.types import TransactionType

logger = logging.getLogger(__name__)


class Account(Aggregate[int, int, TransactionEvent, AccountSnapshot]):
    """계좌 Aggregate

    Ledger만 인스턴스를 소유하며 외부에서 직접 변경하지 않음.
    거래 기록에는 입금/출금만 금액과 함께 보관됨.
    """

    def __init__(self) -> None:
        self._balance = Balance()
        self._transactions: dict[int, TransactionEvent] = {}
        self._disputed: set[int] = set()
        self._highest_seen_tx_id = 0
        self._locked = False

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------

    @property
    def available(self) -> Decimal:
        """사용 가능 금액"""
        return self._balance.available

    @property
    def held(self) -> Decimal:
        """보류 금액"""
        return self._balance.held

    @property
    def total(self) -> Decimal:
        """총 잔액"""
        return self._balance.total

    @property
    def locked(self) -> bool:
        """잠김 여부 (지불거절 이후 True)"""
        return self._locked

    @property
    def highest_seen_tx_id(self) -> int:
        """마지막으로 기록된 입금/출금 거래 ID"""
        return self._highest_seen_tx_id

    @property
    def disputed_tx_ids(self) -> frozenset[int]:
        """분쟁 중인 거래 ID"""
        return frozenset(self._disputed)

    def get_transaction(self, tx_id: int) -> TransactionEvent | None:
        """기록된 거래 조회"""
        return self._transactions.get(tx_id)

    # -------------------------------------------------------------------------
    # Aggregate 구현
    # -------------------------------------------------------------------------

    @classmethod
    def open(cls, first_tx_id: int, event: TransactionEvent) -> "Account":
        """첫 이벤트로 계좌 생성

        금액이 있는 입금만 초기 잔액으로 반영.
        그 외 첫 이벤트는 빈 계좌만 만들고 경고 로그를 남김.
        첫 이벤트가 입금/출금이면 반영 여부와 관계없이 거래 ID 순서 기준이 됨.
        """
        account = cls()

        if event.kind == TransactionType.DEPOSIT and event.amount is not None:
            account._balance.available = event.amount
            account._record(first_tx_id, event)
        else:
            if event.kind.moves_funds:
                account._highest_seen_tx_id = first_tx_id
            logger.warning(
                f"Opening event not applied, account {event.account_id} opened empty",
                extra={
                    "tx_id": first_tx_id,
                    "kind": event.kind.value,
                },
            )

        return account

    def apply_transaction(self, tx_id: int, event: TransactionEvent) -> None:
        """이벤트 적용

        Raises:
            LedgerError: 전제 조건 위반 (상태 변경 없음)
        """
        self._check_not_locked(tx_id)

        kind = event.kind
        if kind == TransactionType.DEPOSIT:
            self._deposit(tx_id, event)
        elif kind == TransactionType.WITHDRAWAL:
            self._withdraw(tx_id, event)
        elif kind == TransactionType.DISPUTE:
            self._dispute(tx_id)
        elif kind == TransactionType.RESOLVE:
            self._resolve(tx_id)
        elif kind == TransactionType.CHARGEBACK:
            self._chargeback(tx_id)
        else:
            raise ValueError(f"Unknown transaction type: {kind}")

    def snapshot(self, aggregate_id: int) -> AccountSnapshot:
        """현재 상태 스냅샷"""
        return AccountSnapshot(
            account_id=aggregate_id,
            available=self._balance.available,
            held=self._balance.held,
            total=self._balance.total,
            locked=self._locked,
        )

    # -------------------------------------------------------------------------
    # 전이
    # -------------------------------------------------------------------------

    def _deposit(self, tx_id: int, event: TransactionEvent) -> None:
        self._check_tx_order(tx_id)
        amount = self._require_amount(tx_id, event)

        self._balance.available += amount
        self._record(tx_id, event)

    def _withdraw(self, tx_id: int, event: TransactionEvent) -> None:
        self._check_tx_order(tx_id)
        amount = self._require_amount(tx_id, event)
        self._check_available(tx_id, amount)

        self._balance.available -= amount
        self._record(tx_id, event)

    def _dispute(self, tx_id: int) -> None:
        # 거래 ID 순서는 검사하지 않음 (과거 거래를 참조하는 이벤트)
        self._check_disputed(tx_id, expected=False)
        amount = self._disputed_amount(tx_id)
        self._check_available(tx_id, amount)

        self._balance.available -= amount
        self._balance.held += amount
        self._disputed.add(tx_id)

    def _resolve(self, tx_id: int) -> None:
        self._check_disputed(tx_id, expected=True)
        amount = self._disputed_amount(tx_id)

        # held가 부족하면 오류 없이 무시
        if self._balance.held < amount:
            logger.debug(f"Resolve skipped, held below disputed amount: tx {tx_id}")
            return

        self._balance.held -= amount
        self._balance.available += amount
        self._disputed.discard(tx_id)

    def _chargeback(self, tx_id: int) -> None:
        self._check_disputed(tx_id, expected=True)
        amount = self._disputed_amount(tx_id)

        # held가 부족하면 오류 없이 무시
        if self._balance.held < amount:
            logger.debug(f"Chargeback skipped, held below disputed amount: tx {tx_id}")
            return

        self._balance.held -= amount
        self._locked = True
        self._disputed.discard(tx_id)

    # -------------------------------------------------------------------------
    # 전제 조건
    # -------------------------------------------------------------------------

    def _record(self, tx_id: int, event: TransactionEvent) -> None:
        self._transactions[tx_id] = event
        self._highest_seen_tx_id = tx_id

    def _check_not_locked(self, tx_id: int) -> None:
        if self._locked:
            raise LockedAccountError(tx_id)

    def _check_tx_order(self, tx_id: int) -> None:
        if tx_id <= self._highest_seen_tx_id:
            raise SuspiciousTransactionError(tx_id, self._highest_seen_tx_id)

    def _check_available(self, tx_id: int, amount: Decimal) -> None:
        if self._balance.available < amount:
            raise InsufficientFundsError(tx_id, self._balance.available, amount)

    def _check_disputed(self, tx_id: int, expected: bool) -> None:
        disputed = tx_id in self._disputed
        if disputed != expected:
            raise DisputedTransactionError(tx_id, disputed=disputed)

    def _require_amount(self, tx_id: int, event: TransactionEvent) -> Decimal:
        if event.amount is None:
            raise MissingAmountError(tx_id)
        return event.amount

    def _disputed_amount(self, tx_id: int) -> Decimal:
        recorded = self._transactions.get(tx_id)
        if recorded is None:
            raise TransactionNotFoundError(tx_id)
        # 기록된 거래는 모두 금액이 있음 (입금/출금만 기록)
        assert recorded.amount is not None
        return recorded.amount
