"""
계좌 Ledger

거래 이벤트를 계좌별 잔액으로 재생하는 메모리 Ledger.
분쟁/해소/지불거절 수명주기와 계좌 잠금 규칙을 적용함.

사용 예시:
```python
from core.ledger import InMemoryLedger, LedgerError

ledger = InMemoryLedger()

try:
    await ledger.process_transaction(event.account_id, event.tx_id, event)
except LedgerError as e:
    logger.warning(f"Event rejected: {e}")

snapshots = await ledger.all_snapshots()
```
"""

from core.ledger.account import Account
from core.ledger.aggregate import Aggregate
from core.ledger.errors import (
    AccountNotFoundError,
    DisputedTransactionError,
    InsufficientFundsError,
    LedgerError,
    LockedAccountError,
    MissingAmountError,
    SuspiciousTransactionError,
    TransactionNotFoundError,
)
from core.ledger.store import InMemoryLedger

__all__ = [
    # 핵심 클래스
    "Aggregate",
    "Account",
    "InMemoryLedger",
    # 오류
    "LedgerError",
    "LockedAccountError",
    "TransactionNotFoundError",
    "InsufficientFundsError",
    "DisputedTransactionError",
    "SuspiciousTransactionError",
    "MissingAmountError",
    "AccountNotFoundError",
]
