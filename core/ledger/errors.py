"""
Ledger 오류 정의

모든 이벤트 오류는 LedgerError를 상속.
파이프라인에서 이벤트 단위로 복구됨 (이벤트 폐기 후 보고).
"""

from decimal import Decimal


class LedgerError(Exception):
    """Ledger 이벤트 처리 오류 기본 클래스

    Attributes:
        tx_id: 오류가 발생한 거래 ID
    """

    kind: str = "LedgerError"

    def __init__(self, tx_id: int, message: str):
        super().__init__(message)
        self.tx_id = tx_id


class LockedAccountError(LedgerError):
    """잠긴 계좌에 대한 거래"""

    kind = "LockedAccount"

    def __init__(self, tx_id: int):
        super().__init__(
            tx_id, f"Transaction occurred for locked account. Transaction {tx_id} was ignored"
        )


class TransactionNotFoundError(LedgerError):
    """참조한 거래가 기록에 없음"""

    kind = "TransactionNotFound"

    def __init__(self, tx_id: int):
        super().__init__(tx_id, f"Failed to lookup transaction with ID {tx_id}")


class InsufficientFundsError(LedgerError):
    """사용 가능 금액 부족"""

    kind = "InsufficientFunds"

    def __init__(self, tx_id: int, available: Decimal, amount: Decimal):
        super().__init__(
            tx_id,
            f"The account does not have sufficient funds. "
            f"Available {available}, transaction amount {amount}",
        )
        self.available = available
        self.amount = amount


class DisputedTransactionError(LedgerError):
    """분쟁 상태가 기대와 다름

    이미 분쟁 중인 거래를 다시 분쟁하거나,
    분쟁 중이 아닌 거래를 해소/지불거절하는 경우.
    """

    kind = "DisputedTransaction"

    def __init__(self, tx_id: int, disputed: bool):
        state = "already disputed" if disputed else "not disputed"
        super().__init__(tx_id, f"Transaction {tx_id} is {state}")
        self.disputed = disputed


class SuspiciousTransactionError(LedgerError):
    """이전에 기록된 거래 ID보다 작거나 같은 거래 ID"""

    kind = "SuspiciousTransaction"

    def __init__(self, tx_id: int, highest_seen_tx_id: int):
        super().__init__(
            tx_id,
            f"Transaction ID {tx_id} is not greater than previously recorded "
            f"{highest_seen_tx_id}",
        )
        self.highest_seen_tx_id = highest_seen_tx_id


class MissingAmountError(LedgerError):
    """입금/출금에 금액 누락"""

    kind = "MissingAmount"

    def __init__(self, tx_id: int):
        super().__init__(
            tx_id, f"Transaction {tx_id} is missing an amount when one is expected"
        )


class AccountNotFoundError(KeyError):
    """스냅샷 조회 대상 계좌가 없음 (이벤트 오류 아님)"""

    def __init__(self, account_id: int):
        super().__init__(account_id)
        self.account_id = account_id

    def __str__(self) -> str:
        return f"Account {self.account_id} not found"
