"""
Ledger 저장소

계좌 ID → Aggregate 매핑을 메모리에 보관.
모든 변경과 스냅샷 조회는 하나의 asyncio.Lock으로 직렬화.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Generic, TypeVar

from core.domain.events import AccountSnapshot, TransactionEvent
from core.ledger.account import Account
from core.ledger.aggregate import Aggregate
from core.ledger.errors import AccountNotFoundError, LedgerError

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=Aggregate)


class InMemoryLedger(Generic[A]):
    """메모리 Ledger

    계좌는 첫 이벤트에서 생성되고 프로세스 수명 동안 유지됨.
    잠금은 계좌별이 아닌 저장소 전체 단위 (전 계좌 직렬화).
    따라서 all_snapshots()는 일부만 반영된 거래를 볼 수 없음.

    Args:
        aggregate_type: 생성할 Aggregate 클래스 (기본: Account)

    사용 예시:
    ```python
    ledger = InMemoryLedger()

    account_id = await ledger.process_transaction(1, 1, event)
    snapshot = await ledger.snapshot(account_id)
    snapshots = await ledger.all_snapshots()
    ```
    """

    def __init__(self, aggregate_type: type[A] = Account):  # type: ignore[assignment]
        self._aggregate_type = aggregate_type
        self._view: dict[int, A] = {}
        self._lock = asyncio.Lock()

        # 통계
        self._processed_count = 0
        self._error_count = 0

    async def process_transaction(
        self,
        account_id: int,
        tx_id: int,
        event: TransactionEvent,
    ) -> int:
        """거래 처리 (생성 또는 변경)

        계좌가 없으면 첫 이벤트로 생성, 있으면 이벤트 적용.
        오류가 나도 계좌는 마지막 유효 상태로 남고 저장소는 계속 사용 가능.

        Args:
            account_id: 계좌 ID
            tx_id: 거래 ID
            event: 거래 이벤트

        Returns:
            처리된 계좌 ID

        Raises:
            LedgerError: 이벤트가 거부된 경우
        """
        async with self._lock:
            aggregate = self._view.get(account_id)

            if aggregate is None:
                self._view[account_id] = self._aggregate_type.open(tx_id, event)
                self._processed_count += 1
                logger.debug(
                    f"Account opened: {account_id}",
                    extra={"tx_id": tx_id, "kind": event.kind.value},
                )
                return account_id

            try:
                aggregate.apply_transaction(tx_id, event)
            except LedgerError:
                self._error_count += 1
                raise

            self._processed_count += 1
            return account_id

    async def snapshot(self, account_id: int) -> AccountSnapshot:
        """계좌 스냅샷 조회

        Raises:
            AccountNotFoundError: 계좌가 없음
        """
        async with self._lock:
            aggregate = self._view.get(account_id)
            if aggregate is None:
                raise AccountNotFoundError(account_id)
            return aggregate.snapshot(account_id)

    async def all_snapshots(self) -> list[AccountSnapshot]:
        """전체 계좌 스냅샷 (계좌 ID 순)

        하나의 잠금 구간 안에서 읽으므로 일관된 시점의 값.
        """
        async with self._lock:
            return [
                self._view[account_id].snapshot(account_id)
                for account_id in sorted(self._view)
            ]

    async def contains(self, account_id: int) -> bool:
        """계좌 존재 여부"""
        async with self._lock:
            return account_id in self._view

    def get_stats(self) -> dict[str, Any]:
        """통계 반환"""
        return {
            "processed_count": self._processed_count,
            "error_count": self._error_count,
            "account_count": len(self._view),
        }

    def reset_stats(self) -> None:
        """통계 초기화"""
        self._processed_count = 0
        self._error_count = 0
