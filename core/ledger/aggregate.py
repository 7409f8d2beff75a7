"""
Aggregate 기본 클래스

모든 Aggregate가 구현해야 할 인터페이스 정의.
첫 이벤트로 생성되고, 이후 이벤트로 변경되며, 스냅샷을 만들 수 있는 상태 엔티티.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

IdT = TypeVar("IdT")
TxIdT = TypeVar("TxIdT")
EventT = TypeVar("EventT")
SnapshotT = TypeVar("SnapshotT")

AggregateT = TypeVar("AggregateT", bound="Aggregate")


class Aggregate(ABC, Generic[IdT, TxIdT, EventT, SnapshotT]):
    """Aggregate 추상 클래스

    구현 규칙:
    - open()은 절대 실패하지 않음 (검증은 구체 타입에서 처리)
    - apply_transaction() 실패 시 상태는 변경 전 그대로 (부분 반영 없음)
    - snapshot()은 부수효과 없는 순수 조회
    """

    @classmethod
    @abstractmethod
    def open(cls: type[AggregateT], first_tx_id: TxIdT, event: EventT) -> AggregateT:
        """첫 이벤트로 초기 상태 생성

        Args:
            first_tx_id: 첫 이벤트의 거래 ID
            event: 첫 이벤트

        Returns:
            새 Aggregate 인스턴스
        """
        ...

    @abstractmethod
    def apply_transaction(self, tx_id: TxIdT, event: EventT) -> None:
        """이벤트를 적용하여 상태 변경

        Args:
            tx_id: 거래 ID
            event: 적용할 이벤트

        Raises:
            LedgerError: 전제 조건 위반 (상태 변경 없음)
        """
        ...

    @abstractmethod
    def snapshot(self, aggregate_id: IdT) -> SnapshotT:
        """현재 상태의 스냅샷 반환

        Args:
            aggregate_id: 소유 Aggregate ID

        Returns:
            불변 스냅샷
        """
        ...
