"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from typing import AsyncIterator, Protocol, Sequence, runtime_checkable

from core.domain.events import AccountSnapshot, TransactionEvent


class IngestError(Exception):
    """입력 레코드 파싱 실패

    파이프라인에서 보고 후 건너뜀 (스트림은 계속 진행).

    Attributes:
        line: 입력 줄 번호 (알 수 없으면 None)
        reason: 실패 사유
    """

    def __init__(self, reason: str, line: int | None = None):
        self.reason = reason
        self.line = line
        location = f"line {line}: " if line is not None else ""
        super().__init__(f"{location}{reason}")


# 이벤트 소스가 내보내는 항목 (이벤트 또는 파싱 오류)
SourceItem = TransactionEvent | IngestError


@runtime_checkable
class IEventSource(Protocol):
    """이벤트 소스 인터페이스

    지연 평가되는 (무한일 수 있는) 비동기 스트림.
    한 번만 순회 가능 (재시작 불가).
    """

    def __aiter__(self) -> AsyncIterator[SourceItem]:
        """이벤트 스트림 반환

        Returns:
            TransactionEvent 또는 IngestError를 순서대로 내보내는 비동기 이터레이터

        Raises:
            RuntimeError: 이미 순회한 소스를 다시 순회하는 경우
        """
        ...


@runtime_checkable
class ISnapshotSink(Protocol):
    """스냅샷 출력 인터페이스"""

    async def write(
        self,
        snapshots: Sequence[AccountSnapshot],
        first_write: bool,
    ) -> None:
        """스냅샷 출력

        Args:
            snapshots: 출력할 스냅샷 목록
            first_write: 이 파이프라인의 첫 출력 여부 (헤더 출력 등에 사용)
        """
        ...
