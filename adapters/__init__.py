"""
어댑터 레이어

외부 입출력(이벤트 소스, 스냅샷 출력)과의 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from adapters.interfaces import (
    IEventSource,
    ISnapshotSink,
    IngestError,
    SourceItem,
)

__all__ = [
    # Interfaces
    "IEventSource",
    "ISnapshotSink",
    # Models
    "IngestError",
    "SourceItem",
]
