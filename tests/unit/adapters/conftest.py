"""
어댑터 테스트 픽스처

공통 테스트 설정 및 픽스처 제공.
"""

from decimal import Decimal
from typing import Awaitable, Callable

import pytest

from adapters.interfaces import IEventSource, SourceItem
from adapters.mock.sink import MockSnapshotSink
from core.domain.events import AccountSnapshot


# -------------------------------------------------------------------------
# 공통 데이터 픽스처
# -------------------------------------------------------------------------

@pytest.fixture
def sample_snapshots() -> list[AccountSnapshot]:
    """샘플 스냅샷 (계좌 ID 순)"""
    return [
        AccountSnapshot(
            account_id=1,
            available=Decimal("1.5"),
            held=Decimal("0"),
            total=Decimal("1.5"),
            locked=False,
        ),
        AccountSnapshot(
            account_id=2,
            available=Decimal("0.0001"),
            held=Decimal("2"),
            total=Decimal("2.0001"),
            locked=True,
        ),
    ]


# -------------------------------------------------------------------------
# Mock 픽스처
# -------------------------------------------------------------------------

@pytest.fixture
def mock_sink() -> MockSnapshotSink:
    """Mock 스냅샷 출력"""
    return MockSnapshotSink()


@pytest.fixture
def collect() -> Callable[[IEventSource], Awaitable[list[SourceItem]]]:
    """이벤트 소스를 끝까지 읽어 목록으로 반환"""

    async def _collect(source: IEventSource) -> list[SourceItem]:
        return [item async for item in source]

    return _collect
