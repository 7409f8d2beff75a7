"""
Mock 이벤트 소스

테스트용 Mock EventSource.
IEventSource Protocol 준수.
"""

import asyncio
from typing import AsyncIterator, Iterable

from adapters.interfaces import SourceItem


class MockEventSource:
    """Mock 이벤트 소스

    주어진 항목을 순서대로 내보냄. 한 번만 순회 가능.

    사용 예시:
    ```python
    source = MockEventSource([
        TransactionEvent.deposit(1, 1, "10"),
        IngestError("bad row", line=3),
    ])

    report = await run_pipeline(source, sink)
    assert source.yielded_count == 2
    ```
    """

    def __init__(self, items: Iterable[SourceItem]):
        self._items = items
        self._consumed = False
        self.yielded_count = 0

    def __aiter__(self) -> AsyncIterator[SourceItem]:
        if self._consumed:
            raise RuntimeError("MockEventSource already consumed")
        self._consumed = True
        return self._stream()

    async def _stream(self) -> AsyncIterator[SourceItem]:
        for item in self._items:
            self.yielded_count += 1
            yield item
            await asyncio.sleep(0)
