"""Provider adapter contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from titletotags.contracts.item import WorkItem, WorkItemUpdate


class Provider(ABC):
    @abstractmethod
    async def __aenter__(self) -> Provider: ...

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    @abstractmethod
    async def query_ids(self, wiql: str) -> list[int]: ...

    @abstractmethod
    async def get_work_items(self, ids: list[int]) -> list[WorkItem]: ...

    @abstractmethod
    async def update_work_item(self, item_id: int, update: WorkItemUpdate) -> WorkItem: ...

    @abstractmethod
    async def create_work_item(self, work_item_type: str, title: str, tags: str = "") -> WorkItem: ...

    @abstractmethod
    async def delete_work_item(self, item_id: int) -> None: ...
