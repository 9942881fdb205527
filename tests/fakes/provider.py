"""In-memory provider fake for engine and harness tests."""

from __future__ import annotations

import re

from titletotags.contracts.exceptions import ProviderError
from titletotags.contracts.item import WorkItem, WorkItemUpdate
from titletotags.contracts.provider import Provider

_IDS_RE = re.compile(r"\[System\.Id\] IN \(([\d, ]+)\)")
_TYPE_RE = re.compile(r"\[System\.WorkItemType\] = '((?:[^']|'')*)'")
_TAG_RE = re.compile(r"\[System\.Tags\] CONTAINS '((?:[^']|'')*)'")


class FakeProvider(Provider):
    """In-memory provider with deterministic ids and spy tracking.

    ``query_ids`` understands the type, tag, and id clauses emitted by
    ``build_work_item_query``; other clauses are ignored.
    """

    def __init__(self, items: list[WorkItem] | None = None) -> None:
        self.items: dict[int, WorkItem] = {item.id: item for item in items or []}
        self._next_id = 1000
        self.entered = 0
        self.exited = 0

        self.queries: list[str] = []
        self.get_calls: list[list[int]] = []
        self.update_calls: list[tuple[int, WorkItemUpdate]] = []
        self.create_calls: list[tuple[str, str, str]] = []
        self.delete_calls: list[int] = []

        self.fail_update_ids: set[int] = set()
        self.fail_delete_ids: set[int] = set()
        self.fail_create_after: int | None = None

    async def __aenter__(self) -> FakeProvider:
        self.entered += 1
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore[override]
        self.exited += 1

    def add(self, title: str, *, tags: str = "", work_item_type: str = "Bug") -> WorkItem:
        item = WorkItem(id=self._allocate_id(), title=title, tags=tags, work_item_type=work_item_type)
        self.items[item.id] = item
        return item

    async def query_ids(self, wiql: str) -> list[int]:
        self.queries.append(wiql)
        ids_match = _IDS_RE.search(wiql)
        type_match = _TYPE_RE.search(wiql)
        tag_match = _TAG_RE.search(wiql)
        wanted_ids = {int(part) for part in ids_match.group(1).split(",")} if ids_match else None
        wanted_type = type_match.group(1).replace("''", "'") if type_match else None
        wanted_tag = tag_match.group(1).replace("''", "'").lower() if tag_match else None

        matched: list[int] = []
        for item_id, item in sorted(self.items.items()):
            if wanted_ids is not None and item_id not in wanted_ids:
                continue
            if wanted_type is not None and item.work_item_type != wanted_type:
                continue
            if wanted_tag is not None and wanted_tag not in item.tags.lower():
                continue
            matched.append(item_id)
        return matched

    async def get_work_items(self, ids: list[int]) -> list[WorkItem]:
        self.get_calls.append(list(ids))
        return [self.items[item_id] for item_id in ids if item_id in self.items]

    async def update_work_item(self, item_id: int, update: WorkItemUpdate) -> WorkItem:
        self.update_calls.append((item_id, update))
        if item_id in self.fail_update_ids:
            raise ProviderError(f"update_work_item failed with HTTP 500: boom #{item_id}", status_code=500)
        item = self.items.get(item_id)
        if item is None:
            raise ProviderError(f"Work item not found: {item_id}", status_code=404)
        changes: dict[str, str] = {}
        if update.title is not None:
            changes["title"] = update.title
        if update.tags is not None:
            changes["tags"] = update.tags
        updated = item.model_copy(update=changes)
        self.items[item_id] = updated
        return updated

    async def create_work_item(self, work_item_type: str, title: str, tags: str = "") -> WorkItem:
        self.create_calls.append((work_item_type, title, tags))
        if self.fail_create_after is not None and len(self.create_calls) > self.fail_create_after:
            raise ProviderError("create_work_item failed with HTTP 500", status_code=500)
        return self.add(title, tags=tags, work_item_type=work_item_type)

    async def delete_work_item(self, item_id: int) -> None:
        self.delete_calls.append(item_id)
        if item_id in self.fail_delete_ids:
            raise ProviderError("delete_work_item failed with HTTP 500", status_code=500)
        if item_id not in self.items:
            raise ProviderError(f"delete_work_item failed with HTTP 404: {item_id}", status_code=404)
        del self.items[item_id]

    def _allocate_id(self) -> int:
        while self._next_id in self.items:
            self._next_id += 1
        item_id = self._next_id
        self._next_id += 1
        return item_id
