"""Cleanup engine: promote leading title brackets to tags across a set of work items."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from titletotags.contracts.cleanup import CleanupEntry, CleanupResult
from titletotags.contracts.config import TitleToTagsConfig
from titletotags.contracts.exceptions import ProviderError
from titletotags.contracts.item import WorkItem, WorkItemUpdate
from titletotags.contracts.progress import NullSyncProgress, SyncProgress
from titletotags.contracts.provider import Provider
from titletotags.providers.azure_devops.wiql import build_work_item_query
from titletotags.tags import merge_tags, same_tags
from titletotags.tokenizer import parse_title

_LOG = logging.getLogger(__name__)


def plan_cleanup(item: WorkItem) -> CleanupEntry:
    """Compute the cleaned title and merged tags for *item* without touching the provider."""
    parsed = parse_title(item.title)
    tags = merge_tags(item.tags, parsed.tags)
    changed = parsed.title != item.title or not same_tags(item.tags, tags)
    return CleanupEntry(
        id=item.id,
        original_title=item.title,
        title=parsed.title,
        original_tags=item.tags,
        tags=tags,
        extracted_tags=parsed.tags,
        changed=changed,
    )


def _update_for(entry: CleanupEntry) -> WorkItemUpdate:
    return WorkItemUpdate(
        title=entry.title if entry.title != entry.original_title else None,
        tags=entry.tags if not same_tags(entry.original_tags, entry.tags) else None,
    )


class CleanupEngine:
    """Runs one cleanup pass: query, fetch, parse, write back."""

    def __init__(
        self,
        provider: Provider,
        config: TitleToTagsConfig,
        *,
        progress: SyncProgress | None = None,
    ) -> None:
        self._provider = provider
        self._config = config
        self._progress = progress or NullSyncProgress()

    async def run(
        self,
        *,
        dry_run: bool,
        ids: Sequence[int] | None = None,
        tag: str | None = None,
    ) -> CleanupResult:
        if ids is not None and not ids:
            return CleanupResult(dry_run=dry_run)

        query = build_work_item_query(
            work_item_type=self._config.work_item_type,
            area_path=self._config.area_path,
            tag=tag,
            ids=ids,
        )

        self._progress.phase_start("Query")
        try:
            found_ids = await self._provider.query_ids(query)
        except ProviderError as exc:
            self._progress.phase_error("Query", exc)
            raise
        self._progress.phase_done("Query")
        _LOG.info("Query matched %d work item(s)", len(found_ids))

        items: list[WorkItem] = []
        if found_ids:
            self._progress.phase_start("Fetch", total=len(found_ids))
            try:
                items = await self._provider.get_work_items(found_ids)
            except ProviderError as exc:
                self._progress.phase_error("Fetch", exc)
                raise
            self._progress.phase_done("Fetch")

        entries = [plan_cleanup(item) for item in items]
        changed = [entry for entry in entries if entry.changed]

        self._progress.phase_start("Update", total=len(changed))
        for entry in changed:
            if dry_run:
                _LOG.debug("[dry-run] #%d %r -> %r tags=%r", entry.id, entry.original_title, entry.title, entry.tags)
            else:
                try:
                    await self._provider.update_work_item(entry.id, _update_for(entry))
                except ProviderError as exc:
                    _LOG.error("Failed to update work item #%d: %s", entry.id, exc)
                    self._progress.phase_error("Update", exc)
                    raise
                _LOG.info("Updated #%d: %r -> %r", entry.id, entry.original_title, entry.title)
            self._progress.item_done("Update")
        self._progress.phase_done("Update")

        return CleanupResult(entries=entries, dry_run=dry_run)
