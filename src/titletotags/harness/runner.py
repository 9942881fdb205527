"""Seed, verify, and tear down synthetic work items against a live provider."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime

from titletotags.contracts.config import TitleToTagsConfig
from titletotags.contracts.exceptions import HarnessError, ProviderError
from titletotags.contracts.harness import (
    HarnessItem,
    HarnessMetadata,
    HarnessReport,
    PatternCheck,
    TitlePattern,
    VerificationResult,
)
from titletotags.contracts.item import WorkItem
from titletotags.contracts.progress import NullSyncProgress, SyncProgress
from titletotags.contracts.provider import Provider
from titletotags.engine.cleanup import CleanupEngine
from titletotags.harness.metadata import read_metadata, remove_metadata, write_metadata
from titletotags.harness.patterns import TITLE_PATTERNS, patterns_by_name
from titletotags.providers.azure_devops.wiql import build_work_item_query
from titletotags.tags import split_tags

_LOG = logging.getLogger(__name__)


class HarnessRunner:
    def __init__(
        self,
        provider: Provider,
        config: TitleToTagsConfig,
        *,
        patterns: Sequence[TitlePattern] = TITLE_PATTERNS,
        progress: SyncProgress | None = None,
    ) -> None:
        self._provider = provider
        self._config = config
        self._patterns = tuple(patterns)
        self._progress = progress or NullSyncProgress()

    async def seed(self) -> HarnessMetadata:
        """Create one work item per pattern and record them in the metadata file.

        Refuses to run while a metadata file exists, so items from an earlier
        seed are never orphaned. Items created before a failure are still recorded.
        """
        path = self._config.metadata_path
        if path.exists():
            raise HarnessError(f"harness metadata already exists at {path}; run 'titletotags harness teardown' first")

        metadata = HarnessMetadata(
            organization=self._config.organization,
            project=self._config.project,
            marker_tag=self._config.marker_tag,
            created_at=datetime.now(UTC),
        )
        self._progress.phase_start("Seed", total=len(self._patterns))
        try:
            for pattern in self._patterns:
                item = await self._provider.create_work_item(
                    self._config.work_item_type,
                    pattern.title,
                    tags=self._config.marker_tag,
                )
                metadata.items.append(HarnessItem(id=item.id, pattern=pattern.name))
                _LOG.info("Created #%d for pattern %s", item.id, pattern.name)
                self._progress.item_done("Seed")
        except ProviderError as exc:
            self._progress.phase_error("Seed", exc)
            raise
        finally:
            if metadata.items:
                write_metadata(path, metadata)
        self._progress.phase_done("Seed")
        return metadata

    async def verify(self, metadata: HarnessMetadata | None = None) -> VerificationResult:
        """Query the seeded work items back and compare them with their patterns."""
        metadata = metadata or read_metadata(self._config.metadata_path)
        known = patterns_by_name(self._patterns)

        self._progress.phase_start("Verify", total=len(metadata.items))
        try:
            found = await self._fetch(metadata.ids)
        except ProviderError as exc:
            self._progress.phase_error("Verify", exc)
            raise

        checks: list[PatternCheck] = []
        for record in metadata.items:
            pattern = known.get(record.pattern)
            if pattern is None:
                raise HarnessError(f"unknown pattern {record.pattern!r} recorded for #{record.id}")
            expected_tags = [*pattern.expected_tags, metadata.marker_tag]
            item = found.get(record.id)
            if item is None:
                checks.append(
                    PatternCheck(
                        pattern=pattern.name,
                        id=record.id,
                        expected_title=pattern.expected_title,
                        expected_tags=expected_tags,
                    )
                )
            else:
                actual_tags = split_tags(item.tags)
                passed = item.title == pattern.expected_title and {t.lower() for t in actual_tags} == {
                    t.lower() for t in expected_tags
                }
                checks.append(
                    PatternCheck(
                        pattern=pattern.name,
                        id=record.id,
                        expected_title=pattern.expected_title,
                        actual_title=item.title,
                        expected_tags=expected_tags,
                        actual_tags=actual_tags,
                        passed=passed,
                    )
                )
            self._progress.item_done("Verify")
        self._progress.phase_done("Verify")
        return VerificationResult(checks=checks)

    async def teardown(self, metadata: HarnessMetadata | None = None) -> int:
        """Delete every recorded work item, then remove the metadata file."""
        metadata = metadata or read_metadata(self._config.metadata_path)

        deleted = 0
        self._progress.phase_start("Teardown", total=len(metadata.items))
        for record in metadata.items:
            try:
                await self._provider.delete_work_item(record.id)
                deleted += 1
            except ProviderError as exc:
                if exc.status_code != 404:
                    self._progress.phase_error("Teardown", exc)
                    raise
                _LOG.warning("Work item #%d is already gone", record.id)
            self._progress.item_done("Teardown")
        self._progress.phase_done("Teardown")

        remove_metadata(self._config.metadata_path)
        return deleted

    async def full(self, engine: CleanupEngine, *, keep: bool = False) -> HarnessReport:
        """Seed, clean up the seeded items, verify, and tear down unless *keep*."""
        metadata = await self.seed()
        try:
            cleanup = await engine.run(dry_run=False, ids=metadata.ids)
            verification = await self.verify(metadata)
        except BaseException:
            if not keep:
                try:
                    await self.teardown(metadata)
                except ProviderError as teardown_exc:
                    _LOG.error("Teardown after a failed harness run also failed: %s", teardown_exc)
            raise

        deleted = None if keep else await self.teardown(metadata)
        return HarnessReport(metadata=metadata, cleanup=cleanup, verification=verification, deleted=deleted)

    async def _fetch(self, ids: list[int]) -> dict[int, WorkItem]:
        if not ids:
            return {}
        query = build_work_item_query(work_item_type=self._config.work_item_type, ids=ids)
        found_ids = await self._provider.query_ids(query)
        if not found_ids:
            return {}
        return {item.id: item for item in await self._provider.get_work_items(found_ids)}
