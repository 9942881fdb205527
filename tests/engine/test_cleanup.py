"""Tests for the cleanup engine."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tests.fakes.provider import FakeProvider
from titletotags.contracts.config import TitleToTagsConfig
from titletotags.contracts.exceptions import ProviderError
from titletotags.contracts.item import WorkItem
from titletotags.contracts.progress import SyncProgress
from titletotags.engine import CleanupEngine, plan_cleanup


class TestPlanCleanup:
    def test_promotes_leading_tags_and_merges_existing(self) -> None:
        entry = plan_cleanup(WorkItem(id=1, title="[UI] [critical]: crash on save", tags="Existing; ui"))

        assert entry.changed
        assert entry.title == "Crash on save"
        assert entry.extracted_tags == ["UI", "critical"]
        assert entry.tags == "Existing; ui; critical"

    def test_clean_title_is_unchanged(self) -> None:
        entry = plan_cleanup(WorkItem(id=1, title="Already clean", tags="a"))

        assert not entry.changed
        assert entry.tags == "a"

    def test_title_only_change(self) -> None:
        entry = plan_cleanup(WorkItem(id=1, title="lowercase  start"))

        assert entry.changed
        assert entry.title == "Lowercase start"
        assert entry.tags == ""

    def test_tags_already_present_only_title_changes(self) -> None:
        entry = plan_cleanup(WorkItem(id=1, title="[UI] Crash", tags="UI"))

        assert entry.changed
        assert entry.title == "Crash"
        assert entry.tags == "UI"


class TestCleanupEngine:
    @pytest.mark.asyncio
    async def test_apply_updates_only_changed_items(self, sample_config: TitleToTagsConfig) -> None:
        provider = FakeProvider()
        dirty = provider.add("[UI] crash on save", tags="Existing")
        clean = provider.add("Already clean")
        title_only = provider.add("[UI] Retitle", tags="UI")

        result = await CleanupEngine(provider, sample_config).run(dry_run=False)

        assert result.items_scanned == 3
        assert result.items_updated == 2
        assert [call[0] for call in provider.update_calls] == [dirty.id, title_only.id]
        first_update = provider.update_calls[0][1]
        assert first_update.title == "Crash on save"
        assert first_update.tags == "Existing; UI"
        # Tags already match, so only the title is sent.
        assert provider.update_calls[1][1].tags is None
        assert provider.items[clean.id].title == "Already clean"
        assert provider.items[dirty.id].tags == "Existing; UI"

    @pytest.mark.asyncio
    async def test_dry_run_writes_nothing(self, sample_config: TitleToTagsConfig) -> None:
        provider = FakeProvider()
        item = provider.add("[UI] crash")

        result = await CleanupEngine(provider, sample_config).run(dry_run=True)

        assert result.dry_run
        assert result.items_updated == 1
        assert provider.update_calls == []
        assert provider.items[item.id].title == "[UI] crash"

    @pytest.mark.asyncio
    async def test_filters_by_type_tag_and_ids(self, sample_config: TitleToTagsConfig) -> None:
        provider = FakeProvider()
        wanted = provider.add("[a] one", tags="Team")
        provider.add("[b] two", tags="Team")
        provider.add("[c] task", tags="Team", work_item_type="Task")

        result = await CleanupEngine(provider, sample_config).run(dry_run=False, ids=[wanted.id], tag="Team")

        assert [entry.id for entry in result.entries] == [wanted.id]
        assert "[System.Tags] CONTAINS 'Team'" in provider.queries[0]

    @pytest.mark.asyncio
    async def test_empty_id_list_short_circuits(self, sample_config: TitleToTagsConfig) -> None:
        provider = FakeProvider()

        result = await CleanupEngine(provider, sample_config).run(dry_run=False, ids=[])

        assert result.items_scanned == 0
        assert provider.queries == []

    @pytest.mark.asyncio
    async def test_no_matches_skips_fetch(self, sample_config: TitleToTagsConfig) -> None:
        provider = FakeProvider()

        result = await CleanupEngine(provider, sample_config).run(dry_run=False)

        assert result.entries == []
        assert provider.get_calls == []

    @pytest.mark.asyncio
    async def test_reports_progress_phases(self, sample_config: TitleToTagsConfig) -> None:
        provider = FakeProvider()
        provider.add("[a] one")
        provider.add("Two")
        progress = MagicMock(spec=SyncProgress)

        await CleanupEngine(provider, sample_config, progress=progress).run(dry_run=False)

        started = [call.args[0] for call in progress.phase_start.call_args_list]
        assert started == ["Query", "Fetch", "Update"]
        assert progress.phase_start.call_args_list[2].kwargs == {"total": 1}
        assert progress.item_done.call_count == 1

    @pytest.mark.asyncio
    async def test_update_failure_propagates(self, sample_config: TitleToTagsConfig) -> None:
        provider = FakeProvider()
        item = provider.add("[a] one")
        provider.fail_update_ids.add(item.id)
        progress = MagicMock(spec=SyncProgress)

        with pytest.raises(ProviderError, match="HTTP 500"):
            await CleanupEngine(provider, sample_config, progress=progress).run(dry_run=False)

        progress.phase_error.assert_called_once()
        assert progress.phase_error.call_args.args[0] == "Update"
