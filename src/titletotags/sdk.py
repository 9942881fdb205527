"""SDK composition root for titletotags."""

from __future__ import annotations

from collections.abc import Sequence

from titletotags.auth import create_token_resolver
from titletotags.contracts.cleanup import CleanupResult
from titletotags.contracts.config import TitleToTagsConfig
from titletotags.contracts.exceptions import VerificationError
from titletotags.contracts.harness import HarnessMetadata, HarnessReport, VerificationResult
from titletotags.contracts.progress import SyncProgress
from titletotags.contracts.provider import Provider
from titletotags.engine import CleanupEngine
from titletotags.harness import HarnessRunner, check_patterns
from titletotags.providers.factory import create_provider


class TitleToTags:
    """titletotags SDK public API."""

    def __init__(
        self,
        *,
        config: TitleToTagsConfig,
        provider: Provider | None = None,
        progress: SyncProgress | None = None,
    ) -> None:
        self._config = config
        self._provider = provider
        self._progress = progress

    @classmethod
    async def from_config(
        cls,
        config: TitleToTagsConfig,
        *,
        progress: SyncProgress | None = None,
    ) -> TitleToTags:
        return cls(config=config, provider=None, progress=progress)

    @property
    def config(self) -> TitleToTagsConfig:
        return self._config

    async def run(
        self,
        *,
        dry_run: bool,
        ids: Sequence[int] | None = None,
        tag: str | None = None,
    ) -> CleanupResult:
        """Promote leading title brackets to tags on every matching work item."""
        provider = await self._resolve_provider()
        async with provider:
            engine = CleanupEngine(provider, self._config, progress=self._progress)
            return await engine.run(dry_run=dry_run, ids=ids, tag=tag)

    async def seed(self) -> HarnessMetadata:
        provider = await self._resolve_provider()
        async with provider:
            return await self._harness(provider).seed()

    async def verify(self, *, strict: bool = True) -> VerificationResult:
        """Verify seeded work items; with *strict*, raise :class:`VerificationError` on mismatch."""
        provider = await self._resolve_provider()
        async with provider:
            result = await self._harness(provider).verify()
        if strict and not result.passed:
            raise VerificationError(result)
        return result

    async def teardown(self) -> int:
        provider = await self._resolve_provider()
        async with provider:
            return await self._harness(provider).teardown()

    async def full(self, *, keep: bool = False, strict: bool = True) -> HarnessReport:
        provider = await self._resolve_provider()
        async with provider:
            engine = CleanupEngine(provider, self._config, progress=self._progress)
            report = await self._harness(provider).full(engine, keep=keep)
        if strict and not report.verification.passed:
            raise VerificationError(report.verification)
        return report

    @staticmethod
    def check(*, strict: bool = True) -> VerificationResult:
        """Check the pattern catalog against the tokenizer without any network access."""
        result = check_patterns()
        if strict and not result.passed:
            raise VerificationError(result)
        return result

    def _harness(self, provider: Provider) -> HarnessRunner:
        return HarnessRunner(provider, self._config, progress=self._progress)

    async def _resolve_provider(self) -> Provider:
        if self._provider is not None:
            return self._provider
        token = await create_token_resolver(self._config).resolve()
        return create_provider(self._config, token=token)
