"""Harness command handlers and formatting."""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from titletotags import HarnessMetadata, HarnessReport, TitleToTags, TitleToTagsConfig, VerificationResult
from titletotags.cli.common import format_comma_or_none, plural

_T = TypeVar("_T")


def format_verification(result: VerificationResult, *, title: str) -> str:
    lines = ["", f"titletotags - {title}", ""]
    for check in result.checks:
        status = "PASS" if check.passed else "FAIL"
        ref = f"#{check.id}" if check.id is not None else ""
        lines.append(f"  {status}  {check.pattern:<24} {ref}")
        if not check.passed:
            lines.append(f"        expected: {check.expected_title!r} [{format_comma_or_none(check.expected_tags)}]")
            actual = repr(check.actual_title) if check.actual_title is not None else "<missing>"
            lines.append(f"        actual:   {actual} [{format_comma_or_none(check.actual_tags)}]")
    lines.append("")
    passed = len(result.checks) - len(result.failed)
    lines.append(f"  {passed}/{len(result.checks)} pattern(s) passed")
    lines.append("")
    return "\n".join(lines)


def format_seed_summary(metadata: HarnessMetadata, *, metadata_path: str) -> str:
    lines = [
        "",
        "titletotags - harness seeded",
        "",
        f"  Project:   {metadata.organization}/{metadata.project}",
        f"  Created:   {plural(len(metadata.items), 'work item')} tagged {metadata.marker_tag!r}",
        f"  Metadata:  {metadata_path}",
        "",
    ]
    for record in metadata.items:
        lines.append(f"  #{record.id:<8} {record.pattern}")
    lines.append("")
    return "\n".join(lines)


def format_full_report(report: HarnessReport) -> str:
    text = format_verification(report.verification, title="harness run complete")
    lines = [text.rstrip("\n"), f"  Cleanup:   {plural(report.cleanup.items_updated, 'work item')} updated"]
    if report.deleted is None:
        lines.append("  Teardown:  skipped (--keep)")
    else:
        lines.append(f"  Teardown:  {plural(report.deleted, 'work item')} deleted")
    lines.append("")
    return "\n".join(lines)


def run_harness(args: argparse.Namespace) -> int:
    import titletotags.cli as cli

    if args.harness_command == "check":
        result = cli.TitleToTags.check(strict=False)
        print(format_verification(result, title="pattern catalog check"))
        return 0 if result.passed else 5

    config = cli.load_config(args.config)

    if args.harness_command == "seed":
        metadata = _with_progress(args, config, lambda sdk: sdk.seed())
        print(format_seed_summary(metadata, metadata_path=str(config.metadata_path)))
        return 0
    if args.harness_command == "verify":
        result = _with_progress(args, config, lambda sdk: sdk.verify(strict=False))
        print(format_verification(result, title="harness verification"))
        return 0 if result.passed else 5
    if args.harness_command == "teardown":
        deleted = _with_progress(args, config, lambda sdk: sdk.teardown())
        print(f"\ntitletotags - harness teardown complete\n\n  Deleted:   {plural(deleted, 'work item')}\n")
        return 0
    if args.harness_command == "full":
        report = _with_progress(args, config, lambda sdk: sdk.full(keep=args.keep, strict=False))
        print(format_full_report(report))
        return 0 if report.verification.passed else 5

    print(f"error: unsupported harness command: {args.harness_command}")
    return 2


def _with_progress(
    args: argparse.Namespace,
    config: TitleToTagsConfig,
    action: Callable[[TitleToTags], Awaitable[_T]],
) -> _T:
    import titletotags.cli as cli

    async def _run() -> _T:
        if args.verbose:
            sdk = await cli.TitleToTags.from_config(config)
            return await action(sdk)

        from titletotags.cli.progress import RichSyncProgress

        with RichSyncProgress() as progress:
            sdk = await cli.TitleToTags.from_config(config, progress=progress)
            return await action(sdk)

    return asyncio.run(_run())


__all__ = ["format_full_report", "format_seed_summary", "format_verification", "run_harness"]
