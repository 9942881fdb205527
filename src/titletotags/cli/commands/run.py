"""Run command: cleanup pass and summary formatting."""

from __future__ import annotations

import argparse

from titletotags import CleanupResult, TitleToTagsConfig
from titletotags.cli.common import format_comma_or_none, plural


def format_run_summary(result: CleanupResult, config: TitleToTagsConfig) -> str:
    mode = "dry-run" if result.dry_run else "apply"

    lines = [
        "",
        f"titletotags - cleanup complete ({mode})",
        "",
        f"  Project:   {config.organization}/{config.project}",
        f"  Type:      {config.work_item_type}",
        f"  Scanned:   {plural(result.items_scanned, 'work item')}",
        f"  Changed:   {plural(result.items_updated, 'work item')}",
        "",
    ]

    for entry in result.changed_entries:
        lines.append(f"  #{entry.id:<8} {entry.original_title}")
        lines.append(f"  {'':<9} -> {entry.title}")
        lines.append(f"  {'':<9}    tags: {format_comma_or_none(entry.extracted_tags)}")

    if result.changed_entries:
        lines.append("")
    if result.dry_run:
        lines.append("  [dry-run] No work items were updated")
        lines.append("")

    return "\n".join(lines)


async def run_cleanup(args: argparse.Namespace) -> CleanupResult:
    import titletotags.cli as cli

    config = cli.load_config(args.config)

    if not args.verbose:
        from titletotags.cli.progress import RichSyncProgress

        with RichSyncProgress() as progress:
            sdk = await cli.TitleToTags.from_config(config, progress=progress)
            result = await sdk.run(dry_run=args.dry_run, ids=args.ids, tag=args.tag)
    else:
        sdk = await cli.TitleToTags.from_config(config)
        result = await sdk.run(dry_run=args.dry_run, ids=args.ids, tag=args.tag)

    print(cli._format_run_summary(result, config))
    return result


__all__ = ["format_run_summary", "run_cleanup"]
