"""Parse command: run titles through the tokenizer locally."""

from __future__ import annotations

import argparse

from titletotags import ParsedTitle, parse_title
from titletotags.cli.common import format_comma_or_none


def format_parsed(raw: str, parsed: ParsedTitle) -> str:
    return "\n".join(
        [
            f"  Input:  {raw}",
            f"  Title:  {parsed.title}",
            f"  Tags:   {format_comma_or_none(parsed.tags)}",
        ]
    )


def run_parse(args: argparse.Namespace) -> int:
    for raw in args.titles:
        parsed = parse_title(raw)
        if args.json:
            print(parsed.model_dump_json())
        else:
            print(format_parsed(raw, parsed))
            print()
    return 0


__all__ = ["format_parsed", "run_parse"]
