"""Shared CLI formatting helpers."""

from __future__ import annotations

from collections.abc import Sequence


def format_comma_or_none(values: Sequence[str]) -> str:
    if not values:
        return "none"
    return ", ".join(values)


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"
