"""Helpers for Azure DevOps ``System.Tags`` strings ("a; b; c")."""

from __future__ import annotations

from collections.abc import Iterable

TAG_SEPARATOR = ";"


def split_tags(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(TAG_SEPARATOR) if tag.strip()]


def format_tags(tags: Iterable[str]) -> str:
    return f"{TAG_SEPARATOR} ".join(tags)


def merge_tags(existing: str | None, new: Iterable[str]) -> str:
    """Union *new* into the *existing* tag string, ignoring case.

    Existing tags keep their order and spelling; new tags are appended in order
    and the first spelling of a tag wins.
    """
    merged = split_tags(existing)
    seen = {tag.lower() for tag in merged}
    for tag in new:
        candidate = tag.strip()
        if candidate and candidate.lower() not in seen:
            merged.append(candidate)
            seen.add(candidate.lower())
    return format_tags(merged)


def same_tags(left: str | None, right: str | None) -> bool:
    return {tag.lower() for tag in split_tags(left)} == {tag.lower() for tag in split_tags(right)}
