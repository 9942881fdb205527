"""Catalog of title patterns covering the tokenizer's edge cases."""

from __future__ import annotations

from collections.abc import Iterable

from titletotags.contracts.harness import PatternCheck, TitlePattern, VerificationResult
from titletotags.tokenizer import UNTITLED, parse_title

TITLE_PATTERNS: tuple[TitlePattern, ...] = (
    TitlePattern(
        name="no-brackets",
        title="No bracketed substrings in this title",
        expected_title="No bracketed substrings in this title",
    ),
    TitlePattern(
        name="single-leading",
        title="[Single] bracketed substring at start of title",
        expected_title="Bracketed substring at start of title",
        expected_tags=["Single"],
    ),
    TitlePattern(
        name="trailing-bracket",
        title="Title with bracketed substring at end [End]",
        expected_title="Title with bracketed substring at end [End]",
    ),
    TitlePattern(
        name="brackets-only",
        title="[All][Brackets][Only]",
        expected_title=UNTITLED,
        expected_tags=["All", "Brackets", "Only"],
    ),
    TitlePattern(
        name="nested",
        title="[Outer [Inner]] Title with nested brackets",
        expected_title="Title with nested brackets",
        expected_tags=["Outer", "Inner"],
    ),
    TitlePattern(
        name="mid-title-empty",
        title="Title with empty brackets [] should ignore them",
        expected_title="Title with empty brackets [] should ignore them",
    ),
    TitlePattern(
        name="multiple-spaces",
        title="Title   with    multiple   spaces  [Tag]  should   normalize",
        expected_title="Title with multiple spaces [Tag] should normalize",
    ),
    TitlePattern(
        name="lowercase-start",
        title="[start] title begins with lowercase text",
        expected_title="Title begins with lowercase text",
        expected_tags=["start"],
    ),
    TitlePattern(
        name="separated-groups-colon",
        title="[UI] [critical]: crash on save",
        expected_title="Crash on save",
        expected_tags=["UI", "critical"],
    ),
    TitlePattern(
        name="empty-leading",
        title="[ ] Empty leading bracket",
        expected_title="Empty leading bracket",
    ),
    TitlePattern(
        name="unclosed-leading",
        title="[Unclosed bracket title",
        expected_title="[Unclosed bracket title",
    ),
    TitlePattern(
        name="leading-whitespace",
        title="   [Padded] leading whitespace",
        expected_title="Leading whitespace",
        expected_tags=["Padded"],
    ),
    TitlePattern(
        name="case-duplicate",
        title="[UI][ui] Duplicate tags differ by case",
        expected_title="Duplicate tags differ by case",
        expected_tags=["UI", "ui"],
    ),
)


def patterns_by_name(patterns: Iterable[TitlePattern] = TITLE_PATTERNS) -> dict[str, TitlePattern]:
    return {pattern.name: pattern for pattern in patterns}


def check_patterns(patterns: Iterable[TitlePattern] = TITLE_PATTERNS) -> VerificationResult:
    """Run every pattern through the tokenizer locally and compare exact output."""
    checks: list[PatternCheck] = []
    for pattern in patterns:
        parsed = parse_title(pattern.title)
        checks.append(
            PatternCheck(
                pattern=pattern.name,
                expected_title=pattern.expected_title,
                actual_title=parsed.title,
                expected_tags=list(pattern.expected_tags),
                actual_tags=list(parsed.tags),
                passed=parsed.title == pattern.expected_title and parsed.tags == pattern.expected_tags,
            )
        )
    return VerificationResult(checks=checks)
