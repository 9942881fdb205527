"""Split leading bracket tokens off a work item title.

``parse_title("[UI] [critical]: crash on save")`` returns the cleaned title
``"Crash on save"`` together with the tags ``["UI", "critical"]``.

Only the bracket groups at the very start of the title (after leading
whitespace) are promoted to tags. Brackets anywhere else are title text.
Malformed input never raises: an unclosed ``[`` inside the leading run makes the
whole title literal.
"""

from __future__ import annotations

import re

from titletotags.contracts.item import ParsedTitle

UNTITLED = "Untitled Work Item"

_OPEN = "["
_CLOSE = "]"
_WHITESPACE_RUN = re.compile(r"\s{2,}")


def parse_title(title: str | None) -> ParsedTitle:
    """Parse *title* into its cleaned text and the tags from its leading bracket run."""
    raw = title or ""
    start = _skip_whitespace(raw, 0)
    if start < len(raw) and raw[start] == _OPEN:
        leading = _parse_leading_run(raw, start)
        if leading is not None:
            tags, end = leading
            return ParsedTitle(title=normalize_title(raw[end:]), tags=tags)
    return ParsedTitle(title=normalize_title(raw), tags=[])


def normalize_title(text: str) -> str:
    """Collapse whitespace, drop one leading colon, and capitalize the first character.

    Returns :data:`UNTITLED` when nothing is left.
    """
    cleaned = _WHITESPACE_RUN.sub(" ", text).strip()
    if cleaned.startswith(":"):
        cleaned = cleaned[1:].strip()
    if not cleaned:
        return UNTITLED
    return cleaned[0].upper() + cleaned[1:]


def _parse_leading_run(text: str, pos: int) -> tuple[list[str], int] | None:
    """Consume consecutive bracket groups starting at *pos*.

    Returns the tags and the offset just past the run, or ``None`` when a group
    is left unclosed.
    """
    tags: list[str] = []
    while pos < len(text) and text[pos] == _OPEN:
        group = _parse_group(text, pos)
        if group is None:
            return None
        group_tags, pos = group
        tags.extend(group_tags)
        pos = _skip_whitespace(text, pos)
    return tags, pos


def _parse_group(text: str, pos: int) -> tuple[list[str], int] | None:
    # One buffer per open bracket; the stack depth is the nesting depth.
    stack: list[list[str]] = []
    closed: list[str] = []
    for index in range(pos, len(text)):
        char = text[index]
        if char == _OPEN:
            stack.append([])
        elif char == _CLOSE:
            content = "".join(stack.pop()).strip()
            if content:
                closed.append(content)
            if not stack:
                # Inner brackets close first; emit outer to inner.
                closed.reverse()
                return closed, index + 1
        else:
            stack[-1].append(char)
    return None


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


__all__ = ["UNTITLED", "normalize_title", "parse_title"]
