"""WIQL query construction."""

from __future__ import annotations

from collections.abc import Sequence


def quote_literal(value: str) -> str:
    """Quote *value* as a WIQL string literal."""
    return "'" + value.replace("'", "''") + "'"


def build_work_item_query(
    *,
    work_item_type: str = "Bug",
    area_path: str | None = None,
    tag: str | None = None,
    ids: Sequence[int] | None = None,
) -> str:
    clauses = [
        "[System.TeamProject] = @project",
        f"[System.WorkItemType] = {quote_literal(work_item_type)}",
    ]
    if area_path:
        clauses.append(f"[System.AreaPath] UNDER {quote_literal(area_path)}")
    if tag:
        clauses.append(f"[System.Tags] CONTAINS {quote_literal(tag)}")
    if ids is not None:
        if not ids:
            raise ValueError("ids filter must not be empty")
        clauses.append(f"[System.Id] IN ({', '.join(str(int(item_id)) for item_id in ids)})")

    return "SELECT [System.Id] FROM WorkItems WHERE " + " AND ".join(clauses) + " ORDER BY [System.Id]"
