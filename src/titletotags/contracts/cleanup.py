"""Cleanup result contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CleanupEntry(BaseModel):
    id: int
    original_title: str
    title: str
    original_tags: str = ""
    tags: str = ""
    extracted_tags: list[str] = Field(default_factory=list)
    changed: bool = False


class CleanupResult(BaseModel):
    entries: list[CleanupEntry] = Field(default_factory=list)
    dry_run: bool = False

    @property
    def items_scanned(self) -> int:
        return len(self.entries)

    @property
    def items_updated(self) -> int:
        return sum(1 for entry in self.entries if entry.changed)

    @property
    def changed_entries(self) -> list[CleanupEntry]:
        return [entry for entry in self.entries if entry.changed]
