"""Test-data harness contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from titletotags.contracts.cleanup import CleanupResult


class TitlePattern(BaseModel):
    """A raw title paired with the cleanup outcome it must produce."""

    name: str
    title: str
    expected_title: str
    expected_tags: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class HarnessItem(BaseModel):
    id: int
    pattern: str


class HarnessMetadata(BaseModel):
    """Record of synthetic work items, persisted so they can be verified and removed later."""

    organization: str
    project: str
    marker_tag: str
    created_at: datetime
    items: list[HarnessItem] = Field(default_factory=list)

    @property
    def ids(self) -> list[int]:
        return [item.id for item in self.items]


class PatternCheck(BaseModel):
    pattern: str
    id: int | None = None
    expected_title: str
    actual_title: str | None = None
    expected_tags: list[str] = Field(default_factory=list)
    actual_tags: list[str] = Field(default_factory=list)
    passed: bool = False

    def describe(self) -> str:
        if self.actual_title is None:
            return "work item not found"
        problems: list[str] = []
        if self.actual_title != self.expected_title:
            problems.append(f"title {self.actual_title!r} != {self.expected_title!r}")
        if {t.lower() for t in self.actual_tags} != {t.lower() for t in self.expected_tags}:
            problems.append(f"tags {self.actual_tags!r} != {self.expected_tags!r}")
        return "; ".join(problems) or "ok"


class VerificationResult(BaseModel):
    checks: list[PatternCheck] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(check.passed for check in self.checks)

    @property
    def failed(self) -> list[PatternCheck]:
        return [check for check in self.checks if not check.passed]


class HarnessReport(BaseModel):
    """Outcome of a full seed, cleanup, verify, teardown cycle."""

    metadata: HarnessMetadata
    cleanup: CleanupResult
    verification: VerificationResult
    deleted: int | None = None
