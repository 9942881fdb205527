"""Work item contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParsedTitle(BaseModel):
    """A title split into its cleaned text and the tags promoted out of it."""

    title: str
    tags: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class WorkItem(BaseModel):
    id: int
    title: str
    tags: str = ""
    work_item_type: str | None = None
    url: str | None = None


class WorkItemUpdate(BaseModel):
    title: str | None = None
    tags: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.title is None and self.tags is None
