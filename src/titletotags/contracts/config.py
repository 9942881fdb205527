"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

AUTH_MODES = ("env", "token", "prompt")


class TitleToTagsConfig(BaseModel):
    organization: str = Field(min_length=1)
    project: str = Field(min_length=1)
    base_url: str = "https://dev.azure.com"
    auth: str = "env"
    token: str | None = None
    work_item_type: str = "Bug"
    area_path: str | None = None
    api_version: str = "7.1"
    batch_size: int = Field(default=200, ge=1, le=200)
    max_retries: int = Field(default=3, ge=0, le=10)
    marker_tag: str = "TitleToTags-Test"
    metadata_path: Path = Path("test-work-items.json")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_token(self) -> TitleToTagsConfig:
        token = (self.token or "").strip()
        if self.auth not in AUTH_MODES:
            raise ValueError(f"auth must be one of: {', '.join(AUTH_MODES)}")
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        return self
