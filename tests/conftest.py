"""Shared test fixtures for titletotags tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tests.fakes.provider import FakeProvider
from titletotags.contracts.config import TitleToTagsConfig


@pytest.fixture
def sample_config(tmp_path: Path) -> TitleToTagsConfig:
    """A minimal valid config whose metadata file lives under tmp_path."""
    return TitleToTagsConfig(
        organization="contoso",
        project="Fabrikam",
        metadata_path=tmp_path / "test-work-items.json",
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A config file on disk with a relative metadata path."""
    path = tmp_path / "titletotags.json"
    path.write_text(
        json.dumps({"organization": "contoso", "project": "Fabrikam", "metadata_path": "out/items.json"}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()
