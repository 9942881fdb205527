"""Tests for config contracts, loading, and scaffolding."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from titletotags.config import load_config, scaffold_config, write_config
from titletotags.contracts.config import TitleToTagsConfig
from titletotags.contracts.exceptions import ConfigError


class TestConfigModel:
    def test_defaults(self) -> None:
        config = TitleToTagsConfig(organization="contoso", project="Fabrikam")

        assert config.base_url == "https://dev.azure.com"
        assert config.auth == "env"
        assert config.work_item_type == "Bug"
        assert config.api_version == "7.1"
        assert config.batch_size == 200
        assert config.max_retries == 3
        assert config.marker_tag == "TitleToTags-Test"
        assert config.metadata_path == Path("test-work-items.json")

    def test_is_frozen(self) -> None:
        config = TitleToTagsConfig(organization="contoso", project="Fabrikam")
        with pytest.raises(ValidationError):
            config.project = "Other"  # type: ignore[misc]

    def test_token_auth_requires_token(self) -> None:
        with pytest.raises(ValidationError, match="non-empty token"):
            TitleToTagsConfig(organization="contoso", project="Fabrikam", auth="token", token="  ")

    def test_token_forbidden_for_env_auth(self) -> None:
        with pytest.raises(ValidationError, match="token must be unset"):
            TitleToTagsConfig(organization="contoso", project="Fabrikam", token="secret")

    def test_unknown_auth_mode(self) -> None:
        with pytest.raises(ValidationError, match="auth must be one of"):
            TitleToTagsConfig(organization="contoso", project="Fabrikam", auth="oauth")

    @pytest.mark.parametrize("batch_size", [0, 201])
    def test_batch_size_bounds(self, batch_size: int) -> None:
        with pytest.raises(ValidationError):
            TitleToTagsConfig(organization="contoso", project="Fabrikam", batch_size=batch_size)

    def test_organization_required(self) -> None:
        with pytest.raises(ValidationError):
            TitleToTagsConfig(organization="", project="Fabrikam")


class TestLoadConfig:
    def test_resolves_metadata_path_relative_to_config(self, config_file: Path) -> None:
        config = load_config(config_file)

        assert config.organization == "contoso"
        assert config.metadata_path == (config_file.parent / "out" / "items.json").resolve()

    def test_keeps_absolute_metadata_path(self, tmp_path: Path) -> None:
        absolute = tmp_path / "elsewhere" / "items.json"
        path = tmp_path / "titletotags.json"
        path.write_text(
            json.dumps({"organization": "o", "project": "p", "metadata_path": str(absolute)}), encoding="utf-8"
        )

        assert load_config(path).metadata_path == absolute

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="failed reading config file"):
            load_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "titletotags.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError, match="invalid JSON"):
            load_config(path)

    def test_invalid_config(self, tmp_path: Path) -> None:
        path = tmp_path / "titletotags.json"
        path.write_text(json.dumps({"organization": "o"}), encoding="utf-8")

        with pytest.raises(ConfigError, match="invalid config"):
            load_config(path)


class TestScaffold:
    def test_minimal_output_omits_defaults(self) -> None:
        assert scaffold_config(organization="contoso", project="Fabrikam") == {
            "organization": "contoso",
            "project": "Fabrikam",
        }

    def test_include_defaults(self) -> None:
        raw = scaffold_config(organization="contoso", project="Fabrikam", include_defaults=True)

        assert raw["auth"] == "env"
        assert raw["work_item_type"] == "Bug"
        assert raw["metadata_path"] == "test-work-items.json"

    def test_non_default_values_are_written(self) -> None:
        raw = scaffold_config(
            organization="contoso",
            project="Fabrikam",
            auth="token",
            token="secret",
            work_item_type="Task",
            area_path="Fabrikam\\Web",
        )

        assert raw["auth"] == "token"
        assert raw["token"] == "secret"
        assert raw["work_item_type"] == "Task"
        assert raw["area_path"] == "Fabrikam\\Web"

    def test_invalid_combination_raises_config_error(self) -> None:
        with pytest.raises(ConfigError):
            scaffold_config(organization="contoso", project="Fabrikam", auth="token")

    def test_write_config_round_trips_through_loader(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "titletotags.json"
        write_config(scaffold_config(organization="contoso", project="Fabrikam"), target)

        assert target.read_text(encoding="utf-8").endswith("\n")
        assert load_config(target).project == "Fabrikam"

    def test_write_config_wraps_os_errors(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(ConfigError, match="failed writing config file"):
            write_config(scaffold_config(organization="contoso", project="Fabrikam"), blocker / "titletotags.json")
