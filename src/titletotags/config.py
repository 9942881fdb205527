"""Config loading and scaffolding."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from titletotags.contracts.config import TitleToTagsConfig
from titletotags.contracts.exceptions import ConfigError

DEFAULT_CONFIG_PATH = "titletotags.json"
_METADATA_PATH_DEFAULT = "test-work-items.json"


def _resolve_path(value: Path, *, base_dir: Path) -> Path:
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def load_config(path: str | Path) -> TitleToTagsConfig:
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = TitleToTagsConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    return parsed.model_copy(
        update={"metadata_path": _resolve_path(parsed.metadata_path, base_dir=config_path.parent)}
    )


def scaffold_config(
    *,
    organization: str,
    project: str,
    auth: str = "env",
    token: str | None = None,
    work_item_type: str = "Bug",
    area_path: str | None = None,
    metadata_path: str = _METADATA_PATH_DEFAULT,
    include_defaults: bool = False,
) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "organization": organization,
        "project": project,
    }

    if include_defaults or auth != "env":
        raw["auth"] = auth
    if token is not None:
        raw["token"] = token
    if include_defaults or work_item_type != "Bug":
        raw["work_item_type"] = work_item_type
    if area_path:
        raw["area_path"] = area_path
    if include_defaults or metadata_path != _METADATA_PATH_DEFAULT:
        raw["metadata_path"] = metadata_path

    try:
        TitleToTagsConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    return raw


def write_config(config: dict[str, Any], path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed writing config file: {path}") from exc


__all__ = ["DEFAULT_CONFIG_PATH", "load_config", "scaffold_config", "write_config"]
