"""Persistence for the harness metadata file."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from titletotags.contracts.exceptions import HarnessError
from titletotags.contracts.harness import HarnessMetadata


def read_metadata(path: Path) -> HarnessMetadata:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise HarnessError(f"no harness metadata at {path}; run 'titletotags harness seed' first") from exc
    except OSError as exc:
        raise HarnessError(f"failed reading harness metadata: {path}") from exc

    try:
        return HarnessMetadata.model_validate_json(raw)
    except ValidationError as exc:
        raise HarnessError(f"invalid harness metadata in {path}: {exc}") from exc


def write_metadata(path: Path, metadata: HarnessMetadata) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(metadata.model_dump_json(indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise HarnessError(f"failed writing harness metadata: {path}") from exc


def remove_metadata(path: Path) -> None:
    path.unlink(missing_ok=True)
