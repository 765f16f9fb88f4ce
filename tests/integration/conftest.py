"""Integration fixtures: data files written to a temporary directory."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from typings_registry.config import Settings

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def not_needed_json() -> dict[str, Any]:
    return {
        "packages": {
            "gadget": {
                "libraryName": "gadget",
                "asOfVersion": "3.0.0",
                "sourceRepoURL": "https://github.com/example/gadget",
            },
            "sprocket": {"libraryName": "sprocket", "asOfVersion": "1.4.2"},
        }
    }


@pytest.fixture()
def settings(
    tmp_path: Path, sample_data: dict[str, Any], not_needed_json: dict[str, Any]
) -> Settings:
    """Settings pointing at freshly written data files."""
    data_dir = tmp_path / "data"
    dt_dir = tmp_path / "DefinitelyTyped"
    data_dir.mkdir()
    dt_dir.mkdir()
    (data_dir / "definitions.json").write_text(json.dumps(sample_data), encoding="utf-8")
    (dt_dir / "notNeededPackages.json").write_text(json.dumps(not_needed_json), encoding="utf-8")
    data = {"data_dir": str(data_dir), "definitely_typed_path": str(dt_dir)}
    return Settings(data=data)  # type: ignore[arg-type]
