"""Reading the JSON files produced by the definitions parser.

These are the only blocking reads in the package; they run once, before
a registry is built.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import structlog

from typings_registry.errors import ErrorCode, RegistryError
from typings_registry.models.packages import NotNeededPackage

if TYPE_CHECKING:
    from pathlib import Path

    from typings_registry.config import DataSettings

log = structlog.get_logger()

TypesDataFile = dict[str, dict[str, Any]]


def read_data_file(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as f:
            content = json.load(f)
    except FileNotFoundError as exc:
        raise RegistryError(ErrorCode.DATA_FILE_ERROR, f"Data file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise RegistryError(
            ErrorCode.DATA_FILE_ERROR, f"Data file {path} is not valid JSON: {exc}"
        ) from exc
    except UnicodeDecodeError as exc:
        raise RegistryError(
            ErrorCode.DATA_FILE_ERROR, f"Data file {path} is not valid UTF-8: {exc}"
        ) from exc
    except OSError as exc:
        raise RegistryError(
            ErrorCode.DATA_FILE_ERROR, f"Cannot read data file {path}: {exc}"
        ) from exc
    log.debug("data_file_loaded", path=str(path))
    return content


def read_types_data_file(settings: DataSettings) -> TypesDataFile:
    data = read_data_file(settings.types_data_path)
    if not isinstance(data, dict):
        raise RegistryError(
            ErrorCode.DATA_FILE_ERROR,
            f"{settings.types_data_path} must contain an object keyed by package name.",
        )
    return data


def read_not_needed_packages(settings: DataSettings) -> list[NotNeededPackage]:
    raw = read_data_file(settings.not_needed_path)
    packages = raw.get("packages") if isinstance(raw, dict) else None
    if not isinstance(packages, dict):
        raise RegistryError(
            ErrorCode.DATA_FILE_ERROR,
            f"{settings.not_needed_path} must contain a 'packages' object.",
        )
    return [NotNeededPackage.from_raw(name, entry) for name, entry in packages.items()]
