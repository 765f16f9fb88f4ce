"""Raw per-version records as written to the versioned data file.

Keys on disk are camelCase; models accept either the alias or the field
name so tests and callers can build records directly.
"""

from __future__ import annotations

import json
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from typings_registry.errors import ErrorCode, RegistryError
from typings_registry.versions import LOWEST_TYPESCRIPT_VERSION, DependencyVersion, TypingVersion


class License(StrEnum):
    # BSD is not supported: a particular BSD variant would have to be chosen.
    MIT = "MIT"
    APACHE_20 = "Apache-2.0"


def get_license_from_package_json(package_json_license: Any) -> License:
    """Validate the ``license`` field of a package's ``package.json``.

    Absence means MIT. Spelling out ``"MIT"`` is rejected as redundant.
    """
    if package_json_license is None:
        return License.MIT
    if package_json_license == License.MIT.value:
        raise RegistryError(
            ErrorCode.INVALID_LICENSE,
            "Specifying '\"license\": \"MIT\"' is redundant, this is the default.",
        )
    allowed = [license.value for license in License]
    if isinstance(package_json_license, str) and package_json_license in allowed:
        return License(package_json_license)
    raise RegistryError(
        ErrorCode.INVALID_LICENSE,
        f"'package.json' license is {json.dumps(package_json_license)}.\n"
        f"Expected one of: {json.dumps(allowed)}",
    )


class _RawModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Author(_RawModel):
    name: str
    url: str | None = None
    github_username: str | None = None


class PackageJsonDependency(_RawModel):
    name: str
    version: str


class TypingsDataRaw(_RawModel):
    """One version directory of an actively maintained package."""

    # Human readable, e.g. "Moment.js" for the package "moment".
    library_name: str
    # Published name without the scope, e.g. "jquery".
    typings_package_name: str
    library_major_version: int
    library_minor_version: int

    # Package names (not folder names) of other definitions in the repo.
    dependencies: dict[str, DependencyVersion] = Field(default_factory=dict)
    # Always resolved to latest; never repeats an entry of ``dependencies``.
    test_dependencies: list[str] = Field(default_factory=list)
    package_json_dependencies: list[PackageJsonDependency] = Field(default_factory=list)
    # Where a path mapping and a dependency share a key they share the value.
    path_mappings: dict[str, TypingVersion] = Field(default_factory=dict)
    contributors: list[Author] = Field(default_factory=list)
    # Only set for older versions stored in a subdirectory.
    library_version_directory_name: str | None = None
    min_ts_version: str = LOWEST_TYPESCRIPT_VERSION
    types_versions: list[str] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)
    license: License = License.MIT
    content_hash: str = ""
    project_name: str = ""
    # Values (not types) declared in the global namespace.
    globals: list[str] = Field(default_factory=list)
    declared_modules: list[str] = Field(default_factory=list)
    imports: dict[str, Any] | None = None
    exports: dict[str, Any] | str | None = None
    type: str | None = None
