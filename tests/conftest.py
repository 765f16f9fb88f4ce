"""Shared fixtures: synthetic versioned data and a registry built from it."""

from __future__ import annotations

from typing import Any

import pytest

from typings_registry.models.packages import NotNeededPackage
from typings_registry.registry import AllPackages


def raw_typings(name: str, version: str, **overrides: Any) -> dict[str, Any]:
    """A raw per-version record as written by the definitions parser."""
    major, minor = (int(part) for part in version.split("."))
    raw: dict[str, Any] = {
        "libraryName": name.title(),
        "typingsPackageName": name,
        "libraryMajorVersion": major,
        "libraryMinorVersion": minor,
        "dependencies": {},
        "testDependencies": [],
        "pathMappings": {},
        "contributors": [{"name": "Jane Doe", "githubUsername": "janedoe"}],
        "files": ["index.d.ts"],
        "contentHash": f"hash-{name}-{version}",
        "declaredModules": [name],
        "globals": [],
        "minTsVersion": "4.5",
        "typesVersions": [],
        "packageJsonDependencies": [],
        "projectName": f"https://github.com/example/{name}",
    }
    raw.update(overrides)
    return raw


@pytest.fixture()
def sample_data() -> dict[str, dict[str, dict[str, Any]]]:
    """Sorted by package name, as the definitions parser writes it."""
    return {
        "bar": {
            "1.0": raw_typings("bar", "1.0"),
        },
        "foo": {
            "2.0": raw_typings("foo", "2.0"),
            "1.0": raw_typings("foo", "1.0", libraryVersionDirectoryName="1"),
        },
        "scope__pkg": {
            "3.1": raw_typings("scope__pkg", "3.1"),
        },
        "widget": {
            "1.0": raw_typings("widget", "1.0", libraryVersionDirectoryName="1"),
            "2.3": raw_typings("widget", "2.3"),
            "2.1": raw_typings("widget", "2.1", libraryVersionDirectoryName="2.1"),
        },
    }


@pytest.fixture()
def not_needed() -> list[NotNeededPackage]:
    return [
        NotNeededPackage.from_raw(
            "gadget",
            {
                "libraryName": "gadget",
                "asOfVersion": "3.0.0",
                "sourceRepoURL": "https://github.com/example/gadget",
            },
        ),
    ]


@pytest.fixture()
def registry(sample_data: dict[str, Any], not_needed: list[NotNeededPackage]) -> AllPackages:
    return AllPackages.from_data(sample_data, not_needed)


@pytest.fixture()
def make_raw():
    """Factory fixture for raw per-version records."""
    return raw_typings
