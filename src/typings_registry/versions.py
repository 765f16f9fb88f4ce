"""Version value types and helpers.

A typings version is a ``(major, minor)`` pair. Versions parsed from a
directory name (``types/foo/v15``) may leave the minor unknown; versions read
from a definition header always carry both.
"""

from __future__ import annotations

import re
from typing import Final, Literal

import nodesemver
from pydantic import BaseModel, ConfigDict

from typings_registry.errors import ErrorCode, RegistryError

ANY_VERSION: Final = "*"

_VERSION_DIRECTORY_RE = re.compile(r"^v(\d+)(\.(\d+))?$")


class TypingVersion(BaseModel):
    """Version parsed from a directory name. ``minor=None`` matches any minor."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    major: int
    minor: int | None = None


class HeaderParsedVersion(TypingVersion):
    """Version parsed from a definition header, so both parts are known."""

    minor: int


DependencyVersion = Literal["*"] | TypingVersion


def parse_version_from_directory_name(directory_name: str) -> TypingVersion | None:
    """``v3`` -> 3, ``v3.1`` -> 3.1, anything else -> ``None``."""
    match = _VERSION_DIRECTORY_RE.match(directory_name)
    if match is None:
        return None
    minor = match.group(3)
    return TypingVersion(major=int(match.group(1)), minor=int(minor) if minor is not None else None)


def format_typing_version(version: TypingVersion) -> str:
    if version.minor is None:
        return str(version.major)
    return f"{version.major}.{version.minor}"


def format_dependency_version(version: DependencyVersion) -> str:
    return ANY_VERSION if version == ANY_VERSION else format_typing_version(version)


# ---------------------------------------------------------------------------
# TypeScript versions
# ---------------------------------------------------------------------------

# Oldest first. Definitions may not require anything older than the first entry.
SUPPORTED_TYPESCRIPT_VERSIONS: Final[tuple[str, ...]] = (
    "4.3",
    "4.4",
    "4.5",
    "4.6",
    "4.7",
    "4.8",
    "4.9",
    "5.0",
    "5.1",
)

LOWEST_TYPESCRIPT_VERSION: Final = SUPPORTED_TYPESCRIPT_VERSIONS[0]
LATEST_TYPESCRIPT_VERSION: Final = SUPPORTED_TYPESCRIPT_VERSIONS[-1]


def is_supported_typescript_version(version: str) -> bool:
    return version in SUPPORTED_TYPESCRIPT_VERSIONS


# ---------------------------------------------------------------------------
# Semantic versions
# ---------------------------------------------------------------------------


def parse_semantic_version(version: str) -> nodesemver.SemVer:
    """Parse a strict ``major.minor.patch`` version."""
    if not isinstance(version, str):
        raise RegistryError(ErrorCode.INVALID_VERSION, f"Invalid Version: {version!r}")
    try:
        return nodesemver.make_semver(version, False)
    except ValueError as exc:
        raise RegistryError(ErrorCode.INVALID_VERSION, str(exc)) from exc
