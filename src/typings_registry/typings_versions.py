"""Every known version of one logical typings package."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any

import nodesemver

from typings_registry.errors import ErrorCode, RegistryError
from typings_registry.models.packages import TypingsData
from typings_registry.models.raw import TypingsDataRaw
from typings_registry.versions import ANY_VERSION, parse_semantic_version

if TYPE_CHECKING:
    from typings_registry.versions import DependencyVersion, TypingVersion


def _rcompare(a: tuple[nodesemver.SemVer, str], b: tuple[nodesemver.SemVer, str]) -> int:
    return nodesemver.rcompare(a[0], b[0], False)


class TypingsVersions:
    """Version records of one package, sorted from latest to oldest.

    Latest first so that the current version is published first: publishing
    an older version repeatedly resets the "latest" tag to the current one.
    """

    def __init__(self, data: Mapping[str, TypingsDataRaw | Mapping[str, Any]]) -> None:
        # Patch is not part of a typings version's identity.
        keyed = [(parse_semantic_version(f"{key}.0"), key) for key in data]
        keyed.sort(key=cmp_to_key(_rcompare))

        self._versions: list[tuple[nodesemver.SemVer, TypingsData]] = []
        for i, (version, key) in enumerate(keyed):
            raw = data[key]
            if not isinstance(raw, TypingsDataRaw):
                raw = TypingsDataRaw.model_validate(raw)
            self._versions.append((version, TypingsData(raw, is_latest=i == 0)))

    def __len__(self) -> int:
        return len(self._versions)

    def get_all(self) -> Iterator[TypingsData]:
        return (data for _, data in self._versions)

    def get(self, version: DependencyVersion, error_message: str | None = None) -> TypingsData:
        if version == ANY_VERSION:
            return self.get_latest()
        return self._get_latest_match(version, error_message)

    def try_get(self, version: DependencyVersion) -> TypingsData | None:
        if version == ANY_VERSION:
            return self.try_get_latest()
        return self._try_get_latest_match(version)

    def get_latest(self) -> TypingsData:
        latest = self.try_get_latest()
        if latest is None:
            raise RegistryError(ErrorCode.VERSION_NOT_FOUND, "Package has no versions.")
        return latest

    def try_get_latest(self) -> TypingsData | None:
        return self._versions[0][1] if self._versions else None

    def _get_latest_match(
        self, version: TypingVersion, error_message: str | None = None
    ) -> TypingsData:
        data = self._try_get_latest_match(version)
        if data is None:
            minor = "*" if version.minor is None else version.minor
            raise RegistryError(
                ErrorCode.VERSION_NOT_FOUND,
                f"Could not find version {version.major}.{minor}. {error_message or ''}",
            )
        return data

    def _try_get_latest_match(self, version: TypingVersion) -> TypingsData | None:
        # Newest first, so an unspecified minor picks the highest minor of the major.
        for found, data in self._versions:
            if found.major != version.major:
                continue
            if version.minor is None or found.minor == version.minor:
                return data
        return None
