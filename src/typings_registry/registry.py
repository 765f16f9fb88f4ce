"""The registry of all typings packages.

Built once from the versioned data file and the not-needed list, then only
read. Lookups accept scoped names (``@foo/bar``) and key on the mangled form.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

import structlog

from typings_registry.config import Settings
from typings_registry.data_file import read_not_needed_packages, read_types_data_file
from typings_registry.errors import ErrorCode, RegistryError
from typings_registry.models.packages import TypingsData
from typings_registry.models.raw import TypingsDataRaw
from typings_registry.naming import mangle
from typings_registry.typings_versions import TypingsVersions

if TYPE_CHECKING:
    from typings_registry.models.packages import (
        AnyPackage,
        NotNeededPackage,
        PackageId,
        PackageIdWithDefiniteVersion,
    )

log = structlog.get_logger()

T = TypeVar("T")


def assert_sorted(items: Sequence[T], key: Callable[[T], str]) -> Sequence[T]:
    """Check that ``items`` is already sorted by ``key``; never reorders."""
    for prev, item in zip(items, items[1:]):
        if key(item) < key(prev):
            raise RegistryError(
                ErrorCode.INTERNAL_INCONSISTENCY,
                f"Expected {key(item)!r} >= {key(prev)!r}: packages are not sorted by name.",
            )
    return items


class AllPackages:
    """Queryable model of every typings package and not-needed stub."""

    @classmethod
    def from_data(
        cls,
        data: Mapping[str, Mapping[str, TypingsDataRaw | Mapping[str, Any]]],
        not_needed: Sequence[NotNeededPackage],
    ) -> AllPackages:
        versions = {name: TypingsVersions(raw) for name, raw in data.items()}
        log.info("registry_built", packages=len(versions), not_needed=len(not_needed))
        return cls(versions, not_needed)

    @classmethod
    def read(cls, settings: Settings | None = None) -> AllPackages:
        settings = settings or Settings()
        return cls.from_data(
            read_types_data_file(settings.data), read_not_needed_packages(settings.data)
        )

    @classmethod
    def read_typings(cls, settings: Settings | None = None) -> Sequence[TypingsData]:
        settings = settings or Settings()
        return cls.from_data(read_types_data_file(settings.data), []).all_typings()

    @classmethod
    def read_latest_typings(cls, settings: Settings | None = None) -> Sequence[TypingsData]:
        settings = settings or Settings()
        return cls.from_data(read_types_data_file(settings.data), []).all_latest_typings()

    @staticmethod
    def read_single(name: str, settings: Settings | None = None) -> TypingsData:
        """For single-package tasks only. Do not call this in a loop."""
        settings = settings or Settings()
        raw = read_types_data_file(settings.data).get(name)
        if not raw:
            raise RegistryError(ErrorCode.PACKAGE_NOT_FOUND, f"Can't find package {name}")
        versions = list(raw.values())
        if len(versions) > 1:
            raise RegistryError(
                ErrorCode.AMBIGUOUS_PACKAGE, f"Package {name} has multiple versions."
            )
        return TypingsData(TypingsDataRaw.model_validate(versions[0]), is_latest=True)

    @staticmethod
    def read_single_not_needed(name: str, settings: Settings | None = None) -> NotNeededPackage:
        settings = settings or Settings()
        for pkg in read_not_needed_packages(settings.data):
            if pkg.name == name:
                return pkg
        raise RegistryError(ErrorCode.PACKAGE_NOT_FOUND, f"Cannot find not-needed package {name}")

    def __init__(
        self,
        data: Mapping[str, TypingsVersions],
        not_needed: Sequence[NotNeededPackage],
    ) -> None:
        self._data = dict(data)
        self._not_needed = tuple(not_needed)

    def _versions(self, name: str) -> TypingsVersions | None:
        return self._data.get(mangle(name))

    def get_not_needed_package(self, name: str) -> NotNeededPackage | None:
        return next((pkg for pkg in self._not_needed if pkg.name == name), None)

    def has_typing_for(self, dep: PackageId) -> bool:
        return self.try_get_typings_data(dep) is not None

    def has_separate_minor_versions(self, name: str) -> bool:
        """Whether the package keeps minor-versioned directories like ``react-native/v0.61``."""
        versions = self._versions(name)
        if versions is None:
            raise RegistryError(ErrorCode.PACKAGE_NOT_FOUND, f"No such package {name}.")
        minors = [data.minor for data in versions.get_all()]
        return len(minors) != len(set(minors))

    def try_resolve(self, dep: PackageId) -> PackageId:
        versions = self._versions(dep.name)
        found = versions.try_get(dep.version) if versions is not None else None
        return found.id if found is not None else dep

    def resolve(self, dep: PackageId) -> PackageIdWithDefiniteVersion:
        versions = self._versions(dep.name)
        if versions is None:
            raise RegistryError(
                ErrorCode.PACKAGE_NOT_FOUND, f"No typings found with name '{dep.name}'."
            )
        return versions.get(dep.version).id

    def get_latest(self, pkg: TypingsData) -> TypingsData:
        """Latest version of a package, e.g. ``node v6`` -> ``node v10`` before v11 existed."""
        return pkg if pkg.is_latest else self.get_latest_version(pkg.name)

    def get_latest_version(self, package_name: str) -> TypingsData:
        latest = self.try_get_latest_version(package_name)
        if latest is None:
            raise RegistryError(ErrorCode.PACKAGE_NOT_FOUND, f"No such package {package_name}.")
        return latest

    def try_get_latest_version(self, package_name: str) -> TypingsData | None:
        versions = self._versions(package_name)
        return versions.try_get_latest() if versions is not None else None

    def get_typings_data(self, dep: PackageId) -> TypingsData:
        pkg = self.try_get_typings_data(dep)
        if pkg is None:
            raise RegistryError(
                ErrorCode.PACKAGE_NOT_FOUND,
                f"No typings available for {json.dumps(dep.model_dump(mode='json'))}",
            )
        return pkg

    def try_get_typings_data(self, dep: PackageId) -> TypingsData | None:
        versions = self._versions(dep.name)
        return versions.try_get(dep.version) if versions is not None else None

    def all_packages(self) -> list[AnyPackage]:
        return [*self.all_typings(), *self.all_not_needed()]

    def all_typings(self) -> Sequence[TypingsData]:
        """Note: this includes older version directories (``foo/v0``)."""
        flattened = [data for versions in self._data.values() for data in versions.get_all()]
        return assert_sorted(flattened, key=lambda t: t.name)

    def all_latest_typings(self) -> Sequence[TypingsData]:
        latest = [versions.get_latest() for versions in self._data.values()]
        return assert_sorted(latest, key=lambda t: t.name)

    def all_not_needed(self) -> Sequence[NotNeededPackage]:
        return self._not_needed

    def all_dependency_typings(self, pkg: TypingsData) -> Iterator[TypingsData]:
        """Dependencies *that have typings*, including test dependencies.

        Dependencies outside the registry are skipped.
        """
        for name, version in pkg.dependencies.items():
            versions = self._versions(name)
            if versions is None:
                continue
            message = None
            if name in pkg.path_mappings:
                message = (
                    f"{pkg.name} references this version of {name} in its path mappings in "
                    f"tsconfig.json. If you are deleting this version, update {pkg.name}'s path "
                    "mappings accordingly.\n"
                )
            yield versions.get(version, message)

        for name in pkg.test_dependencies:
            versions = self._versions(name)
            if versions is None:
                continue
            mapped = pkg.path_mappings.get(name)
            yield versions.get(mapped) if mapped is not None else versions.get_latest()
