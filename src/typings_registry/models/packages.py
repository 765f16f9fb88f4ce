"""Package records: active typings versions and not-needed stubs.

Both variants share ``PackageBase``. Consumers tell them apart by the
``kind`` discriminant rather than by type identity.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict

from typings_registry.errors import ErrorCode, RegistryError
from typings_registry.models.raw import License
from typings_registry.naming import TYPES_DIRECTORY_NAME, full_registry_name, unmangle
from typings_registry.versions import (
    ANY_VERSION,
    LOWEST_TYPESCRIPT_VERSION,
    DependencyVersion,
    HeaderParsedVersion,
    TypingVersion,
    is_supported_typescript_version,
    parse_semantic_version,
    parse_version_from_directory_name,
)

if TYPE_CHECKING:
    import nodesemver

    from typings_registry.models.raw import Author, PackageJsonDependency, TypingsDataRaw

PackageKind = Literal["typings", "not-needed"]

_NOT_NEEDED_KEYS = frozenset({"libraryName", "sourceRepoURL", "asOfVersion"})


class PackageId(BaseModel):
    """Uniquely identifies a package version, possibly with a wildcard."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: DependencyVersion


class PackageIdWithDefiniteVersion(PackageId):
    version: HeaderParsedVersion


class PackageBase(ABC):
    """Capabilities shared by both package variants. Prefer ``AnyPackage``."""

    kind: ClassVar[PackageKind]

    @staticmethod
    def compare(a: PackageBase, b: PackageBase) -> int:
        """Order by name, for use with ``functools.cmp_to_key``."""
        # Code point order, not locale order. Names are lower-case.
        return (a.name > b.name) - (a.name < b.name)

    @property
    @abstractmethod
    def name(self) -> str:
        """Note: for ``foo__bar`` this is still ``foo__bar``, not ``@foo/bar``."""

    @property
    @abstractmethod
    def library_name(self) -> str: ...

    @property
    @abstractmethod
    def is_latest(self) -> bool: ...

    @property
    @abstractmethod
    def major(self) -> int: ...

    @property
    @abstractmethod
    def minor(self) -> int: ...

    @property
    @abstractmethod
    def declared_modules(self) -> list[str]: ...

    @property
    @abstractmethod
    def globals(self) -> list[str]: ...

    @property
    @abstractmethod
    def min_typescript_version(self) -> str: ...

    @property
    def unescaped_name(self) -> str:
        return unmangle(self.name) or self.name

    @property
    def desc(self) -> str:
        """Short description for debug output."""
        return self.name if self.is_latest else f"{self.name} v{self.major}.{self.minor}"

    @property
    def full_registry_name(self) -> str:
        """``@types/foo`` for a package ``foo``."""
        return full_registry_name(self.name)

    @property
    def id(self) -> PackageIdWithDefiniteVersion:
        return PackageIdWithDefiniteVersion(
            name=self.name,
            version=HeaderParsedVersion(major=self.major, minor=self.minor),
        )

    def is_not_needed(self) -> bool:
        return self.kind == "not-needed"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.desc!r})"


class NotNeededPackage(PackageBase):
    """Stub left behind once a library ships its own type definitions."""

    kind: ClassVar[PackageKind] = "not-needed"

    @classmethod
    def from_raw(cls, name: str, raw: Mapping[str, Any]) -> NotNeededPackage:
        if name != name.lower():
            raise RegistryError(
                ErrorCode.INVALID_NOT_NEEDED_PACKAGE,
                f"not-needed package '{name}' must use all lower-case letters.",
            )
        for key in raw:
            if key not in _NOT_NEEDED_KEYS:
                raise RegistryError(
                    ErrorCode.INVALID_NOT_NEEDED_PACKAGE,
                    f"Unexpected key in not-needed package: {key}",
                )
        library_name = raw.get("libraryName") or ""
        if not isinstance(library_name, str):
            raise RegistryError(
                ErrorCode.INVALID_NOT_NEEDED_PACKAGE,
                f"not-needed package '{name}' must use a string libraryName.",
            )
        if library_name != library_name.lower():
            raise RegistryError(
                ErrorCode.INVALID_NOT_NEEDED_PACKAGE,
                f"not-needed package '{name}' must use a libraryName "
                "that is all lower-case letters.",
            )
        return cls(
            name,
            library_name,
            raw.get("asOfVersion") or "",
            source_repo_url=raw.get("sourceRepoURL"),
        )

    def __init__(
        self,
        name: str,
        library_name: str,
        as_of_version: str,
        source_repo_url: str | None = None,
    ) -> None:
        if not (library_name and name and as_of_version):
            raise RegistryError(
                ErrorCode.INVALID_NOT_NEEDED_PACKAGE,
                f"not-needed package {name!r} requires a name, libraryName and asOfVersion.",
            )
        self._name = name
        self._library_name = library_name
        self.source_repo_url = source_repo_url
        # Typings are deprecated as of this version of the real package.
        self.version: nodesemver.SemVer = parse_semantic_version(as_of_version)

    @property
    def name(self) -> str:
        return self._name

    @property
    def library_name(self) -> str:
        return self._library_name

    @property
    def license(self) -> License:
        return License.MIT

    @property
    def major(self) -> int:
        return self.version.major

    @property
    def minor(self) -> int:
        return self.version.minor

    # Exactly one version of a not-needed package exists.
    @property
    def is_latest(self) -> bool:
        return True

    @property
    def declared_modules(self) -> list[str]:
        return []

    @property
    def globals(self) -> list[str]:
        return []

    @property
    def min_typescript_version(self) -> str:
        return LOWEST_TYPESCRIPT_VERSION

    def deprecated_message(self) -> str:
        return (
            f"This is a stub types definition. {self.library_name} provides its own type "
            "definitions, so you do not need this installed."
        )


class TypingsData(PackageBase):
    """One version of an actively maintained typings package."""

    kind: ClassVar[PackageKind] = "typings"

    def __init__(self, data: TypingsDataRaw, is_latest: bool) -> None:
        self._data = data
        self._is_latest = is_latest

    @property
    def name(self) -> str:
        return self._data.typings_package_name

    @property
    def library_name(self) -> str:
        return self._data.library_name

    @property
    def is_latest(self) -> bool:
        return self._is_latest

    @property
    def major(self) -> int:
        return self._data.library_major_version

    @property
    def minor(self) -> int:
        return self._data.library_minor_version

    @property
    def min_typescript_version(self) -> str:
        version = self._data.min_ts_version
        return version if is_supported_typescript_version(version) else LOWEST_TYPESCRIPT_VERSION

    @property
    def types_versions(self) -> list[str]:
        return self._data.types_versions

    @property
    def files(self) -> list[str]:
        return self._data.files

    @property
    def dts_files(self) -> list[str]:
        return [f for f in self._data.files if f.endswith((".d.ts", ".d.mts", ".d.cts"))]

    @property
    def license(self) -> License:
        return self._data.license

    @property
    def package_json_dependencies(self) -> list[PackageJsonDependency]:
        return self._data.package_json_dependencies

    @property
    def content_hash(self) -> str:
        return self._data.content_hash

    @property
    def declared_modules(self) -> list[str]:
        return self._data.declared_modules

    @property
    def project_name(self) -> str:
        return self._data.project_name

    @property
    def globals(self) -> list[str]:
        return self._data.globals

    @property
    def contributors(self) -> list[Author]:
        return self._data.contributors

    @property
    def dependencies(self) -> dict[str, DependencyVersion]:
        return self._data.dependencies

    @property
    def test_dependencies(self) -> list[str]:
        return self._data.test_dependencies

    @property
    def path_mappings(self) -> dict[str, TypingVersion]:
        return self._data.path_mappings

    @property
    def type(self) -> str | None:
        return self._data.type

    @property
    def imports(self) -> dict[str, Any] | None:
        return self._data.imports

    @property
    def exports(self) -> dict[str, Any] | str | None:
        return self._data.exports

    @property
    def version_directory_name(self) -> str | None:
        directory = self._data.library_version_directory_name
        return f"v{directory}" if directory else None

    @property
    def sub_directory_path(self) -> str:
        """Path to this package relative to the repository root's types directory."""
        return self.name if self.is_latest else f"{self.name}/{self.version_directory_name}"


AnyPackage = TypingsData | NotNeededPackage


def get_dependency_from_file(file: str) -> PackageId | None:
    """Map a repository path to the package it belongs to.

    ``types/a/b/c`` -> ``a`` at ``*``; ``types/a/v3/c`` -> ``a`` at 3;
    paths outside a typings directory -> ``None``.
    """
    parts = file.split("/")
    if len(parts) <= 2:
        return None

    types_directory, name, sub_directory = parts[0], parts[1], parts[2]
    if types_directory != TYPES_DIRECTORY_NAME:
        return None

    if sub_directory:
        version = parse_version_from_directory_name(sub_directory)
        if version is not None:
            return PackageId(name=name, version=version)

    return PackageId(name=name, version=ANY_VERSION)
