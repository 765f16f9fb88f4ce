from __future__ import annotations

from typings_registry.models.packages import (
    AnyPackage,
    NotNeededPackage,
    PackageBase,
    PackageId,
    PackageIdWithDefiniteVersion,
    PackageKind,
    TypingsData,
    get_dependency_from_file,
)
from typings_registry.models.raw import (
    Author,
    License,
    PackageJsonDependency,
    TypingsDataRaw,
    get_license_from_package_json,
)

__all__ = [
    # packages
    "AnyPackage",
    "PackageBase",
    "PackageKind",
    "TypingsData",
    "NotNeededPackage",
    "PackageId",
    "PackageIdWithDefiniteVersion",
    "get_dependency_from_file",
    # raw
    "Author",
    "License",
    "PackageJsonDependency",
    "TypingsDataRaw",
    "get_license_from_package_json",
]
