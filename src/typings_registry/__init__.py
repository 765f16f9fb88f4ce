"""In-memory registry and resolver for versioned typings packages."""

from __future__ import annotations

from typings_registry.errors import ErrorCode, RegistryError
from typings_registry.naming import full_registry_name, mangle, unmangle
from typings_registry.registry import AllPackages
from typings_registry.typings_versions import TypingsVersions

__all__ = [
    "AllPackages",
    "TypingsVersions",
    "ErrorCode",
    "RegistryError",
    "mangle",
    "unmangle",
    "full_registry_name",
]
