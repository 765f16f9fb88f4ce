"""Scoped package name mangling.

Scoped names are stored on disk with the scope folded into the name:
``@babel/core`` lives under ``babel__core``. Every registry lookup keys on
the mangled form.
"""

from __future__ import annotations

SCOPE_NAME = "types"
TYPES_DIRECTORY_NAME = "types"

_SEPARATOR = "__"


def mangle(package_name: str) -> str:
    """``@foo/bar`` -> ``foo__bar``. Other names are returned unchanged."""
    if package_name.startswith("@") and package_name.count("/") == 1:
        return package_name[1:].replace("/", _SEPARATOR)
    return package_name


def unmangle(package_name: str) -> str | None:
    """``foo__bar`` -> ``@foo/bar``, or ``None`` for an unscoped name."""
    if _SEPARATOR not in package_name:
        return None
    return "@" + package_name.replace(_SEPARATOR, "/", 1)


def full_registry_name(package_name: str) -> str:
    """``@types/foo`` for a package ``foo``."""
    return f"@{SCOPE_NAME}/{mangle(package_name)}"
