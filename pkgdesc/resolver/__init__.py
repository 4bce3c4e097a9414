"""Dependency declaration resolution."""

from pkgdesc.resolver.provider import (
    PackageProvider,
    ProviderRegistry,
    register_provider,
)
from pkgdesc.resolver.resolver import DeclaredPackage, resolve_package

__all__ = [
    "DeclaredPackage",
    "PackageProvider",
    "ProviderRegistry",
    "register_provider",
    "resolve_package",
]
