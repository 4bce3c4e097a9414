"""Package provider interface and the registry that looks providers up by name.

Every known package exposes a zero-argument ``resolve()`` that returns its
fully constructed Package. The resolver reaches dependencies only through
this registry, never through hard-wired imports.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol, runtime_checkable

from pkgdesc.errors import UnresolvableDependency
from pkgdesc.model.package import Package

logger = logging.getLogger("pkgdesc.resolver.provider")


@runtime_checkable
class PackageProvider(Protocol):
    """Capability interface implemented once per known package."""

    @property
    def name(self) -> str:
        """Package name this provider produces."""
        ...

    def resolve(self) -> Package:
        """Build and return the package, resolving its own dependencies."""
        ...


class ProviderRegistry:
    """Registry of package providers keyed by package name.

    A process-wide instance is available through ``get_instance()``; tests
    and embedders may create isolated registries directly.
    """

    _instance: Optional["ProviderRegistry"] = None

    def __init__(self) -> None:
        self._providers: Dict[str, PackageProvider] = {}
        # Names currently being resolved, outermost first.
        self._resolving: List[str] = []

    @classmethod
    def get_instance(cls) -> "ProviderRegistry":
        """Get singleton instance.

        Returns:
            ProviderRegistry: Global registry instance.
        """
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register(self, provider: PackageProvider) -> None:
        """Register a provider under its package name.

        Args:
            provider: Provider to register.
        """
        if not isinstance(provider, PackageProvider):
            raise TypeError(f"Not a package provider: {provider!r}")

        name = provider.name
        if name in self._providers:
            logger.warning(
                "Overwriting existing provider for package '%s': %r -> %r",
                name,
                self._providers[name],
                provider,
            )
        self._providers[name] = provider
        logger.debug("Registered provider for package '%s'", name)

    def unregister(self, name: str) -> None:
        self._providers.pop(name, None)

    def get(self, name: str) -> Optional[PackageProvider]:
        return self._providers.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def list_packages(self) -> List[str]:
        """List registered package names in sorted order."""
        return sorted(self._providers)

    def resolve(self, name: str) -> Package:
        """Resolve a package through its provider.

        Args:
            name: Package name.

        Returns:
            Package: Fully constructed package.

        Raises:
            UnresolvableDependency: If no provider is registered, the provider
                fails or returns something other than the named Package, or
                resolution of ``name`` recurses into itself.
        """
        provider = self._providers.get(name)
        if provider is None:
            raise UnresolvableDependency(name, "no provider registered")

        if name in self._resolving:
            chain = self._resolving[self._resolving.index(name):] + [name]
            raise UnresolvableDependency(
                name, f"dependency cycle: {' -> '.join(chain)}"
            )

        self._resolving.append(name)
        try:
            package = provider.resolve()
        except UnresolvableDependency:
            raise
        except Exception as exc:  # pylint: disable=broad-exception-caught
            raise UnresolvableDependency(
                name, f"provider failed: {exc}"
            ) from exc
        finally:
            self._resolving.pop()

        if not isinstance(package, Package):
            raise UnresolvableDependency(
                name,
                f"provider returned {type(package).__name__}, expected Package",
            )
        if package.name != name:
            raise UnresolvableDependency(
                name, f"provider returned package '{package.name}'"
            )
        logger.debug("Resolved package '%s'", name)
        return package


def register_provider(provider: PackageProvider) -> None:
    """Register a provider in the global registry.

    Convenience wrapper around ProviderRegistry.register().
    """
    ProviderRegistry.get_instance().register(provider)
