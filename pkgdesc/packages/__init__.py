"""Built-in package declarations.

Importing this package registers the known providers in the global
ProviderRegistry.
"""

import logging
from typing import List, Optional

from pkgdesc.resolver.provider import ProviderRegistry
from pkgdesc.resolver.resolver import DeclaredPackage

logger = logging.getLogger("pkgdesc.packages")

# name -> (dependencies, test-only dependencies, identifier)
BUILTIN_PACKAGES = {
    "cunittest": ((), (), "github.com\\jurgen-kluft\\cunittest"),
    "cbase": ((), ("cunittest",), "github.com\\jurgen-kluft\\cbase"),
    "chshg": (("cbase",), ("cunittest",), "github.com\\jurgen-kluft\\chshg"),
}


def register_builtin_packages(registry: Optional[ProviderRegistry] = None) -> List[str]:
    """Register the built-in providers.

    Providers resolve their own dependencies through the same registry
    they are registered in.

    Args:
        registry: Target registry; defaults to the global instance.

    Returns:
        list: Names of the registered packages.
    """
    target = registry or ProviderRegistry.get_instance()
    for name, (deps, test_deps, identifier) in BUILTIN_PACKAGES.items():
        target.register(
            DeclaredPackage(
                name,
                dependencies=deps,
                test_dependencies=test_deps,
                identifier=identifier,
                registry=registry,
            )
        )
    names = list(BUILTIN_PACKAGES)
    logger.debug("Registered built-in packages: %s", ", ".join(names))
    return names


register_builtin_packages()

__all__ = ["BUILTIN_PACKAGES", "register_builtin_packages"]
