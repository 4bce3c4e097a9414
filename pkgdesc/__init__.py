"""Package/project dependency descriptors and their handoff to generators."""

from pkgdesc.errors import (
    ConfigurationError,
    EnvironmentNotReady,
    GenerationFailed,
    PackageValidationError,
    PkgDescError,
    UnresolvableDependency,
)
from pkgdesc.generation.handoff import GenerationResult, run
from pkgdesc.model import Package, Project, ProjectKind
from pkgdesc.resolver import (
    DeclaredPackage,
    PackageProvider,
    ProviderRegistry,
    register_provider,
    resolve_package,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DeclaredPackage",
    "EnvironmentNotReady",
    "GenerationFailed",
    "GenerationResult",
    "Package",
    "PackageProvider",
    "PackageValidationError",
    "PkgDescError",
    "Project",
    "ProjectKind",
    "ProviderRegistry",
    "UnresolvableDependency",
    "register_provider",
    "resolve_package",
    "run",
]
