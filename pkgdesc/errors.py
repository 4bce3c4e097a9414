"""Exception hierarchy for package declaration, resolution and generation.

Nothing in the core catches these; they propagate to the entry point,
which is the only place they are turned into log records and exit codes.
"""

from typing import Optional


class PkgDescError(Exception):
    """Base class for all pkgdesc errors."""

    pass


class UnresolvableDependency(PkgDescError):
    """A declared dependency's provider could not produce a Package.

    Raised when no provider is registered for the name, when the provider
    fails, or when resolving it would recurse into itself.
    """

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Cannot resolve dependency '{name}': {reason}")


class EnvironmentNotReady(PkgDescError):
    """The readiness gate failed; no generation step was attempted."""

    def __init__(self, reason: str = "generator environment is not ready") -> None:
        self.reason = reason
        super().__init__(reason)


class GenerationFailed(PkgDescError):
    """A downstream generator step failed.

    The underlying exception is available as ``__cause__`` and ``cause``.
    """

    def __init__(
        self,
        package_name: str,
        step: str,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.package_name = package_name
        self.step = step
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(
            f"Generation step '{step}' failed for package '{package_name}'{detail}"
        )


class PackageValidationError(PkgDescError):
    """A package or project declaration violates a structural invariant."""

    pass


class ConfigurationError(PkgDescError):
    """Generator configuration is malformed or contains invalid values."""

    pass


__all__ = [
    "ConfigurationError",
    "EnvironmentNotReady",
    "GenerationFailed",
    "PackageValidationError",
    "PkgDescError",
    "UnresolvableDependency",
]
