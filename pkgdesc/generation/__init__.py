"""Generator boundary: protocols, gated handoff and the manifest generator."""

from pkgdesc.generation.handoff import GenerationResult, run
from pkgdesc.generation.manifest import ManifestGenerator, WorkspaceEnvironment
from pkgdesc.generation.protocols import Environment, Generator

__all__ = [
    "Environment",
    "GenerationResult",
    "Generator",
    "ManifestGenerator",
    "WorkspaceEnvironment",
    "run",
]
