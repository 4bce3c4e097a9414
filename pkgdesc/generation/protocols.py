"""
Protocol definitions for the build-file generator boundary.

The handoff pipeline depends only on these interfaces, so any generator
(or a test double) can be plugged in.
"""

from pathlib import Path
from typing import Protocol, Sequence, Union, runtime_checkable

from pkgdesc.model.package import Package


@runtime_checkable
class Environment(Protocol):
    """Readiness check for the generator environment."""

    def is_ready(self) -> bool:
        """Return True when generation may proceed. Must not have side effects."""
        ...


@runtime_checkable
class Generator(Protocol):
    """
    Build-file generator consuming an assembled package graph.

    Both entry points may fail; failures propagate to the caller.
    """

    #: Paths emitted by the last generate() call.
    artifacts: Sequence[Union[str, Path]]

    @property
    def name(self) -> str:
        """Generator name (e.g. 'manifest')."""
        ...

    def prepare_output(self, package: Package) -> None:
        """Prepare or clear the output area for the package's artifacts."""
        ...

    def generate(self, package: Package) -> None:
        """Emit build/project files for the package."""
        ...
