"""Project model: a single buildable unit with ordered dependencies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List

from pkgdesc.errors import PackageValidationError
from pkgdesc.utils.path_utils import normalize_identifier

logger = logging.getLogger("pkgdesc.model.project")


class ProjectKind(str, Enum):
    """Kinds of buildable units a package can own."""

    LIBRARY = "library"
    TEST_EXECUTABLE = "test_executable"


@dataclass(eq=False)
class Project:
    """A library or test executable.

    Attributes:
        name: Project name, unique within its owning package.
        identifier: Path-like namespace used by generators to locate the
            project. Separators are normalized to ``/``.
        kind: Library or test executable.
        dependencies: Projects this one links against. Order is link order.
    """

    name: str
    identifier: str
    kind: ProjectKind
    dependencies: List[Project] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Project name must be a non-empty string")
        self.identifier = normalize_identifier(self.identifier)
        self.kind = ProjectKind(self.kind)
        initial = list(self.dependencies)
        self.dependencies = []
        self.add_dependencies(initial)

    @property
    def is_library(self) -> bool:
        return self.kind is ProjectKind.LIBRARY

    @property
    def dependency_names(self) -> List[str]:
        """Names of direct dependencies, in link order."""
        return [dep.name for dep in self.dependencies]

    def add_dependency(self, project: Project) -> None:
        """Append a dependency, keeping first-declaration order.

        Raises:
            PackageValidationError: If ``project`` is this project.
        """
        if project is self or project.name == self.name:
            raise PackageValidationError(
                f"Project '{self.name}' cannot depend on itself"
            )
        if any(dep.name == project.name for dep in self.dependencies):
            logger.debug(
                "Skipping duplicate dependency %s -> %s", self.name, project.name
            )
            return
        self.dependencies.append(project)

    def add_dependencies(self, projects: Iterable[Project]) -> None:
        for project in projects:
            self.add_dependency(project)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "identifier": self.identifier,
            "kind": self.kind.value,
            "dependencies": self.dependency_names,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return (
            self.name == other.name
            and self.identifier == other.identifier
            and self.kind is other.kind
            and self.dependency_names == other.dependency_names
        )

    def __hash__(self) -> int:
        return hash((self.name, self.identifier, self.kind))

    def __repr__(self) -> str:
        return (
            f"Project(name={self.name!r}, kind={self.kind.value}, "
            f"dependencies={self.dependency_names!r})"
        )
