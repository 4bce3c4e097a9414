"""Package model: a named bundle of a library, a test and nested packages."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from pkgdesc.errors import PackageValidationError
from pkgdesc.model.project import Project, ProjectKind

logger = logging.getLogger("pkgdesc.model.package")


@dataclass
class Package:
    """A named bundle owning at most one library and one test project.

    Sub-packages are attached fully constructed; a package never exposes a
    partially resolved dependency.
    """

    name: str
    main_library: Optional[Project] = None
    test_project: Optional[Project] = None
    sub_packages: List[Package] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be a non-empty string")

    def set_main_library(self, project: Project) -> None:
        if project.kind is not ProjectKind.LIBRARY:
            raise PackageValidationError(
                f"Main library of package '{self.name}' must be a library, "
                f"got {project.kind.value} '{project.name}'"
            )
        self.main_library = project

    def set_test_project(self, project: Project) -> None:
        if project.kind is not ProjectKind.TEST_EXECUTABLE:
            raise PackageValidationError(
                f"Test project of package '{self.name}' must be a test "
                f"executable, got {project.kind.value} '{project.name}'"
            )
        self.test_project = project

    def add_package(self, package: Package) -> None:
        """Attach a resolved dependency package, preserving order."""
        if package is self or package.name == self.name:
            raise PackageValidationError(
                f"Package '{self.name}' cannot contain itself"
            )
        if any(sub.name == package.name for sub in self.sub_packages):
            logger.debug(
                "Package %s already contains %s", self.name, package.name
            )
            return
        self.sub_packages.append(package)

    def get_main_libs(self) -> List[Project]:
        """Return the main library as a list (empty when there is none)."""
        return [self.main_library] if self.main_library is not None else []

    def projects(self) -> List[Project]:
        """Projects owned directly by this package."""
        owned = self.get_main_libs()
        if self.test_project is not None:
            owned.append(self.test_project)
        return owned

    def walk(self) -> Iterator[Package]:
        """Yield this package and every nested package, depth first."""
        yield self
        for sub in self.sub_packages:
            yield from sub.walk()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "main_library": (
                self.main_library.to_dict() if self.main_library else None
            ),
            "test_project": (
                self.test_project.to_dict() if self.test_project else None
            ),
            "sub_packages": [sub.to_dict() for sub in self.sub_packages],
        }
