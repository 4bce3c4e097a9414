"""Assemble a root package from its declared dependencies.

Assembly is strictly bottom-up: every dependency is resolved to a complete
Package before the root's library and test projects are wired to it.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from pkgdesc.errors import UnresolvableDependency
from pkgdesc.model.package import Package
from pkgdesc.model.project import Project, ProjectKind
from pkgdesc.resolver.provider import ProviderRegistry

logger = logging.getLogger("pkgdesc.resolver")

TEST_SUFFIX = "_test"


def _name_list(names: Sequence[str], argument: str) -> List[str]:
    # Dependency lists are sequences of names; a bare str is rejected.
    if isinstance(names, str):
        raise TypeError(f"{argument} must be a sequence of names, not a string")
    return list(names)


def _resolve_all(
    names: Sequence[str], registry: ProviderRegistry
) -> List[Package]:
    resolved: List[Package] = []
    seen = set()
    for name in names:
        if name in seen:
            logger.debug("Ignoring repeated dependency '%s'", name)
            continue
        seen.add(name)
        resolved.append(registry.resolve(name))
    return resolved


def _main_libs(packages: Sequence[Package]) -> List[Project]:
    libs: List[Project] = []
    for package in packages:
        libs.extend(package.get_main_libs())
    return libs


def resolve_package(
    root_name: str,
    dependency_names: Sequence[str] = (),
    registry: Optional[ProviderRegistry] = None,
    identifier: Optional[str] = None,
    test_dependency_names: Sequence[str] = (),
) -> Package:
    """Build the fully wired root package.

    Args:
        root_name: Name of the root package and of its library project.
        dependency_names: Packages the library links against, in link order.
        registry: Provider registry; defaults to the global instance.
        identifier: Path-like identifier of the root projects. Defaults to
            ``root_name``.
        test_dependency_names: Packages only the test executable links
            against (e.g. a unit-test framework). Linked ahead of the
            library dependencies.

    Returns:
        Package: Root package with ``main_library``, ``test_project`` and
        the resolved dependency packages as ``sub_packages``.

    Raises:
        ValueError: If ``root_name`` is empty.
        TypeError: If a dependency list is given as a bare string.
        UnresolvableDependency: If any dependency cannot be resolved or a
            dependency names the root itself.
    """
    if not root_name:
        raise ValueError("Root package name must be a non-empty string")
    dependency_names = _name_list(dependency_names, "dependency_names")
    test_dependency_names = _name_list(test_dependency_names, "test_dependency_names")
    if root_name in dependency_names or root_name in test_dependency_names:
        raise UnresolvableDependency(root_name, "package cannot depend on itself")

    registry = registry or ProviderRegistry.get_instance()
    identifier = identifier or root_name

    dependencies = _resolve_all(dependency_names, registry)
    test_only = _resolve_all(
        [name for name in test_dependency_names if name not in dependency_names],
        registry,
    )

    main_lib = Project(root_name, identifier, ProjectKind.LIBRARY)
    main_lib.add_dependencies(_main_libs(dependencies))

    main_test = Project(
        root_name + TEST_SUFFIX, identifier, ProjectKind.TEST_EXECUTABLE
    )
    main_test.add_dependencies(_main_libs(test_only))
    main_test.add_dependencies(_main_libs(dependencies))
    main_test.add_dependency(main_lib)

    package = Package(root_name)
    for sub in test_only + dependencies:
        package.add_package(sub)
    package.set_main_library(main_lib)
    package.set_test_project(main_test)

    logger.debug(
        "Resolved package '%s': library deps=%s, test deps=%s",
        root_name,
        main_lib.dependency_names,
        main_test.dependency_names,
    )
    return package


class DeclaredPackage:
    """Provider for a package declared by name and dependency names.

    Example:
        register_provider(DeclaredPackage("chshg", ["cbase"],
                                          test_dependencies=["cunittest"]))
    """

    def __init__(
        self,
        name: str,
        dependencies: Sequence[str] = (),
        test_dependencies: Sequence[str] = (),
        identifier: Optional[str] = None,
        registry: Optional[ProviderRegistry] = None,
    ) -> None:
        if not name:
            raise ValueError("Package name must be a non-empty string")
        self._name = name
        self.dependencies = tuple(_name_list(dependencies, "dependencies"))
        self.test_dependencies = tuple(
            _name_list(test_dependencies, "test_dependencies")
        )
        self.identifier = identifier
        self._registry = registry

    @property
    def name(self) -> str:
        return self._name

    def resolve(self) -> Package:
        return resolve_package(
            self._name,
            self.dependencies,
            registry=self._registry,
            identifier=self.identifier,
            test_dependency_names=self.test_dependencies,
        )

    def __repr__(self) -> str:
        return (
            f"DeclaredPackage({self._name!r}, dependencies={list(self.dependencies)!r}, "
            f"test_dependencies={list(self.test_dependencies)!r})"
        )
