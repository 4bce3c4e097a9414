"""Project-level dependency graph for an assembled package tree.

Nodes are project names; an edge ``A -> B`` means project A links against
project B. Edge attribute ``order`` records B's position in A's dependency
list so downstream consumers can reproduce link order.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

import networkx as nx

from pkgdesc.errors import PackageValidationError
from pkgdesc.model.package import Package
from pkgdesc.model.project import Project, ProjectKind

logger = logging.getLogger("pkgdesc.graph.dependency_graph")


def _add_project_node(
    graph: nx.DiGraph, project: Project, package_name: Optional[str]
) -> None:
    if project.name in graph:
        attrs = graph.nodes[project.name]
        if attrs["kind"] != project.kind.value or attrs["identifier"] != project.identifier:
            raise PackageValidationError(
                f"Conflicting declarations for project '{project.name}': "
                f"{attrs['kind']} at {attrs['identifier']} vs "
                f"{project.kind.value} at {project.identifier}"
            )
        if attrs.get("package") is None and package_name is not None:
            attrs["package"] = package_name
        return

    graph.add_node(
        project.name,
        kind=project.kind.value,
        identifier=project.identifier,
        package=package_name,
        declared=graph.number_of_nodes(),
    )


def build_project_graph(package: Package) -> nx.DiGraph:
    """Build the project dependency graph for a package tree.

    Args:
        package: Root package.

    Returns:
        nx.DiGraph: Graph with one node per project name. Node attributes:
        ``kind``, ``identifier``, ``package`` (owning package name or None
        for projects only reachable as dependencies) and ``declared``
        (first-declaration index).

    Raises:
        PackageValidationError: If two projects share a name but differ in
            kind or identifier.
    """
    graph = nx.DiGraph(root=package.name)

    for pkg in package.walk():
        for project in pkg.projects():
            _add_project_node(graph, project, pkg.name)

    pending: List[Project] = [
        project for pkg in package.walk() for project in pkg.projects()
    ]
    visited = set()
    while pending:
        project = pending.pop(0)
        if id(project) in visited:
            continue
        visited.add(id(project))
        for order, dep in enumerate(project.dependencies):
            _add_project_node(graph, dep, None)
            graph.add_edge(project.name, dep.name, order=order)
            pending.append(dep)

    logger.debug(
        "Built project graph for '%s': %d nodes, %d edges",
        package.name,
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph


def find_cycles(graph: nx.DiGraph, limit: Optional[int] = None) -> List[List[str]]:
    """Enumerate dependency cycles.

    Args:
        graph: Project graph.
        limit: Maximum number of cycles to return; None or <= 0 for all.

    Returns:
        List[List[str]]: Cycles as project names in traversal order.
    """
    max_cycles = limit if limit is not None and limit > 0 else None
    cycles: List[List[str]] = []
    for cycle in nx.simple_cycles(graph):
        cycles.append([str(node) for node in cycle])
        if max_cycles is not None and len(cycles) >= max_cycles:
            break
    return cycles


def build_order(package: Package) -> List[str]:
    """Return project names with dependencies before their dependents.

    Ties are broken by first-declaration order, so the result is stable
    for a given package tree.

    Raises:
        PackageValidationError: If the graph contains a cycle.
    """
    graph = build_project_graph(package)
    declared: Dict[str, int] = {
        node: attrs["declared"] for node, attrs in graph.nodes(data=True)
    }
    try:
        return list(
            nx.lexicographical_topological_sort(
                graph.reverse(copy=True), key=declared.__getitem__
            )
        )
    except nx.NetworkXUnfeasible as e:
        raise PackageValidationError(
            f"Cannot order projects of '{package.name}': {e}"
        ) from e


def _check_package_slots(pkg: Package) -> None:
    if pkg.main_library is not None and pkg.main_library.kind is not ProjectKind.LIBRARY:
        raise PackageValidationError(
            f"Main library '{pkg.main_library.name}' of package '{pkg.name}' "
            "is not a library"
        )

    test = pkg.test_project
    if test is None:
        return
    if test.kind is not ProjectKind.TEST_EXECUTABLE:
        raise PackageValidationError(
            f"Test project '{test.name}' of package '{pkg.name}' "
            "is not a test executable"
        )

    required = pkg.get_main_libs()
    for sub in pkg.sub_packages:
        required.extend(sub.get_main_libs())
    linked = set(test.dependency_names)
    missing = [lib.name for lib in required if lib.name not in linked]
    if missing:
        raise PackageValidationError(
            f"Test project '{test.name}' of package '{pkg.name}' does not "
            f"link against: {', '.join(missing)}"
        )


def validate_package(package: Package) -> nx.DiGraph:
    """Check structural invariants of a package tree.

    Returns:
        nx.DiGraph: The project graph, for callers that need it next.

    Raises:
        PackageValidationError: On a self dependency, a dependency cycle, a
            project of the wrong kind in a package slot, or a test project
            that does not link its library and every sub-package library.
    """
    graph = build_project_graph(package)

    self_loops = sorted(str(u) for u, _ in nx.selfloop_edges(graph))
    if self_loops:
        raise PackageValidationError(
            f"Projects depend on themselves: {', '.join(self_loops)}"
        )

    cycles = find_cycles(graph, limit=1)
    if cycles:
        cycle = cycles[0] + [cycles[0][0]]
        raise PackageValidationError(
            f"Dependency cycle in '{package.name}': {' -> '.join(cycle)}"
        )

    for pkg in package.walk():
        _check_package_slots(pkg)

    return graph
