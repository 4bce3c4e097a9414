"""Public graph API surface."""

from pkgdesc.graph.dependency_graph import (
    build_order,
    build_project_graph,
    find_cycles,
    validate_package,
)

__all__ = [
    "build_order",
    "build_project_graph",
    "find_cycles",
    "validate_package",
]
