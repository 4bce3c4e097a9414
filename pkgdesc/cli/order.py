"""CLI commands that inspect declared packages without generating."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.table import Table

from pkgdesc.errors import PkgDescError
from pkgdesc.graph.dependency_graph import build_order, build_project_graph
from pkgdesc.resolver.provider import ProviderRegistry

logger = logging.getLogger("pkgdesc.cli.order")


def order_command(args, console: Optional[Console] = None) -> int:
    """Print the build order of a package's projects.

    Returns:
        int: Exit code (0 for success, 1 for failure).
    """
    console = console or Console()
    try:
        package = ProviderRegistry.get_instance().resolve(args.package)
        graph = build_project_graph(package)
        order = build_order(package)
    except PkgDescError as e:
        logger.error("Order command failed: %s", e)
        return 1

    table = Table(title=f"Build order: {package.name}")
    table.add_column("#", justify="right")
    table.add_column("Project")
    table.add_column("Kind")
    table.add_column("Links")
    for idx, name in enumerate(order, start=1):
        attrs = graph.nodes[name]
        links = sorted(graph.successors(name), key=lambda d: graph.edges[name, d]["order"])
        table.add_row(str(idx), name, attrs["kind"], ", ".join(links))
    console.print(table)
    return 0


def packages_command(args, console: Optional[Console] = None) -> int:
    """List registered package providers."""
    console = console or Console()
    names = ProviderRegistry.get_instance().list_packages()
    if not names:
        logger.warning("No packages registered")
        return 1
    for name in names:
        console.print(name)
    return 0
