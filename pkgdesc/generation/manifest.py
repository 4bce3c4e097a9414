"""Manifest generator: emits the assembled package graph to disk.

Writes a description of the package tree, its project graph and the
resulting build order. Toolchain-specific project files are left to
dedicated generators implementing the same protocol.
"""

import json
import logging
import os
import shutil
from pathlib import Path
from typing import List, Optional

import networkx as nx

from pkgdesc.config.schema import GeneratorConfig
from pkgdesc.graph.dependency_graph import build_order, validate_package
from pkgdesc.model.package import Package
from pkgdesc.utils.path_utils import contained_path

logger = logging.getLogger("pkgdesc.generation.manifest")

MANIFEST_VERSION = 1


class WorkspaceEnvironment:
    """Readiness of the output workspace.

    ``initialize()`` creates the output root once per run; ``is_ready()``
    then only inspects the filesystem.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig.default()
        self._initialized = False

    @property
    def output_root(self) -> Path:
        return Path(self.config.output_dir)

    def initialize(self) -> "WorkspaceEnvironment":
        """Create the output root. Failures leave the environment not ready."""
        try:
            self.output_root.mkdir(parents=True, exist_ok=True)
            self._initialized = True
        except OSError as e:
            logger.error("Cannot create output root %s: %s", self.output_root, e)
            self._initialized = False
        return self

    def is_ready(self) -> bool:
        if not self._initialized:
            logger.debug("Workspace environment was not initialized")
            return False
        root = self.output_root
        return root.is_dir() and os.access(root, os.W_OK)


def _graphml_safe(graph: nx.DiGraph) -> nx.DiGraph:
    # GraphML cannot encode None attribute values.
    safe = graph.copy()
    for _, attrs in safe.nodes(data=True):
        for key, value in list(attrs.items()):
            if value is None:
                attrs[key] = ""
    return safe


class ManifestGenerator:
    """Generator writing package manifests in the configured formats."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig.default()
        self.artifacts: List[Path] = []

    @property
    def name(self) -> str:
        return "manifest"

    def package_dir(self, package: Package) -> Path:
        """Output directory of a package, always strictly below the output root.

        Raises:
            PathTraversalError: If the package name escapes the output root.
        """
        return contained_path(self.config.output_dir, package.name)

    def prepare_output(self, package: Package) -> None:
        """Create (and optionally clear) the package's output directory."""
        target = self.package_dir(package)
        if self.config.clean_output and target.exists():
            logger.info("Clearing previous output: %s", target)
            shutil.rmtree(target)
        target.mkdir(parents=True, exist_ok=True)
        self.artifacts = []

    def generate(self, package: Package) -> None:
        """Validate the package and write every configured format."""
        graph = validate_package(package)
        order = build_order(package)
        target = self.package_dir(package)

        for fmt in self.config.formats:
            if fmt == "json":
                path = self._write_json(package, graph, order, target)
            elif fmt == "graphml":
                path = self._write_graphml(graph, target)
            else:
                raise ValueError(f"Unsupported output format: {fmt}")
            self.artifacts.append(path)

    def _write_json(
        self, package: Package, graph: nx.DiGraph, order: List[str], target: Path
    ) -> Path:
        path = target / "package.json"
        logger.info("Writing JSON manifest: %s", path)
        data = {
            "version": MANIFEST_VERSION,
            "package": package.to_dict(),
            "build_order": order,
            "graph": nx.readwrite.json_graph.node_link_data(graph, edges="edges"),
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.info(
            "JSON manifest completed: %d projects, %d links",
            graph.number_of_nodes(),
            graph.number_of_edges(),
        )
        return path

    def _write_graphml(self, graph: nx.DiGraph, target: Path) -> Path:
        path = target / "package.graphml"
        logger.info("Writing GraphML manifest: %s", path)
        nx.write_graphml(_graphml_safe(graph), str(path))
        return path
