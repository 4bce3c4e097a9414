"""Identifier normalization and output path containment."""

import re
from pathlib import Path
from typing import Union

from pkgdesc.errors import PackageValidationError

_SEPARATORS = re.compile(r"[\\/]+")


def normalize_identifier(identifier: str) -> str:
    """
    Normalize a path-like project identifier to forward-slash form.

    Both Windows and POSIX separators are accepted; runs of separators
    collapse to one and leading/trailing separators are dropped.

    Args:
        identifier: Raw identifier, e.g. ``github.com\\jurgen-kluft\\chshg``

    Returns:
        Normalized identifier string

    Raises:
        ValueError: If the identifier is empty after normalization.

    Examples:
        >>> normalize_identifier("github.com\\\\jurgen-kluft\\\\chshg")
        'github.com/jurgen-kluft/chshg'
        >>> normalize_identifier("libs//core/")
        'libs/core'
    """
    normalized = _SEPARATORS.sub("/", str(identifier).strip()).strip("/")
    if not normalized:
        raise ValueError(f"Invalid project identifier: {identifier!r}")
    return normalized


class PathTraversalError(PackageValidationError):
    """Raised when a package name would place output outside its root."""

    pass


def contained_path(root: Union[Path, str], name: str) -> Path:
    """
    Join ``name`` onto ``root`` and require the result to stay strictly inside it.

    Args:
        root: Output root directory
        name: Single path component, typically a package name

    Returns:
        Resolved path below ``root``

    Raises:
        PathTraversalError: If the resolved path is ``root`` itself or lies
            outside it (e.g. ``..``, ``/`` or an absolute name).

    Examples:
        >>> contained_path(Path("/out"), "chshg")
        PosixPath('/out/chshg')
    """
    root_path = Path(root).resolve()
    target = (root_path / name).resolve()
    if target == root_path or root_path not in target.parents:
        raise PathTraversalError(
            f"Package name {name!r} escapes output root {root_path}"
        )
    return target
