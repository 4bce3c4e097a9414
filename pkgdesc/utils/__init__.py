"""Shared helpers."""

from pkgdesc.utils.path_utils import (
    PathTraversalError,
    contained_path,
    normalize_identifier,
)

__all__ = ["PathTraversalError", "contained_path", "normalize_identifier"]
