"""Package and project descriptors."""

from pkgdesc.model.package import Package
from pkgdesc.model.project import Project, ProjectKind

__all__ = ["Package", "Project", "ProjectKind"]
