"""
Cross-file import resolution.

Decides whether a referenced type name is a discovered model and, if so,
computes the relative import path from the referencing model's output
directory to the target's output file.
"""

import posixpath
from typing import Optional

from ..logging_config import get_logger
from .core.naming import PathNaming
from .registry import ModelRegistry

logger = get_logger(__name__)


class ImportResolver:
    """Resolves model names against a frozen registry."""

    def __init__(
        self,
        registry: ModelRegistry,
        anchor: str,
        path_naming: Optional[PathNaming] = None,
    ):
        """
        Initialize the resolver.

        Args:
            registry: Frozen registry of all discovered models
            anchor: Shared ancestor of every working directory, posix form
            path_naming: Style applied to directories and file names
        """
        self.registry = registry
        self.anchor = anchor
        self.path_naming = path_naming or PathNaming()

    def is_model(self, name: str) -> bool:
        return self.registry.find(name) is not None

    def resolve(self, name: str, from_structure: str) -> Optional[str]:
        """
        Compute the import path of a model as seen from a structural path.

        Args:
            name: Referenced type name
            from_structure: Structural path of the referencing model

        Returns:
            Extensionless relative path such as ``./orderStatus`` or
            ``../shared/money``, or None when ``name`` is not a model
        """
        target = self.registry.find(name)
        if target is None:
            return None

        from_dir = self._anchored(from_structure)
        target_dir = self._anchored(target.structure)
        relative = posixpath.relpath(target_dir, from_dir)

        file_stem = self.path_naming.file_stem(target.name)
        if relative == ".":
            import_path = f"./{file_stem}"
        elif relative == ".." or relative.startswith("../"):
            import_path = f"{relative}/{file_stem}"
        else:
            import_path = f"./{relative}/{file_stem}"

        logger.debug(f"Resolved {name} from '{from_structure}' to {import_path}")
        return import_path

    def _anchored(self, structure: str) -> str:
        styled = self.path_naming.directory(structure)
        return posixpath.normpath(posixpath.join(self.anchor or "/", styled))


__all__ = ["ImportResolver"]
