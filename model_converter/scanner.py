"""Discovery of model source files across one or more working directories."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterator, Sequence

from .codegen.core.config import ConfigError
from .codegen.core.naming import to_pascal_case
from .codegen.core.schema import SourceFile
from .fs import create_directory
from .logging_config import get_logger
from .utils import load_source_lines

logger = get_logger(__name__)

LogSink = Callable[..., None]

DIRECTORY_SEPARATOR = ";"


def resolve_working_directories(
    working_directory: str | None = None,
    working_directories: str | None = None,
    base_dir: Path | None = None,
    log: LogSink | None = None,
) -> list[Path]:
    """Turn the configured directories into absolute roots.

    Args:
        working_directory: A single directory.
        working_directories: ``;`` separated directories.
        base_dir: Directory relative entries are resolved against
            (current directory if None).
        log: Host log sink, the module logger by default.

    Returns:
        Absolute roots in configuration order. ``base_dir`` itself when
        nothing is configured. Missing directories are created.
    """
    log = log or logger.info
    base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
    base_dir = base_dir.absolute()

    if not working_directory and not working_directories:
        log("Using Default Working Directory %s", base_dir)
        return [base_dir]

    roots = []
    combined = f"{working_directory or ''}{DIRECTORY_SEPARATOR}{working_directories or ''}"
    for item in combined.split(DIRECTORY_SEPARATOR):
        if not item.strip():
            continue

        root = Path(os.path.normpath(base_dir / item.strip()))
        if not root.is_dir():
            log("Working Directory does not exist %s, creating..", root)
            create_directory(root)

        log("Adding Working Directory %s", root)
        roots.append(root)

    return roots


def shared_ancestor(roots: Sequence[Path]) -> str:
    """Longest common directory of the roots, as a posix path.

    The common character prefix of the roots is trimmed back to the last
    separator so a folder name is never split (``/src/app`` and
    ``/src/apple`` share ``/src``).

    Raises:
        ConfigError: If no roots are given or they share no prefix.
    """
    if not roots:
        raise ConfigError("No working directories to scan")

    if len(roots) == 1:
        return Path(roots[0]).as_posix()

    paths = [Path(root).as_posix().rstrip("/") + "/" for root in roots]
    prefix = os.path.commonprefix(paths)
    prefix = prefix[: prefix.rfind("/") + 1]

    if not prefix:
        raise ConfigError(
            "Directories have no common parent: " + ", ".join(str(root) for root in roots)
        )

    return prefix.rstrip("/") or "/"


class DirectoryScanner:
    """Enumerates model source files below a root directory."""

    def __init__(self, source_extension: str = ".cs"):
        self.source_extension = source_extension

    def scan(self, root: Path) -> Iterator[SourceFile]:
        """Yield every source file below ``root``.

        Sub-directories are visited first, in sorted order, then the
        directory's own files, also sorted.
        """
        root = Path(root)
        yield from self._scan_directory(root, root)

    def _scan_directory(self, root: Path, directory: Path) -> Iterator[SourceFile]:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)

        for entry in entries:
            if entry.is_dir():
                yield from self._scan_directory(root, entry)

        structure = directory.relative_to(root).as_posix()
        if structure == ".":
            structure = ""

        for entry in entries:
            if entry.is_file() and self._is_source(entry):
                yield self._load(root, structure, entry)

    def _is_source(self, path: Path) -> bool:
        return path.name.lower().endswith(self.source_extension.lower())

    def _load(self, root: Path, structure: str, path: Path) -> SourceFile:
        stem = path.name[: len(path.name) - len(self.source_extension)]
        name = to_pascal_case(stem)
        logger.debug(f"Discovered {name} in '{structure}' ({path})")
        return SourceFile(
            name=name,
            structure=structure,
            path=path,
            root=root,
            lines=load_source_lines(path),
        )


__all__ = [
    "DirectoryScanner",
    "LogSink",
    "resolve_working_directories",
    "shared_ancestor",
]
