"""Utility functions for loading C# source files.

This module reads model source files into lines with encoding fallback
and proper error reporting.
"""

from pathlib import Path

from .logging_config import get_logger

logger = get_logger(__name__)

# utf-8-sig first so a byte order mark never leaks into the first line
SOURCE_ENCODINGS = ("utf-8-sig", "cp1252")


class SourceLoaderError(Exception):
    """Custom exception for source loading errors."""

    pass


def load_source_lines(file_path: str | Path) -> tuple[str, ...]:
    """Load a source file as a tuple of lines without line terminators.

    Args:
        file_path: Path to the source file.

    Returns:
        Tuple of raw text lines in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        SourceLoaderError: If the file cannot be read or decoded.
    """
    file_path = Path(file_path)
    logger.debug(f"Loading source file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        raw = file_path.read_bytes()
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise SourceLoaderError(f"Error reading file {file_path}: {e}") from e

    for encoding in SOURCE_ENCODINGS:
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError:
            logger.debug(f"{file_path} is not valid {encoding}, trying next encoding")
            continue
        return tuple(text.splitlines())

    logger.error(f"Could not decode {file_path} with {', '.join(SOURCE_ENCODINGS)}")
    raise SourceLoaderError(
        f"Could not decode {file_path} with any of: {', '.join(SOURCE_ENCODINGS)}"
    )
