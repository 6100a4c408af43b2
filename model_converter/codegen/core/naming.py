"""
Naming utilities for generated declarations.

Handles the case conversions used for type names, member names, output
file names and output directory segments.
"""

from .config import PathStyle


def to_camel_case(name: str) -> str:
    """
    Lower-case the first letter of a name.

    An identifier without any lower-case letter (``ID``, ``URL``) is
    lower-cased entirely. Names already starting lower-case are kept.
    """
    if not name or name[0].islower():
        return name

    if not any(c.isalpha() and c.islower() for c in name):
        return name.lower()

    return name[0].lower() + name[1:]


def to_pascal_case(name: str) -> str:
    """Upper-case the first letter of a name."""
    if not name or name[0].isupper():
        return name

    return name[0].upper() + name[1:]


def to_kebab_case(name: str) -> str:
    """
    Split a name before every upper-case letter and join with hyphens.

    Each upper-case letter starts a new word, so ``OrderStatus`` becomes
    ``order-status`` and ``ID`` becomes ``i-d``.
    """
    if not name:
        return name

    words = []
    word_start = 0
    for index in range(1, len(name)):
        if name[index].isupper():
            words.append(name[word_start:index])
            word_start = index
    words.append(name[word_start:])

    return "-".join(word.lower() for word in words if word)


def to_kebab_case_path(path: str) -> str:
    """Kebab-case every segment of a ``/``-separated path."""
    return "/".join(to_kebab_case(segment) for segment in path.split("/"))


class PathNaming:
    """Applies a path style to output directories and file names."""

    def __init__(self, style: PathStyle = PathStyle.DEFAULT):
        self.style = style

    def file_stem(self, model_name: str) -> str:
        """Output file name of a model, without extension."""
        if self.style == PathStyle.KEBAB:
            return to_kebab_case(model_name)
        return to_camel_case(model_name)

    def directory(self, structure: str) -> str:
        """Output directory of a structural path, relative to the output root."""
        if self.style == PathStyle.KEBAB and structure:
            return to_kebab_case_path(structure)
        return structure


__all__ = [
    "PathNaming",
    "to_camel_case",
    "to_kebab_case",
    "to_kebab_case_path",
    "to_pascal_case",
]
