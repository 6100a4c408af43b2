"""
Core model representation for code generation.

Holds the intermediate form produced by the structural parser: one
ModelFile per discovered source file, either an enumeration or a record
with an ordered property list. Everything here is immutable once built.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class SourceFile:
    """A discovered source file, before parsing."""

    name: str  # Identity, Pascal-cased file base name
    structure: str  # Containing directory relative to its own root, posix
    path: Path
    root: Path
    lines: Tuple[str, ...] = field(default=(), repr=False)


@dataclass(frozen=True)
class TypeReference:
    """A resolved type used as one side of a container property."""

    type: str
    is_user_defined: bool = False
    import_path: Optional[str] = None
    is_array: bool = False

    def render(self) -> str:
        return f"{self.type}[]" if self.is_array else self.type


@dataclass(frozen=True)
class ContainerType:
    """Key and value types of a dictionary shaped property."""

    key: TypeReference
    value: TypeReference

    def references(self) -> Tuple[TypeReference, TypeReference]:
        """Both members, key first."""
        return (self.key, self.value)


@dataclass(frozen=True)
class PropertyEntry:
    """Represents a single property of a record model."""

    name: str
    type: str = ""
    is_array: bool = False
    is_optional: bool = False
    is_user_defined: bool = False
    import_path: Optional[str] = None

    # Set only for dictionary shaped properties
    container: Optional[ContainerType] = None

    @classmethod
    def placeholder(cls) -> "PropertyEntry":
        """Entry marking a model that only inherits, never rendered."""
        return cls(name="")

    @property
    def is_placeholder(self) -> bool:
        return not self.name

    @property
    def is_container(self) -> bool:
        return self.container is not None


@dataclass(frozen=True)
class EnumEntry:
    """
    A single enumerator.

    ``value`` is only meaningful when ``is_implicit`` is False. Implicit
    entries are emitted without a value so the target language continues
    numbering from the previous entry on its own.
    """

    name: str
    value: Optional[int] = None
    is_implicit: bool = True


@dataclass(frozen=True)
class ModelFile:
    """Intermediate representation of one source file."""

    name: str
    structure: str
    is_enum: bool = False

    # Inheritance
    inherits: Optional[str] = None
    inheritance_import_path: Optional[str] = None

    # Declared underlying type of an enum (e.g. ``byte``), informational
    underlying_type: Optional[str] = None

    objects: Tuple[PropertyEntry, ...] = ()
    enum_entries: Tuple[EnumEntry, ...] = ()

    def __post_init__(self):
        if self.is_enum and self.objects:
            raise ValueError(f"Enum model '{self.name}' cannot have properties")
        if not self.is_enum and self.enum_entries:
            raise ValueError(f"Record model '{self.name}' cannot have enum entries")

    @property
    def fields(self) -> Tuple[PropertyEntry, ...]:
        """Properties that are rendered, placeholder excluded."""
        return tuple(entry for entry in self.objects if not entry.is_placeholder)


__all__ = [
    "ContainerType",
    "EnumEntry",
    "ModelFile",
    "PropertyEntry",
    "SourceFile",
    "TypeReference",
]
