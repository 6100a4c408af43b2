"""
TypeScript type system for code generation.

Maps C# primitive type names to TypeScript primitives through a fixed
table. Names outside the table are not primitives and become ``any``.
"""

from enum import Enum
from typing import Dict, Optional


class PrimitiveCategory(Enum):
    """Target primitive categories, valued by their TypeScript spelling."""

    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"
    DATE = "Date"
    UNKNOWN = "any"


_NUMERIC_TYPES = (
    # keywords
    "byte",
    "sbyte",
    "short",
    "ushort",
    "int",
    "uint",
    "long",
    "ulong",
    "nint",
    "nuint",
    "float",
    "double",
    "decimal",
    # framework names
    "Byte",
    "SByte",
    "Int16",
    "UInt16",
    "Int32",
    "UInt32",
    "Int64",
    "UInt64",
    "Single",
    "Double",
    "Decimal",
)

_BOOLEAN_TYPES = ("bool", "Boolean")

_STRING_TYPES = ("char", "string", "Char", "String", "Guid")

_DATE_TYPES = ("DateTime", "DateTimeOffset")


def _build_primitive_table() -> Dict[str, PrimitiveCategory]:
    table = {}
    for names, category in (
        (_NUMERIC_TYPES, PrimitiveCategory.NUMBER),
        (_BOOLEAN_TYPES, PrimitiveCategory.BOOLEAN),
        (_STRING_TYPES, PrimitiveCategory.STRING),
        (_DATE_TYPES, PrimitiveCategory.DATE),
    ):
        for name in names:
            table[name] = category
    return table


# Every recognised source primitive and its target category
SOURCE_PRIMITIVES: Dict[str, PrimitiveCategory] = _build_primitive_table()


class TypeScriptTypeMapper:
    """Maps source primitive names to TypeScript type names."""

    def __init__(self, type_overrides: Optional[Dict[str, str]] = None):
        """
        Initialize the mapper.

        Args:
            type_overrides: Source name to TypeScript name, checked first
        """
        self.type_overrides = dict(type_overrides or {})

    def category_of(self, name: str) -> PrimitiveCategory:
        """Primitive category of a source type name."""
        return SOURCE_PRIMITIVES.get(name.strip(), PrimitiveCategory.UNKNOWN)

    def map_type(self, name: str) -> str:
        """
        Map a cleaned source type name to its TypeScript name.

        Args:
            name: Type name without nullable, array or generic decorations

        Returns:
            ``number``, ``boolean``, ``string``, ``Date`` or ``any``
        """
        name = name.strip()
        if name in self.type_overrides:
            return self.type_overrides[name]
        return self.category_of(name).value

    def is_primitive(self, name: str) -> bool:
        return self.category_of(name) != PrimitiveCategory.UNKNOWN


__all__ = ["PrimitiveCategory", "SOURCE_PRIMITIVES", "TypeScriptTypeMapper"]
