"""
TypeScript code generator module.

Generates TypeScript enums and interfaces from parsed C# models.
"""

from .generator import TypeScriptGenerator
from .types import PrimitiveCategory, SOURCE_PRIMITIVES, TypeScriptTypeMapper

__all__ = [
    "TypeScriptGenerator",
    "TypeScriptTypeMapper",
    "PrimitiveCategory",
    "SOURCE_PRIMITIVES",
]
