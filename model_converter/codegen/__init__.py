"""
Model Converter Code Generation Module

Resolves cross-file references between parsed models and renders them
as TypeScript declarations.
"""

from .registry import (
    GeneratorRegistry,
    ModelRegistry,
    ModelRegistryBuilder,
    RegistryError,
    get_generator,
)
from .resolver import ImportResolver
from .core.generator import CodeGenerator, GeneratorError
from .core.schema import (
    ContainerType,
    EnumEntry,
    ModelFile,
    PropertyEntry,
    SourceFile,
    TypeReference,
)
from .core.config import ConvertConfig, ConfigManager, ConfigError, load_config

__all__ = [
    "GeneratorRegistry",
    "ModelRegistry",
    "ModelRegistryBuilder",
    "RegistryError",
    "ImportResolver",
    "CodeGenerator",
    "GeneratorError",
    "ContainerType",
    "EnumEntry",
    "ModelFile",
    "PropertyEntry",
    "SourceFile",
    "TypeReference",
    "ConvertConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "get_generator",
]
