"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError
from .schema import (
    ContainerType,
    EnumEntry,
    ModelFile,
    PropertyEntry,
    SourceFile,
    TypeReference,
)
from .naming import (
    PathNaming,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
)
from .config import (
    ConvertConfig,
    ConfigManager,
    ConfigError,
    EnumValues,
    PathStyle,
    load_config,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    # Model representation
    "ContainerType",
    "EnumEntry",
    "ModelFile",
    "PropertyEntry",
    "SourceFile",
    "TypeReference",
    # Naming utilities
    "PathNaming",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    # Configuration system
    "ConvertConfig",
    "ConfigManager",
    "ConfigError",
    "EnumValues",
    "PathStyle",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
