"""
model_converter - C# model to TypeScript declaration converter.

Scans one or more directories of single-type C# files (one class or enum
per file) and writes a mirrored tree of TypeScript enums and interfaces.
"""

__version__ = "0.1.0"

from .codegen.core.config import ConvertConfig, EnumValues, PathStyle, load_config
from .service import ConversionResult, ConvertService, convert

__all__ = [
    "ConversionResult",
    "ConvertConfig",
    "ConvertService",
    "EnumValues",
    "PathStyle",
    "convert",
    "load_config",
    "__version__",
]
