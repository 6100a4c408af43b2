"""Conversion pipeline: discover, parse, then emit.

All working directories are discovered and registered before any file is
parsed, and every file is parsed before the output directory is touched.
A parse error therefore leaves the previous output in place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .codegen.core.config import ConfigError, ConvertConfig
from .codegen.core.generator import CodeGenerator
from .codegen.core.schema import ModelFile
from .codegen.registry import ModelRegistry, ModelRegistryBuilder, get_generator
from .codegen.resolver import ImportResolver
from .fs import open_for_write, replace_directory
from .logging_config import get_logger
from .parser import StructuralParser
from .scanner import (
    DirectoryScanner,
    LogSink,
    resolve_working_directories,
    shared_ancestor,
)

logger = get_logger(__name__)

TARGET_LANGUAGE = "typescript"


class ConvertService:
    """Converts every model below the working directories in one run."""

    def __init__(
        self,
        config: Optional[ConvertConfig] = None,
        log: Optional[LogSink] = None,
        base_dir: Optional[Path] = None,
    ):
        """
        Initialize the service.

        Args:
            config: Conversion settings, defaults when omitted
            log: Host log sink taking a %-style template and its arguments
            base_dir: Directory relative paths are resolved against
                (current directory if None)
        """
        self.config = config or ConvertConfig()
        self.log = log or logger.info
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self.generator: CodeGenerator = get_generator(TARGET_LANGUAGE, self.config)

        self.roots: List[Path] = []
        self.anchor: Optional[str] = None
        self.models: List[ModelFile] = []
        self.written: List[Path] = []
        self.output_directory: Optional[Path] = None

    def execute(self) -> bool:
        """
        Run the whole conversion.

        Returns:
            True once every model has been written

        Raises:
            ConfigError: Working directories share no parent, or the output
                directory would contain a working directory
            ParseError: A source file is malformed, nothing is written
            FileOperationError: The output could not be written
        """
        self.log("Starting ConvertService")

        self.roots = resolve_working_directories(
            self.config.working_directory,
            self.config.working_directories,
            base_dir=self.base_dir,
            log=self.log,
        )
        self.anchor = shared_ancestor(self.roots)

        registry = self.discover(self.roots)
        self.models = self.parse(registry)

        for warning in self.generator.validate_models(self.models):
            logger.warning(warning)

        self.output_directory = self.prepare_output_directory()
        self.written = self.emit(self.models, self.output_directory)

        self.log("Finished ConvertService")
        return True

    def discover(self, roots: Sequence[Path]) -> ModelRegistry:
        """Register every source file of every root, then freeze."""
        scanner = DirectoryScanner(self.config.source_extension)
        builder = ModelRegistryBuilder()

        for root in roots:
            for source in scanner.scan(root):
                builder.add(source)

        return builder.freeze()

    def parse(self, registry: ModelRegistry) -> List[ModelFile]:
        """Parse every registered file, resolving references as it goes."""
        resolver = ImportResolver(registry, self.anchor, self.generator.path_naming)
        parser = StructuralParser(resolver, getattr(self.generator, "type_mapper", None))
        return [parser.parse(source) for source in registry]

    def prepare_output_directory(self) -> Path:
        """
        Resolve the output directory and clear it.

        Without a configured directory the current one is used and left
        as it is, so stale files from earlier runs survive there.
        """
        if not self.config.convert_directory:
            self.log(
                "Using Default Convert Directory %s - this does not always update",
                self.base_dir,
            )
            return self.base_dir

        output = (self.base_dir / self.config.convert_directory).resolve()

        for root in self.roots:
            resolved_root = root.resolve()
            if resolved_root == output or output in resolved_root.parents:
                raise ConfigError(
                    f"Convert directory {output} contains working directory {root}"
                )

        if output.exists():
            self.log("Convert Directory %s", output)
        else:
            self.log("Convert Directory does not exist %s, creating..", output)

        replace_directory(output)
        return output

    def emit(self, models: Sequence[ModelFile], output: Path) -> List[Path]:
        """Write one declaration file per model."""
        self.log("Converting..")
        written = []

        for model in models:
            path = self.generator.output_path(model, output)
            self.log("Creating file %s", path.name)

            content = self.generator.generate_model(model)
            with open_for_write(path) as handle:
                handle.write(content)

            written.append(path)

        return written


class ConversionResult:
    """Container for conversion results and metadata."""

    def __init__(
        self,
        written: Optional[List[Path]] = None,
        output_directory: Optional[Path] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize conversion result.

        Args:
            written: Paths of the generated files
            output_directory: Directory the files were written below
            metadata: Additional metadata about the run
        """
        self.written = written or []
        self.output_directory = output_directory
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "ConversionResult":
        """Create a failed conversion result."""
        result = cls()
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def convert(
    config: Optional[ConvertConfig] = None,
    log: Optional[LogSink] = None,
    base_dir: Optional[Path] = None,
) -> ConversionResult:
    """
    Run a conversion with error handling.

    Args:
        config: Conversion settings
        log: Host log sink
        base_dir: Directory relative paths are resolved against

    Returns:
        ConversionResult describing the written files or the failure
    """
    try:
        service = ConvertService(config, log=log, base_dir=base_dir)
        service.execute()
    except Exception as e:
        logger.debug("Conversion failed", exc_info=True)
        return ConversionResult.error(f"Conversion failed: {e}", exception=e)

    models = service.models
    metadata = {
        "language": service.generator.language_name,
        "file_extension": service.generator.file_extension,
        "roots": [str(root) for root in service.roots],
        "anchor": service.anchor,
        "model_count": len(models),
        "enum_count": sum(1 for model in models if model.is_enum),
        "interface_count": sum(1 for model in models if not model.is_enum),
    }
    return ConversionResult(service.written, service.output_directory, metadata)


__all__ = ["ConversionResult", "ConvertService", "convert"]
