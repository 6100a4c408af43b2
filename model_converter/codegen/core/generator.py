"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Any, Optional
from pathlib import Path

from .config import ConvertConfig
from .naming import PathNaming
from .schema import ModelFile
from .templates import TemplateEngine, create_template_engine


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[ConvertConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or ConvertConfig()
        self.path_naming = PathNaming(self.config.path_style)
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        if template_dir:
            self._template_engine = create_template_engine(template_dir)
        else:
            # Fallback to in-memory templates
            self._template_engine = create_template_engine()

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.

        Returns:
            Path to template directory or None
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate_model(self, model: ModelFile) -> str:
        """
        Generate the complete output file content for one model.

        Args:
            model: Parsed model with all references resolved

        Returns:
            File content, newline terminated
        """
        pass

    def output_path(self, model: ModelFile, output_root: Path) -> Path:
        """
        Location of the generated file for a model.

        The model's structural path and name are re-cased with the
        configured path style; the structure's segments become directories.
        """
        path = Path(output_root)
        directory = self.path_naming.directory(model.structure)
        if directory:
            path = path.joinpath(*directory.split("/"))
        return path / f"{self.path_naming.file_stem(model.name)}{self.file_extension}"

    def validate_models(self, models: Iterable[ModelFile]) -> List[str]:
        """
        Validate models for basic structural issues.

        Language generators may override this to add their own checks.

        Args:
            models: Models to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for model in models:
            if model.is_enum and not model.enum_entries:
                warnings.append(f"Enum '{model.name}' has no entries")
            elif not model.is_enum and not model.objects:
                warnings.append(f"Model '{model.name}' has no properties")

            if model.inherits and not model.inheritance_import_path:
                warnings.append(
                    f"Base type '{model.inherits}' of '{model.name}' is not a known model"
                )

        return warnings

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)
