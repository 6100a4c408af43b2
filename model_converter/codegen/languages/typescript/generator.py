"""
TypeScript code generator implementation.

Generates one declaration file per model: an ``export enum`` for enum
models, an ``export interface`` with its imports for record models.
"""

from typing import Any, Dict, List, Optional
from pathlib import Path

from ...core.config import ConvertConfig, EnumValues
from ...core.generator import CodeGenerator, GeneratorError
from ...core.naming import to_camel_case
from ...core.schema import ModelFile, PropertyEntry
from .types import TypeScriptTypeMapper


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript enums and interfaces."""

    def __init__(self, config: Optional[ConvertConfig] = None):
        """Initialize TypeScript generator with configuration."""
        super().__init__(config)

        self.auto_generated_tag = self.config.auto_generated_tag
        self.enum_values = self.config.enum_values
        self.type_mapper = TypeScriptTypeMapper()

    def get_template_directory(self) -> Optional[Path]:
        """Return the TypeScript templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    def generate_model(self, model: ModelFile) -> str:
        """Generate the declaration file for one model using templates."""
        if model.is_enum:
            return self._render("enum.ts.j2", self._enum_context(model))
        return self._render("interface.ts.j2", self._interface_context(model))

    def _render(self, template_name: str, context: Dict[str, Any]) -> str:
        if not self.template_exists(template_name):
            raise GeneratorError(f"{template_name} template not found")
        return self.render_template(template_name, context)

    # Enums

    def _enum_context(self, model: ModelFile) -> Dict[str, Any]:
        entries = []
        for entry in model.enum_entries:
            if not entry.name:
                continue

            if self.enum_values == EnumValues.STRING:
                value = f"'{to_camel_case(entry.name)}'"
            elif not entry.is_implicit:
                value = str(entry.value)
            else:
                # Implicit entries follow the previous value on their own
                value = None

            entries.append({"name": entry.name, "value": value})

        return {
            "auto_generated_tag": self.auto_generated_tag,
            "name": model.name,
            "entries": entries,
        }

    # Interfaces

    def _interface_context(self, model: ModelFile) -> Dict[str, Any]:
        return {
            "auto_generated_tag": self.auto_generated_tag,
            "name": model.name,
            "extends": model.inherits,
            "imports": self.collect_imports(model),
            "fields": [self._field_data(entry) for entry in model.fields],
        }

    def collect_imports(self, model: ModelFile) -> List[Dict[str, str]]:
        """
        Import statements needed by a record model, in first-use order.

        The base type comes first, then for each property its own type and
        the key and value types of a dictionary property. Each distinct
        (name, path) pair is imported once.
        """
        imports: List[Dict[str, str]] = []

        def add(name: str, path: Optional[str]):
            statement = {"name": name, "path": path}
            if path and statement not in imports:
                imports.append(statement)

        if model.inherits:
            add(model.inherits, model.inheritance_import_path)

        for entry in model.objects:
            if entry.is_user_defined:
                add(entry.type, entry.import_path)
            if entry.is_container:
                for reference in entry.container.references():
                    if reference.is_user_defined:
                        add(reference.type, reference.import_path)

        return imports

    def _field_data(self, entry: PropertyEntry) -> Dict[str, Any]:
        """Template data for one rendered property."""
        if entry.is_container:
            key, value = entry.container.references()
            field_type = f"Partial<Record<{key.render()}, {value.render()}>>"
        else:
            field_type = f"{entry.type}[]" if entry.is_array else entry.type

        return {
            "name": entry.name,
            "optional": entry.is_optional,
            "type": field_type,
        }
