"""
Registries used during conversion.

ModelRegistryBuilder collects every discovered source file; freezing it
yields the read-only ModelRegistry that answers identity lookups during
resolution and emission. GeneratorRegistry maps target language names to
their code generators.
"""

from typing import Dict, Iterator, List, Optional, Tuple, Type

from ..logging_config import get_logger
from .core.config import ConvertConfig
from .core.generator import CodeGenerator
from .core.schema import SourceFile

logger = get_logger(__name__)


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class ModelRegistry:
    """Frozen, read-only view of all discovered models."""

    def __init__(self, entries: Tuple[SourceFile, ...]):
        self._entries = tuple(entries)

    def find(self, name: str) -> Optional[SourceFile]:
        """
        Look up a model by exact name.

        Linear scan over the discovery order; when a name was registered
        more than once the last registration wins.
        """
        found = None
        for entry in self._entries:
            if entry.name == name:
                found = entry
        return found

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __iter__(self) -> Iterator[SourceFile]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def names(self) -> List[str]:
        return [entry.name for entry in self._entries]


class ModelRegistryBuilder:
    """Mutable registry used only while roots are being discovered."""

    def __init__(self):
        self._entries: List[SourceFile] = []
        self._seen: Dict[str, SourceFile] = {}
        self._frozen = False

    def add(self, source: SourceFile) -> None:
        """
        Register a discovered source file.

        Raises:
            RegistryError: If the builder was already frozen
        """
        if self._frozen:
            raise RegistryError("Cannot add models after the registry was frozen")

        previous = self._seen.get(source.name)
        if previous is not None:
            logger.warning(
                f"Duplicate model name '{source.name}': {source.path} "
                f"replaces {previous.path} for cross references"
            )

        self._entries.append(source)
        self._seen[source.name] = source

    def freeze(self) -> ModelRegistry:
        """Finish discovery and return the read-only registry."""
        self._frozen = True
        logger.debug(f"Model registry frozen with {len(self._entries)} entries")
        return ModelRegistry(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


class GeneratorRegistry:
    """Registry for managing available code generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a language.

        Args:
            language: Primary language name (e.g., 'typescript')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this language
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If generator class is invalid or conflicts exist
        """
        if not issubclass(generator_class, CodeGenerator):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = language.lower()

        # Already registered, skip silently
        if language_key in self._generators and not replace:
            return

        self._generators[language_key] = generator_class

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == language_key:
                continue

            if not replace:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary language"
                    )
                if (
                    alias_key in self._aliases
                    and self._aliases[alias_key] != language_key
                ):
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

            self._aliases[alias_key] = language_key

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        """
        Get generator class for language.

        Args:
            language: Language name or alias

        Returns:
            Generator class

        Raises:
            RegistryError: If language not found
        """
        language_key = language.lower()

        if language_key in self._generators:
            return self._generators[language_key]

        if language_key in self._aliases:
            return self._generators[self._aliases[language_key]]

        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def create_generator(
        self, language: str, config: Optional[ConvertConfig] = None
    ) -> CodeGenerator:
        """
        Create generator instance for language.

        Raises:
            RegistryError: If the language is unknown
        """
        generator_class = self.get_generator_class(language)
        return generator_class(config or ConvertConfig())

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._generators.keys())


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators()
    return _global_registry


def _auto_register_generators():
    """Register the built-in generators with their aliases."""
    from .languages.typescript import TypeScriptGenerator

    _global_registry.register("typescript", TypeScriptGenerator, aliases=["ts"])


def get_generator(
    language: str, config: Optional[ConvertConfig] = None
) -> CodeGenerator:
    """
    Get generator instance from global registry.

    Args:
        language: Language name
        config: Configuration

    Returns:
        Generator instance
    """
    return get_registry().create_generator(language, config)


__all__ = [
    "GeneratorRegistry",
    "ModelRegistry",
    "ModelRegistryBuilder",
    "RegistryError",
    "get_generator",
    "get_registry",
]
