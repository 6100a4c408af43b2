"""Structural parser turning C# model files into :class:`ModelFile` objects.

A file is read line by line. The first ``enum`` header switches the file
to enum mode and every line of the file is scanned again for enumerators;
otherwise class headers contribute the base type and ``public`` lines
contribute properties in declaration order.
"""

from __future__ import annotations

import re
from typing import Optional

from .codegen.core.schema import (
    ContainerType,
    EnumEntry,
    ModelFile,
    PropertyEntry,
    SourceFile,
    TypeReference,
)
from .codegen.languages.typescript.types import TypeScriptTypeMapper
from .codegen.resolver import ImportResolver
from .lines import ClassifiedLine, LineKind, classify_line
from .logging_config import get_logger

logger = get_logger(__name__)

# Generic wrappers whose single argument is the element type
COLLECTION_WRAPPERS = frozenset(
    {
        "List",
        "IList",
        "IEnumerable",
        "ICollection",
        "Collection",
        "IReadOnlyList",
        "IReadOnlyCollection",
        "HashSet",
        "ISet",
        "Nullable",
    }
)

# Case-insensitive markers of a collection type
ARRAY_MARKERS = ("list", "collection", "enumerable", "array")

MAP_TYPE = "Record"

_GENERIC = re.compile(r"^([\w.]+)<(.*)>$")
_DECIMAL_LITERAL = re.compile(r"[-+]?[0-9]+")
_HEX_LITERAL = re.compile(r"0[xX]([0-9a-fA-F]+)")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class ParseError(Exception):
    """Base exception for errors in a model source file."""

    def __init__(self, message: str, file_name: str, line: str):
        super().__init__(message)
        self.file_name = file_name
        self.line = line


class StructureError(ParseError):
    """Raised when a declaration keeps its opening brace on the same line."""

    def __init__(self, file_name: str, line: str):
        super().__init__(
            "For parsing, C# models must put the opening brace on the next line\n"
            f'in {file_name}.cs\n"{line}"',
            file_name,
            line,
        )


class EnumValueError(ParseError):
    """Raised when an explicit enumerator value is not an integer literal."""

    def __init__(self, file_name: str, line: str, value: str):
        super().__init__(
            f'Invalid enum value {value!r} in {file_name}.cs\n"{line}"',
            file_name,
            line,
        )
        self.value = value


def is_interface_name(name: str) -> bool:
    """Interface naming convention: ``I`` followed by an upper-case letter."""
    return len(name) > 1 and name[0] == "I" and name[1].isupper()


def is_dictionary(type_name: str) -> bool:
    return (
        "Dictionary" in type_name
        and "<" in type_name
        and ">" in type_name
        and "," in type_name
    )


def is_array(type_name: str) -> bool:
    """True for ``T[]``, collection-like names and any unwrapped collection wrapper."""
    lowered = type_name.lower()
    if "[]" in type_name or any(marker in lowered for marker in ARRAY_MARKERS):
        return True

    match = _GENERIC.match(type_name.replace("?", "").strip())
    while match:
        wrapper = match.group(1).split(".")[-1]
        if wrapper not in COLLECTION_WRAPPERS:
            return False
        if wrapper != "Nullable":
            return True
        match = _GENERIC.match(match.group(2).strip())
    return False


def is_optional(type_name: str) -> bool:
    return "?" in type_name


def clean_type(type_name: str) -> str:
    """Reduce a declared type to the bare name used for lookup and mapping.

    Nullable markers and array suffixes are removed, known collection
    wrappers are unwrapped to their element type and any angle brackets
    left over are dropped.
    """
    cleaned = type_name.replace("?", "").replace("[]", "").strip()

    match = _GENERIC.match(cleaned)
    while match and match.group(1).split(".")[-1] in COLLECTION_WRAPPERS:
        cleaned = match.group(2).strip()
        match = _GENERIC.match(cleaned)

    return cleaned.replace("<", "").replace(">", "")


def split_type_arguments(type_name: str) -> list[str]:
    """Top-level generic arguments of a type such as ``Dictionary<K, V>``."""
    start = type_name.find("<")
    end = type_name.rfind(">")
    if start == -1 or end <= start:
        return []

    arguments = []
    depth = 0
    current = ""
    for char in type_name[start + 1 : end]:
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
        elif char == "," and depth == 0:
            arguments.append(current.strip())
            current = ""
            continue
        current += char
    arguments.append(current.strip())
    return arguments


def parse_enum_value(text: str) -> int:
    """Parse a decimal or ``0x`` hexadecimal 32-bit integer literal.

    Hexadecimal literals are read as two's complement, so ``0xFFFFFFFF``
    is -1.

    Raises:
        ValueError: If ``text`` is neither, or does not fit in 32 bits.
    """
    text = text.strip()

    hex_match = _HEX_LITERAL.fullmatch(text)
    if hex_match:
        value = int(hex_match.group(1), 16)
        if value > 0xFFFFFFFF:
            raise ValueError(f"Hexadecimal value out of range: {text}")
        return value - 2**32 if value > INT32_MAX else value

    if not _DECIMAL_LITERAL.fullmatch(text):
        raise ValueError(f"Not an integer literal: {text!r}")

    value = int(text, 10)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"Value out of range: {text}")
    return value


class StructuralParser:
    """Builds a ModelFile from the lines of one source file."""

    def __init__(
        self,
        resolver: ImportResolver,
        type_mapper: Optional[TypeScriptTypeMapper] = None,
    ):
        """
        Initialize the parser.

        Args:
            resolver: Resolver over the frozen registry of all models
            type_mapper: Maps primitive names that are not models
        """
        self.resolver = resolver
        self.type_mapper = type_mapper or TypeScriptTypeMapper()

    def parse(self, source: SourceFile) -> ModelFile:
        """
        Parse one source file.

        Raises:
            StructureError: A class or enum declaration has its brace inline
            EnumValueError: An explicit enumerator value is not an integer
        """
        objects: list[PropertyEntry] = []
        inherits = None
        inheritance_import_path = None

        for raw in source.lines:
            line = classify_line(raw)

            if line.kind == LineKind.MALFORMED_DECLARATION:
                raise StructureError(source.name, raw)

            if line.kind == LineKind.ENUM_HEADER:
                return self._parse_enum(source, line)

            if line.kind == LineKind.CLASS_HEADER:
                base = self._base_type(source, line)
                if base is not None:
                    inherits = base
                    inheritance_import_path = self.resolver.resolve(
                        base, source.structure
                    )
                    # Keeps the property list non-empty for inherit-only models
                    objects.append(PropertyEntry.placeholder())

            elif line.kind == LineKind.PROPERTY:
                entry = self._parse_property(source, line)
                if entry is not None:
                    objects.append(entry)

        return ModelFile(
            name=source.name,
            structure=source.structure,
            is_enum=False,
            inherits=inherits,
            inheritance_import_path=inheritance_import_path,
            objects=tuple(objects),
        )

    # Enums

    def _parse_enum(self, source: SourceFile, header: ClassifiedLine) -> ModelFile:
        underlying_type = None
        if ":" in header.text:
            underlying_type = header.text.split(":", 1)[1].strip() or None

        entries: list[EnumEntry] = []
        last_explicit: Optional[int] = None

        # Members are collected from the whole file, not only after the header
        for raw in source.lines:
            line = classify_line(raw, enum_body=True)
            if line.kind != LineKind.ENUMERATOR or not line.tokens:
                continue

            tokens = line.tokens
            name = tokens[0].split(",")[0]
            if not name:
                continue

            if len(tokens) > 1 and tokens[1] == "=":
                literal = tokens[2].replace(",", "") if len(tokens) > 2 else ""
                try:
                    value = parse_enum_value(literal)
                except ValueError as e:
                    raise EnumValueError(source.name, raw, literal) from e
                last_explicit = value
                entries.append(EnumEntry(name=name, value=value, is_implicit=False))
            else:
                logger.debug(
                    f"{source.name}.{name} is implicit, last explicit value: {last_explicit}"
                )
                entries.append(EnumEntry(name=name))

        return ModelFile(
            name=source.name,
            structure=source.structure,
            is_enum=True,
            underlying_type=underlying_type,
            enum_entries=tuple(entries),
        )

    # Records

    def _base_type(self, source: SourceFile, header: ClassifiedLine) -> Optional[str]:
        """First non-interface base named in a class header, if any."""
        if not header.tokens:
            return None

        candidate = header.tokens[-1]
        if is_interface_name(candidate):
            logger.debug(f"{source.name}: ignoring interface base {candidate}")
            return None

        candidate = candidate.split(",")[0]
        if not candidate or candidate == ":":
            return None
        return candidate

    def _parse_property(
        self, source: SourceFile, line: ClassifiedLine
    ) -> Optional[PropertyEntry]:
        if len(line.tokens) < 2:
            logger.debug(f"{source.name}: skipping property line {line.text.strip()!r}")
            return None

        declared_type = line.tokens[0]
        name = line.tokens[1]
        if name.endswith(";"):
            name = name[:-1]

        if is_dictionary(declared_type):
            return self._parse_dictionary(source, name, declared_type)

        type_name = clean_type(declared_type)
        import_path = self.resolver.resolve(type_name, source.structure)

        return PropertyEntry(
            name=name,
            type=type_name if import_path else self.type_mapper.map_type(type_name),
            is_array=is_array(declared_type),
            is_optional=is_optional(declared_type),
            is_user_defined=import_path is not None,
            import_path=import_path,
        )

    def _parse_dictionary(
        self, source: SourceFile, name: str, declared_type: str
    ) -> PropertyEntry:
        arguments = split_type_arguments(declared_type.replace("?", ""))
        if len(arguments) < 2:
            arguments = (arguments + ["", ""])[:2]

        key, value = (self._type_reference(source, argument) for argument in arguments[:2])

        return PropertyEntry(
            name=name,
            type=MAP_TYPE,
            is_optional=is_optional(declared_type),
            container=ContainerType(key=key, value=value),
        )

    def _type_reference(self, source: SourceFile, declared_type: str) -> TypeReference:
        type_name = clean_type(declared_type)
        import_path = self.resolver.resolve(type_name, source.structure)
        if import_path is None:
            return TypeReference(
                type=self.type_mapper.map_type(type_name),
                is_array=is_array(declared_type),
            )
        return TypeReference(
            type=type_name,
            is_user_defined=True,
            import_path=import_path,
            is_array=is_array(declared_type),
        )


__all__ = [
    "EnumValueError",
    "ParseError",
    "StructuralParser",
    "StructureError",
    "clean_type",
    "is_array",
    "is_dictionary",
    "is_interface_name",
    "is_optional",
    "parse_enum_value",
    "split_type_arguments",
]
