"""Tests for model_converter.codegen.resolver and the model registry."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from model_converter.codegen.core.config import PathStyle
from model_converter.codegen.core.naming import PathNaming
from model_converter.codegen.core.schema import SourceFile
from model_converter.codegen.languages.typescript import TypeScriptGenerator
from model_converter.codegen.registry import (
    ModelRegistryBuilder,
    RegistryError,
    get_generator,
)
from model_converter.codegen.resolver import ImportResolver


def _entry(name: str, structure: str = "", root: str = "/repo/models") -> SourceFile:
    return SourceFile(
        name=name,
        structure=structure,
        path=Path(root) / structure / f"{name}.cs",
        root=Path(root),
    )


def _resolver(*entries: SourceFile, style: PathStyle = PathStyle.DEFAULT) -> ImportResolver:
    builder = ModelRegistryBuilder()
    for entry in entries:
        builder.add(entry)
    return ImportResolver(builder.freeze(), "/repo", PathNaming(style))


@pytest.mark.parametrize(
    ("target_structure", "from_structure", "expected"),
    [
        ("", "", "./money"),
        ("Shared", "Shared", "./money"),
        ("Shared", "", "./Shared/money"),
        ("Shared/Values", "", "./Shared/Values/money"),
        ("", "Orders/Open", "../../money"),
        ("Shared", "Orders", "../Shared/money"),
    ],
)
def test_resolve_relative_paths(
    target_structure: str, from_structure: str, expected: str
) -> None:
    resolver = _resolver(_entry("Money", target_structure))
    assert resolver.resolve("Money", from_structure) == expected


def test_resolve_applies_kebab_style() -> None:
    resolver = _resolver(_entry("OrderLine", "SharedKernel"), style=PathStyle.KEBAB)
    assert resolver.resolve("OrderLine", "SalesOrders") == "../shared-kernel/order-line"


def test_resolve_unknown_name_returns_none() -> None:
    resolver = _resolver(_entry("Money"))
    assert resolver.resolve("Currency", "") is None
    assert not resolver.is_model("Currency")


def test_resolve_is_case_sensitive() -> None:
    resolver = _resolver(_entry("Money"))
    assert resolver.resolve("money", "") is None


def test_duplicate_names_resolve_to_last_registration(
    caplog: pytest.LogCaptureFixture,
) -> None:
    first = _entry("Money", "Legacy")
    second = _entry("Money", "Current")

    with caplog.at_level(logging.WARNING):
        resolver = _resolver(first, second)

    assert resolver.resolve("Money", "") == "./Current/money"
    assert "Duplicate model name 'Money'" in caplog.text


def test_registry_preserves_discovery_order() -> None:
    builder = ModelRegistryBuilder()
    for name in ("Zeta", "Alpha", "Mid"):
        builder.add(_entry(name))
    registry = builder.freeze()

    assert registry.names() == ["Zeta", "Alpha", "Mid"]
    assert [entry.name for entry in registry] == ["Zeta", "Alpha", "Mid"]
    assert len(registry) == 3
    assert "Alpha" in registry
    assert "alpha" not in registry


def test_frozen_builder_rejects_additions() -> None:
    builder = ModelRegistryBuilder()
    builder.add(_entry("Money"))
    builder.freeze()

    with pytest.raises(RegistryError):
        builder.add(_entry("Currency"))


def test_generator_registry_resolves_aliases() -> None:
    assert isinstance(get_generator("typescript"), TypeScriptGenerator)
    assert isinstance(get_generator("TS"), TypeScriptGenerator)

    with pytest.raises(RegistryError):
        get_generator("cobol")
