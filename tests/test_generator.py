"""Tests for the TypeScript generator and the template engine."""

from __future__ import annotations

from pathlib import Path

import pytest

from model_converter.codegen.core.config import ConvertConfig, EnumValues, PathStyle
from model_converter.codegen.core.schema import (
    ContainerType,
    EnumEntry,
    ModelFile,
    PropertyEntry,
    TypeReference,
)
from model_converter.codegen.core.templates import TemplateEngine, TemplateError
from model_converter.codegen.languages.typescript import TypeScriptGenerator

ORDER_STATUS = ModelFile(
    name="OrderStatus",
    structure="",
    is_enum=True,
    enum_entries=(
        EnumEntry("Pending"),
        EnumEntry("Active", 5, is_implicit=False),
        EnumEntry("Closed"),
    ),
)

CUSTOMER = ModelFile(
    name="Customer",
    structure="Crm",
    inherits="Person",
    inheritance_import_path="./person",
    objects=(
        PropertyEntry.placeholder(),
        PropertyEntry(
            "Addresses",
            "Address",
            is_array=True,
            is_user_defined=True,
            import_path="../Shared/address",
        ),
        PropertyEntry("Age", "number", is_optional=True),
        PropertyEntry("Manager", "Person", is_user_defined=True, import_path="./person"),
        PropertyEntry(
            "Notes",
            "Record",
            container=ContainerType(
                TypeReference("string"),
                TypeReference("Note", True, "../Shared/note"),
            ),
        ),
        PropertyEntry("ID", "string"),
    ),
)


def test_enum_numeric_mode() -> None:
    generator = TypeScriptGenerator(ConvertConfig())

    assert generator.generate_model(ORDER_STATUS) == (
        "/* Auto Generated */\n"
        "\n"
        "export enum OrderStatus {\n"
        "    pending,\n"
        "    active = 5,\n"
        "    closed,\n"
        "}\n"
    )


def test_enum_string_mode_without_header() -> None:
    config = ConvertConfig(auto_generated_tag=False, enum_values=EnumValues.STRING)
    generator = TypeScriptGenerator(config)

    assert generator.generate_model(ORDER_STATUS) == (
        "export enum OrderStatus {\n"
        "    pending = 'pending',\n"
        "    active = 'active',\n"
        "    closed = 'closed',\n"
        "}\n"
    )


def test_enum_negative_and_hex_values_are_emitted_in_decimal() -> None:
    model = ModelFile(
        name="Signal",
        structure="",
        is_enum=True,
        enum_entries=(EnumEntry("Off", -1, False), EnumEntry("Mask", 0xFF, False)),
    )
    output = TypeScriptGenerator(ConvertConfig(auto_generated_tag=False)).generate_model(model)

    assert "    off = -1,\n    mask = 255,\n" in output


def test_interface_with_imports_inheritance_and_map() -> None:
    generator = TypeScriptGenerator(ConvertConfig())

    assert generator.generate_model(CUSTOMER) == (
        "/* Auto Generated */\n"
        "\n"
        'import { Person } from "./person";\n'
        'import { Address } from "../Shared/address";\n'
        'import { Note } from "../Shared/note";\n'
        "\n"
        "export interface Customer extends Person {\n"
        "    addresses: Address[];\n"
        "    age?: number;\n"
        "    manager: Person;\n"
        "    notes: Partial<Record<string, Note>>;\n"
        "    id: string;\n"
        "}\n"
    )


def test_interface_invoice_scenario() -> None:
    model = ModelFile(
        name="Invoice",
        structure="",
        objects=(
            PropertyEntry(
                "Totals",
                "Record",
                container=ContainerType(TypeReference("string"), TypeReference("number")),
            ),
        ),
    )

    assert TypeScriptGenerator(ConvertConfig()).generate_model(model) == (
        "/* Auto Generated */\n"
        "\n"
        "export interface Invoice {\n"
        "    totals: Partial<Record<string, number>>;\n"
        "}\n"
    )


def test_map_values_keep_array_shape() -> None:
    model = ModelFile(
        name="Cart",
        structure="",
        objects=(
            PropertyEntry("Tags", "string", is_array=True),
            PropertyEntry(
                "ByCurrency",
                "Record",
                container=ContainerType(
                    TypeReference("string"),
                    TypeReference("Money", True, "./money", is_array=True),
                ),
            ),
            PropertyEntry(
                "Counts",
                "Record",
                container=ContainerType(
                    TypeReference("string"), TypeReference("number", is_array=True)
                ),
            ),
        ),
    )

    assert TypeScriptGenerator(ConvertConfig(auto_generated_tag=False)).generate_model(
        model
    ) == (
        'import { Money } from "./money";\n'
        "\n"
        "export interface Cart {\n"
        "    tags: string[];\n"
        "    byCurrency: Partial<Record<string, Money[]>>;\n"
        "    counts: Partial<Record<string, number[]>>;\n"
        "}\n"
    )


def test_unresolved_base_extends_without_import() -> None:
    model = ModelFile(
        name="Invoice",
        structure="",
        inherits="ExternalBase",
        objects=(PropertyEntry.placeholder(),),
    )
    generator = TypeScriptGenerator(ConvertConfig(auto_generated_tag=False))

    assert generator.generate_model(model) == (
        "export interface Invoice extends ExternalBase {\n}\n"
    )
    assert generator.validate_models([model]) == [
        "Base type 'ExternalBase' of 'Invoice' is not a known model"
    ]


def test_collect_imports_deduplicates_in_first_use_order() -> None:
    imports = TypeScriptGenerator().collect_imports(CUSTOMER)

    assert [statement["name"] for statement in imports] == ["Person", "Address", "Note"]


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        (PathStyle.DEFAULT, "Sales/OpenOrders/orderLine.ts"),
        (PathStyle.KEBAB, "sales/open-orders/order-line.ts"),
    ],
)
def test_output_path(style: PathStyle, expected: str, tmp_path: Path) -> None:
    generator = TypeScriptGenerator(ConvertConfig(path_style=style))
    model = ModelFile(name="OrderLine", structure="Sales/OpenOrders")

    assert generator.output_path(model, tmp_path) == tmp_path / expected


def test_output_path_at_root(tmp_path: Path) -> None:
    generator = TypeScriptGenerator()
    assert generator.output_path(CUSTOMER, tmp_path) == tmp_path / "Crm" / "customer.ts"
    assert generator.output_path(ORDER_STATUS, tmp_path) == tmp_path / "orderStatus.ts"


def test_validate_models_reports_empty_models() -> None:
    warnings = TypeScriptGenerator().validate_models(
        [ModelFile(name="Empty", structure=""), ModelFile(name="Nothing", structure="", is_enum=True)]
    )

    assert warnings == ["Model 'Empty' has no properties", "Enum 'Nothing' has no entries"]


def test_model_file_rejects_mixed_kinds() -> None:
    with pytest.raises(ValueError):
        ModelFile(name="Both", structure="", is_enum=True, objects=(PropertyEntry("A"),))


def test_template_engine_in_memory_templates() -> None:
    engine = TemplateEngine()
    engine.add_template("member", "{{ name | camel_case }}: {{ type }};")

    assert engine.template_exists("member")
    assert engine.render_template("member", {"name": "ID", "type": "string"}) == "id: string;"


def test_template_engine_missing_template() -> None:
    engine = TemplateEngine()

    assert not engine.template_exists("missing.j2")
    with pytest.raises(TemplateError):
        engine.render_template("missing.j2", {})
