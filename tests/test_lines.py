"""Tests for model_converter.lines."""

from __future__ import annotations

import pytest

from model_converter.lines import (
    LineKind,
    classify_line,
    explode_line,
    is_constructor,
    is_directive,
    strict_contains,
    strip_comment,
)


@pytest.mark.parametrize(
    ("raw", "kind"),
    [
        ("", LineKind.BLANK),
        ("    ", LineKind.BLANK),
        ("    // just a note", LineKind.COMMENT),
        ("/// <summary>", LineKind.COMMENT),
        ("#region Models", LineKind.DIRECTIVE),
        ("    #if DEBUG", LineKind.DIRECTIVE),
        ("public class Invoice {", LineKind.MALFORMED_DECLARATION),
        ("public enum Color {", LineKind.MALFORMED_DECLARATION),
        ("public enum Color : byte", LineKind.ENUM_HEADER),
        ("public class Invoice : Document", LineKind.CLASS_HEADER),
        ("public class Invoice", LineKind.OTHER),
        ("public string Name { get; set; }", LineKind.PROPERTY),
        ("public string Classroom { get; set; }", LineKind.PROPERTY),
        ("public Invoice()", LineKind.OTHER),
        ("public List<int> Ids = new List<int>();", LineKind.PROPERTY),
        ("namespace App.Models", LineKind.OTHER),
        ("{", LineKind.OTHER),
        ("Pending,", LineKind.OTHER),
    ],
)
def test_classify_line(raw: str, kind: LineKind) -> None:
    assert classify_line(raw).kind == kind


@pytest.mark.parametrize(
    ("raw", "kind"),
    [
        ("    Pending,", LineKind.ENUMERATOR),
        ("    Active = 5, // default", LineKind.ENUMERATOR),
        ("public enum OrderStatus", LineKind.OTHER),
        ("namespace App.Models", LineKind.OTHER),
        ("using System;", LineKind.OTHER),
        ("[Flags]", LineKind.OTHER),
        ("{", LineKind.OTHER),
        ("}", LineKind.OTHER),
        ("    // retired", LineKind.COMMENT),
        ("#endregion", LineKind.DIRECTIVE),
    ],
)
def test_classify_line_in_enum_body(raw: str, kind: LineKind) -> None:
    assert classify_line(raw, enum_body=True).kind == kind


def test_classify_property_strips_comment_and_modifiers() -> None:
    line = classify_line("    public static string Name; // display name")
    assert line.kind == LineKind.PROPERTY
    assert line.text == "    public static string Name; "
    assert line.tokens == ("string", "Name;")


def test_classify_class_header_tokens() -> None:
    line = classify_line("public class Customer : Person, IAuditable")
    assert line.kind == LineKind.CLASS_HEADER
    assert line.tokens == ("class", "Customer", ":", "Person,IAuditable")


def test_strip_comment_truncates_at_first_marker() -> None:
    assert strip_comment("int a; // b // c") == "int a; "
    assert strip_comment("no comment") == "no comment"


def test_strict_contains_matches_whole_words() -> None:
    assert strict_contains("public class Foo", "class")
    assert strict_contains("class", "class")
    assert not strict_contains("public string classroom;", "class")
    assert not strict_contains("public Subclass Item;", "class")


def test_is_directive() -> None:
    assert is_directive("#pragma warning disable")
    assert not is_directive("# not a directive")
    assert not is_directive("public int Count;")


def test_explode_line_collapses_generic_arguments() -> None:
    tokens = explode_line("public static readonly Dictionary<string , int> Map;")
    assert tokens == ["Dictionary<string,int>", "Map;"]


def test_explode_line_only_drops_whole_modifier_tokens() -> None:
    assert explode_line("public virtual PublicProfile Profile") == [
        "PublicProfile",
        "Profile",
    ]


def test_is_constructor() -> None:
    assert is_constructor("public Invoice()")
    assert is_constructor("public Invoice(string id) : base(id)")
    assert not is_constructor("public Money Total = new Money(0);")
    assert not is_constructor("public int Count;")
