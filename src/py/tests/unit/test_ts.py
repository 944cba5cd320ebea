"""Unit tests for TypeScript declaration rendering.

These tests verify that the emitted document is byte-identical for the same
set of definitions, regardless of input order.
"""

import random

import pytest

from litestar_typegen.codegen import (
    TYPES_BANNER,
    FieldDefinition,
    TypeDefinition,
    generate_typescript_types,
    render_type_definition,
)
from litestar_typegen.codegen._ts import ts_enum_literal, ts_member_name
from litestar_typegen.config import CasingConfig
from litestar_typegen.exceptions import DuplicateTypeDefinitionError


def test_document_starts_with_banner() -> None:
    """Test the banner opens the document even without definitions."""
    document = generate_typescript_types([])
    assert document == TYPES_BANNER
    assert document.endswith("\n")
    assert not document.endswith("\n\n")


def test_enum_renders_values_in_given_order() -> None:
    definition = TypeDefinition.enum("Status", ["active", "paused", "done"])
    assert render_type_definition(definition) == 'export type Status = "active" | "paused" | "done";'


def test_enum_keeps_pre_quoted_values() -> None:
    definition = TypeDefinition.enum("Kind", ["'a'", '"b"', "c"])
    assert render_type_definition(definition) == "export type Kind = 'a' | \"b\" | \"c\";"


def test_empty_enum_renders_never() -> None:
    assert render_type_definition(TypeDefinition.enum("Nothing", [])) == "export type Nothing = never;"


def test_struct_renders_interface_members() -> None:
    definition = TypeDefinition.struct(
        "User",
        [
            FieldDefinition(name="ID", type_name="number"),
            FieldDefinition(name="Email", type_name="string", optional=True),
            FieldDefinition(name="Tags", type_name="string[]"),
        ],
    )
    assert render_type_definition(definition) == (
        "export interface User {\n  id: number;\n  email?: string;\n  tags: string[];\n}"
    )


def test_empty_struct_renders_empty_interface() -> None:
    assert render_type_definition(TypeDefinition.struct("Empty", [])) == "export interface Empty {\n}"


def test_serialization_key_takes_precedence() -> None:
    """The member name is derived from the JSON key, not the source identifier."""
    definition = TypeDefinition.struct(
        "User",
        [FieldDefinition(name="Identifier", type_name="number", serialization_key="user_id")],
    )
    rendered = render_type_definition(definition)
    assert "  userId: number;" in rendered
    assert "identifier" not in rendered


def test_type_expression_is_copied_verbatim() -> None:
    definition = TypeDefinition.struct(
        "Page",
        [FieldDefinition(name="items", type_name="Record<string, Array<User | null>>")],
    )
    assert "  items: Record<string, Array<User | null>>;" in render_type_definition(definition)


def test_invalid_member_names_are_quoted() -> None:
    definition = TypeDefinition.struct(
        "Headers",
        [FieldDefinition(name="x", type_name="string", serialization_key="content-type")],
    )
    rendered = render_type_definition(definition)
    # camel casing makes the key a valid identifier
    assert "  contentType: string;" in rendered

    preserved = generate_typescript_types([definition], casing=CasingConfig(style="preserve"))
    assert '  "content-type": string;' in preserved


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("userId", "userId"),
        ("_private", "_private"),
        ("$ref", "$ref"),
        ("2fa", '"2fa"'),
        ("with space", '"with space"'),
        ('quo"te', '"quo\\"te"'),
    ],
)
def test_ts_member_name(name: str, expected: str) -> None:
    assert ts_member_name(name) == expected


def test_ts_enum_literal_escapes() -> None:
    assert ts_enum_literal('say "hi"') == '"say \\"hi\\""'
    assert ts_enum_literal("back\\slash") == '"back\\\\slash"'


def test_definitions_are_sorted_by_name() -> None:
    document = generate_typescript_types(
        [
            TypeDefinition.struct("C", []),
            TypeDefinition.enum("A", ["x"]),
            TypeDefinition.struct("B", []),
        ]
    )
    assert document.index("export type A") < document.index("export interface B") < document.index(
        "export interface C"
    )


def test_output_is_independent_of_input_order(definitions: list[TypeDefinition]) -> None:
    """Test that shuffled input produces byte-identical output."""
    expected = generate_typescript_types(definitions)
    rng = random.Random(1234)
    for _ in range(10):
        shuffled = list(definitions)
        rng.shuffle(shuffled)
        assert generate_typescript_types(shuffled) == expected


def test_full_document(definitions: list[TypeDefinition]) -> None:
    document = generate_typescript_types(definitions)
    assert document == (
        "// Auto-generated TypeScript types from backend models\n"
        "// Generated by litestar-typegen\n"
        "// Do not edit manually\n"
        "\n"
        "export interface AuditLog {\n"
        "  message: string;\n"
        "}\n"
        "\n"
        "export interface Post {\n"
        "  title: string;\n"
        "  authorId: number;\n"
        "}\n"
        "\n"
        'export type Status = "active" | "paused" | "done";\n'
        "\n"
        "export interface User {\n"
        "  id: number;\n"
        "  email?: string;\n"
        "  status: Status;\n"
        "}\n"
    )


def test_casing_policy_is_applied() -> None:
    definition = TypeDefinition.struct("User", [FieldDefinition(name="UserID", type_name="number")])
    assert "  user_id: number;" in generate_typescript_types([definition], casing=CasingConfig(style="snake"))
    assert "  UserID: number;" in generate_typescript_types([definition], casing=CasingConfig(style="preserve"))
    assert "  userID: number;" in generate_typescript_types(
        [definition], casing=CasingConfig(acronym_style="preserve")
    )


def test_duplicate_names_raise() -> None:
    with pytest.raises(DuplicateTypeDefinitionError) as exc_info:
        generate_typescript_types([TypeDefinition.struct("User", []), TypeDefinition.enum("User", ["a"])])
    assert exc_info.value.names == ["User"]
    assert "allow_duplicates=True" in str(exc_info.value)


def test_duplicate_names_allowed_keep_input_order() -> None:
    first = TypeDefinition.enum("User", ["a"])
    second = TypeDefinition.struct("User", [])
    document = generate_typescript_types([TypeDefinition.enum("Alpha", ["z"]), first, second], allow_duplicates=True)
    assert document.index("export type Alpha") < document.index("export type User") < document.index(
        "export interface User"
    )

    swapped = generate_typescript_types([second, first], allow_duplicates=True)
    assert swapped.index("export interface User") < swapped.index("export type User")


def test_custom_banner() -> None:
    document = generate_typescript_types([TypeDefinition.enum("A", ["x"])], banner="// custom\n")
    assert document == '// custom\n\nexport type A = "x";\n'


def test_mixed_shapes_are_rejected() -> None:
    with pytest.raises(ValueError, match="cannot declare fields"):
        TypeDefinition(name="Bad", is_enum=True, fields=(FieldDefinition(name="a", type_name="string"),))
    with pytest.raises(ValueError, match="cannot declare enum values"):
        TypeDefinition(name="Bad", enum_values=("a",))
