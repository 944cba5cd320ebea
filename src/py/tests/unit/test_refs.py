"""Unit tests for used-type collection."""

import logging

import pytest

from litestar_typegen.codegen import (
    APIRoute,
    TypeDefinition,
    collect_used_types,
    extract_request_type_name,
    extract_response_type_name,
    filter_used_definitions,
)
from litestar_typegen.codegen._refs import GenericType, parse_generic, tokenize_type_expression
from litestar_typegen.exceptions import MalformedTypeExpressionError


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ("User", "User"),
        ("  User  ", "User"),
        ("Omit<User, 'id'>", "User"),
        ("Omit<User, 'id' | 'createdAt'>", "User"),
        ('Omit<User, "id">', "User"),
        ("Partial<User>", "User"),
        ("Partial< User >", "User"),
        ("Partial<Omit<User, 'id'>>", "User"),
        ("Omit<Partial<User>, 'id'>", "User"),
        ("Record<string, User>", "Record<string, User>"),
        ("User[]", "User"),
        ("Partial<User>[]", "User"),
        ("Omit<User, 'id'>[]", "User"),
        ("User[][]", "User[]"),
        ("api.User", "api.User"),
    ],
)
def test_extract_request_type_name(expression: str, expected: str) -> None:
    assert extract_request_type_name(expression) == expected


@pytest.mark.parametrize(
    "expression",
    [
        None,
        "",
        "   ",
        "[]",
        "Omit<User>",
        "Omit<User, 'id', 'name'>",
        "Partial<User, Post>",
        "Partial<User",
        "Omit<User, 'id>",
    ],
)
def test_extract_request_type_name_ignores_malformed(expression: "str | None") -> None:
    assert extract_request_type_name(expression) is None


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ("User", "User"),
        ("User[]", "User"),
        (" User[] ", "User"),
        ("User[][]", "User[]"),
        ("string", "string"),
        ("", None),
        (None, None),
        ("[]", None),
    ],
)
def test_extract_response_type_name(expression: "str | None", expected: "str | None") -> None:
    assert extract_response_type_name(expression) == expected


def test_tokenize_type_expression() -> None:
    tokens = tokenize_type_expression("Omit<User, 'a,b'>")
    assert [t.kind for t in tokens] == ["ident", "lt", "ident", "comma", "string", "gt"]
    assert tokens[4].value == "'a,b'"


def test_tokenize_rejects_unterminated_string() -> None:
    with pytest.raises(MalformedTypeExpressionError, match="unterminated"):
        tokenize_type_expression("Omit<User, 'id>")


def test_parse_generic() -> None:
    assert parse_generic("User") is None
    assert parse_generic("Omit<User, 'a,b'>") == GenericType(name="Omit", args=("User", "'a,b'"))
    assert parse_generic("Partial<Omit<User, 'id'>>") == GenericType(name="Partial", args=("Omit<User, 'id'>",))
    assert parse_generic("Partial<User>[]") is None


def test_parse_generic_requires_closing_bracket() -> None:
    with pytest.raises(MalformedTypeExpressionError, match="missing closing"):
        parse_generic("Partial<User")


def test_collect_used_types(definitions: list[TypeDefinition], routes: list[APIRoute]) -> None:
    assert collect_used_types(routes, definitions) == ["User"]


def test_collect_used_types_is_sorted_and_deduplicated(definitions: list[TypeDefinition]) -> None:
    routes = [
        APIRoute(response_type="User"),
        APIRoute(request_type="Partial<Post>", response_type="Post[]"),
        APIRoute(request_type="Omit<AuditLog, 'id'>", response_type="User[]"),
    ]
    assert collect_used_types(routes, definitions) == ["AuditLog", "Post", "User"]


def test_collect_used_types_unwraps_array_requests(definitions: list[TypeDefinition]) -> None:
    routes = [
        APIRoute(method="POST", request_type="Omit<Post, 'id'>[]"),
        APIRoute(method="PATCH", request_type="Partial<AuditLog>[]"),
    ]
    assert collect_used_types(routes, definitions) == ["AuditLog", "Post"]


def test_collect_used_types_drops_unknown_names(
    definitions: list[TypeDefinition], caplog: pytest.LogCaptureFixture
) -> None:
    routes = [APIRoute(request_type="Widget", response_type="number"), APIRoute(response_type="Status")]
    with caplog.at_level(logging.DEBUG, logger="litestar_typegen.codegen"):
        assert collect_used_types(routes, definitions) == ["Status"]
    assert "Widget" in caplog.text


def test_collect_used_types_does_not_follow_fields(definitions: list[TypeDefinition]) -> None:
    """Types referenced only from other definitions' fields are not collected."""
    assert "Status" not in collect_used_types([APIRoute(response_type="User")], definitions)


def test_collect_used_types_without_routes(definitions: list[TypeDefinition]) -> None:
    assert collect_used_types([], definitions) == []


def test_filter_used_definitions_keeps_input_order(definitions: list[TypeDefinition]) -> None:
    kept = filter_used_definitions(definitions, ["User", "AuditLog"])
    assert [d.name for d in kept] == ["User", "AuditLog"]
