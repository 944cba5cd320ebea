from collections.abc import Generator

import pytest

from litestar_typegen.codegen import APIRoute, FieldDefinition, TypeDefinition

# Environment variables that may affect test behavior - clear before each test
_TYPEGEN_ENV_VARS = [
    "TYPEGEN_OUTPUT",
    "TYPEGEN_ON_STARTUP",
]


@pytest.fixture(autouse=True)
def clean_typegen_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear typegen environment variables before each test for isolation."""
    for var in _TYPEGEN_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def definitions() -> list[TypeDefinition]:
    return [
        TypeDefinition.struct(
            "User",
            [
                FieldDefinition(name="ID", type_name="number", serialization_key="id"),
                FieldDefinition(name="Email", type_name="string", optional=True),
                FieldDefinition(name="Status", type_name="Status"),
            ],
        ),
        TypeDefinition.enum("Status", ["active", "paused", "done"]),
        TypeDefinition.struct(
            "Post",
            [
                FieldDefinition(name="Title", type_name="string"),
                FieldDefinition(name="AuthorID", type_name="number", serialization_key="author_id"),
            ],
        ),
        TypeDefinition.struct("AuditLog", [FieldDefinition(name="Message", type_name="string")]),
    ]


@pytest.fixture
def routes() -> list[APIRoute]:
    return [
        APIRoute(method="GET", path="/users", response_type="User[]"),
        APIRoute(method="POST", path="/users", request_type="Omit<User, 'id'>", response_type="User"),
        APIRoute(method="PATCH", path="/users/{id}", request_type="Partial<User>", response_type="User"),
        APIRoute(method="GET", path="/health", response_type="string"),
    ]
