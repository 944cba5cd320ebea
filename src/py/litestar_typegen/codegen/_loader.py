"""Decoding the JSON documents written by a model extractor.

The extractor writes two JSON arrays: type definitions and API routes. Keys are
the field names of :class:`TypeDefinition`, :class:`FieldDefinition` and
:class:`APIRoute`::

    [
        {"name": "Status", "is_enum": true, "enum_values": ["active", "paused"]},
        {
            "name": "User",
            "fields": [
                {"name": "ID", "type_name": "number"},
                {"name": "Email", "type_name": "string", "optional": true}
            ]
        }
    ]
"""

from pathlib import Path

import msgspec

from litestar_typegen.codegen._models import APIRoute, TypeDefinition
from litestar_typegen.exceptions import TypeGenIOError, TypeModelError

__all__ = ("decode_api_routes", "decode_type_definitions", "load_api_routes", "load_type_definitions")


def decode_type_definitions(content: "bytes | str", *, source: str = "<memory>") -> list[TypeDefinition]:
    """Decode a JSON array of type definitions.

    Raises:
        TypeModelError: If the content is not valid JSON or does not match the model.

    Returns:
        The decoded definitions, in document order.
    """
    try:
        return msgspec.json.decode(content, type=list[TypeDefinition])
    except (msgspec.DecodeError, ValueError) as e:
        raise TypeModelError(source, str(e)) from e


def decode_api_routes(content: "bytes | str", *, source: str = "<memory>") -> list[APIRoute]:
    """Decode a JSON array of API routes.

    Raises:
        TypeModelError: If the content is not valid JSON or does not match the model.

    Returns:
        The decoded routes, in document order.
    """
    try:
        return msgspec.json.decode(content, type=list[APIRoute])
    except (msgspec.DecodeError, ValueError) as e:
        raise TypeModelError(source, str(e)) from e


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        msg = f"Failed to read model file {path}: {e}"
        raise TypeGenIOError(msg, path=str(path)) from e


def load_type_definitions(path: Path) -> list[TypeDefinition]:
    """Load type definitions from a JSON file.

    Returns:
        The decoded definitions.
    """
    return decode_type_definitions(_read_bytes(path), source=str(path))


def load_api_routes(path: Path) -> list[APIRoute]:
    """Load API routes from a JSON file.

    Returns:
        The decoded routes.
    """
    return decode_api_routes(_read_bytes(path), source=str(path))
