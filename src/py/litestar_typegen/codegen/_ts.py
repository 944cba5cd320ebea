"""TypeScript declaration rendering."""

import re
from collections import Counter
from collections.abc import Iterable
from operator import attrgetter
from typing import TYPE_CHECKING

from litestar_typegen.codegen._names import NameProcessor
from litestar_typegen.exceptions import DuplicateTypeDefinitionError

if TYPE_CHECKING:
    from litestar_typegen.codegen._models import FieldDefinition, TypeDefinition
    from litestar_typegen.config import CasingConfig

__all__ = (
    "OPTIONAL_MARKER",
    "TYPES_BANNER",
    "UNION_SEPARATOR",
    "find_duplicate_names",
    "generate_typescript_types",
    "render_type_definition",
    "ts_enum_literal",
    "ts_literal",
    "ts_member_name",
)

TYPES_BANNER = (
    "// Auto-generated TypeScript types from backend models\n"
    "// Generated by litestar-typegen\n"
    "// Do not edit manually\n"
)
OPTIONAL_MARKER = "?"
UNION_SEPARATOR = " | "
EMPTY_UNION = "never"

_TS_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_QUOTE_CHARS = frozenset({'"', "'", "`"})


def ts_literal(value: str) -> str:
    """Render ``value`` as a double-quoted TypeScript string literal.

    Returns:
        The quoted literal.
    """
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def ts_enum_literal(value: str) -> str:
    """Render an enum value, keeping values the extractor already quoted.

    Returns:
        A TypeScript literal type.
    """
    if len(value) >= 2 and value[0] in _QUOTE_CHARS and value[-1] == value[0]:
        return value
    return ts_literal(value)


def ts_member_name(name: str) -> str:
    """Quote member names that are not valid TypeScript identifiers.

    Returns:
        The member name as it appears in an interface body.
    """
    if _TS_IDENTIFIER_PATTERN.match(name):
        return name
    return ts_literal(name)


def _render_member(field: "FieldDefinition", processor: NameProcessor) -> str:
    member = ts_member_name(processor.process_field_name(field.effective_name))
    optional = OPTIONAL_MARKER if field.optional else ""
    return f"  {member}{optional}: {field.type_name};"


def render_type_definition(definition: "TypeDefinition", processor: "NameProcessor | None" = None) -> str:
    """Render one definition as a top-level TypeScript declaration.

    Enum values keep their given order; struct members keep field order.

    Args:
        definition: The definition to render.
        processor: Name processor applied to member names.

    Returns:
        The declaration, without a trailing newline.
    """
    if definition.is_enum:
        union = UNION_SEPARATOR.join(ts_enum_literal(v) for v in definition.enum_values) or EMPTY_UNION
        return f"export type {definition.name} = {union};"

    processor = processor or NameProcessor()
    lines = [f"export interface {definition.name} {{"]
    lines.extend(_render_member(field, processor) for field in definition.fields)
    lines.append("}")
    return "\n".join(lines)


def find_duplicate_names(definitions: "Iterable[TypeDefinition]") -> list[str]:
    """Return the sorted names that occur more than once.

    Returns:
        Duplicate definition names.
    """
    counts = Counter(d.name for d in definitions)
    return sorted(name for name, count in counts.items() if count > 1)


def generate_typescript_types(
    definitions: "Iterable[TypeDefinition]",
    *,
    casing: "CasingConfig | None" = None,
    allow_duplicates: bool = False,
    banner: str = TYPES_BANNER,
) -> str:
    """Render a complete declarations document.

    Definitions are sorted by name before rendering so the document is
    byte-identical for the same input set, whatever the input order.

    Args:
        definitions: Type definitions to emit.
        casing: Casing policy for member names.
        allow_duplicates: Emit every definition even when names repeat. Duplicates
            keep their relative input order.
        banner: Comment block placed at the top of the document.

    Raises:
        DuplicateTypeDefinitionError: If names repeat and ``allow_duplicates`` is False.

    Returns:
        The document text, ending with a single newline.
    """
    ordered = sorted(definitions, key=attrgetter("name"))
    if not allow_duplicates:
        duplicates = find_duplicate_names(ordered)
        if duplicates:
            raise DuplicateTypeDefinitionError(duplicates)

    processor = NameProcessor(casing)
    parts = [banner.rstrip("\n")]
    parts.extend(render_type_definition(definition, processor) for definition in ordered)
    return "\n\n".join(parts) + "\n"
