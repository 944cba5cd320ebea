"""Public code generation API.

This package provides:

- The type model (``TypeDefinition``, ``FieldDefinition``, ``APIRoute``)
- Field name conversion (``NameProcessor``)
- TypeScript declaration rendering (``generate_typescript_types``)
- Used-type collection from route signatures (``collect_used_types``)
- The export pipeline (``export_types``, ``export_from_config``)
"""

from litestar_typegen.codegen._export import (
    ExportResult,
    GeneratorStyle,
    export_from_config,
    export_types,
    resolve_definitions,
    resolve_routes,
    should_generate_types,
)
from litestar_typegen.codegen._loader import (
    decode_api_routes,
    decode_type_definitions,
    load_api_routes,
    load_type_definitions,
)
from litestar_typegen.codegen._models import APIRoute, FieldDefinition, TypeDefinition
from litestar_typegen.codegen._names import NameProcessor, process_field_name, split_words
from litestar_typegen.codegen._refs import (
    collect_used_types,
    extract_request_type_name,
    extract_response_type_name,
    filter_used_definitions,
    parse_generic,  # pyright: ignore[reportUnusedImport]
    tokenize_type_expression,  # pyright: ignore[reportUnusedImport]
)
from litestar_typegen.codegen._ts import TYPES_BANNER, generate_typescript_types, render_type_definition
from litestar_typegen.codegen._utils import write_if_changed

__all__ = (
    "TYPES_BANNER",
    "APIRoute",
    "ExportResult",
    "FieldDefinition",
    "GeneratorStyle",
    "NameProcessor",
    "TypeDefinition",
    "collect_used_types",
    "decode_api_routes",
    "decode_type_definitions",
    "export_from_config",
    "export_types",
    "extract_request_type_name",
    "extract_response_type_name",
    "filter_used_definitions",
    "generate_typescript_types",
    "load_api_routes",
    "load_type_definitions",
    "process_field_name",
    "render_type_definition",
    "resolve_definitions",
    "resolve_routes",
    "should_generate_types",
    "split_words",
    "write_if_changed",
)
