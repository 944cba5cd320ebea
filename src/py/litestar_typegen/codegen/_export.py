"""Type export pipeline.

Both the CLI and the plugin's startup hook call :func:`export_from_config` so
that the same configuration always produces byte-identical output.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from litestar_typegen.codegen._refs import collect_used_types, filter_used_definitions
from litestar_typegen.codegen._ts import generate_typescript_types
from litestar_typegen.codegen._utils import fmt_path, write_if_changed

if TYPE_CHECKING:
    from litestar_typegen.codegen._models import APIRoute, TypeDefinition
    from litestar_typegen.config import CasingConfig, TypeGenConfig

__all__ = (
    "ExportResult",
    "GeneratorStyle",
    "export_from_config",
    "export_types",
    "resolve_definitions",
    "resolve_routes",
    "should_generate_types",
)

logger = logging.getLogger("litestar_typegen.codegen")


class GeneratorStyle(str, Enum):
    """Known client generator styles."""

    BASIC = "basic"
    BASIC_TS = "basic-ts"
    AXIOS = "axios"
    TRPC_LIKE = "trpc-like"


_STYLES_WITHOUT_TYPES = frozenset({GeneratorStyle.BASIC.value})


def should_generate_types(style: "GeneratorStyle | str") -> bool:
    """Tell whether a client generator style consumes TypeScript declarations.

    Plain JavaScript clients (``basic``) need none; every other style, known or
    not, gets them.

    Returns:
        True when declarations should be generated.
    """
    value = style.value if isinstance(style, GeneratorStyle) else style
    return value not in _STYLES_WITHOUT_TYPES


def _empty_list() -> list[str]:
    return []


@dataclass
class ExportResult:
    """Result of the export operation."""

    exported_files: list[str] = field(default_factory=_empty_list)
    """Files that were written (content changed)."""

    unchanged_files: list[str] = field(default_factory=_empty_list)
    """Files that were skipped (content unchanged)."""

    type_names: list[str] = field(default_factory=_empty_list)
    """Names of the emitted declarations, in output order."""

    skipped: bool = False
    """True when the generator style needs no declarations and nothing ran."""


def export_types(
    definitions: "Iterable[TypeDefinition]",
    *,
    output: Path,
    routes: "Iterable[APIRoute] | None" = None,
    casing: "CasingConfig | None" = None,
    only_used_types: bool = False,
    allow_duplicates: bool = False,
) -> ExportResult:
    """Render the declarations document and persist it.

    The whole document is built in memory before anything touches the disk.

    Args:
        definitions: All type definitions.
        output: Destination file.
        routes: Route signatures, used when ``only_used_types`` is set.
        casing: Casing policy for member names.
        only_used_types: Emit only definitions referenced by ``routes``.
        allow_duplicates: Emit duplicate definition names instead of failing.

    Returns:
        ExportResult describing what was written.
    """
    definitions = list(definitions)
    if only_used_types:
        used = collect_used_types(routes or [], definitions)
        logger.debug("Used types: %s", ", ".join(used) or "<none>")
        definitions = filter_used_definitions(definitions, used)

    content = generate_typescript_types(definitions, casing=casing, allow_duplicates=allow_duplicates)

    result = ExportResult(type_names=sorted(d.name for d in definitions))
    if write_if_changed(output, content):
        result.exported_files.append(fmt_path(output))
    else:
        result.unchanged_files.append(fmt_path(output))
    return result


def resolve_definitions(config: "TypeGenConfig") -> "list[TypeDefinition]":
    """Return the configured definitions, loading the model file when needed.

    Returns:
        The type definitions.
    """
    from litestar_typegen.codegen._loader import load_type_definitions

    if config.definitions:
        return list(config.definitions)
    if config.model_path is not None:
        return load_type_definitions(config.model_path)
    return []


def resolve_routes(config: "TypeGenConfig") -> "list[APIRoute]":
    """Return the configured routes, loading the routes file when needed.

    Returns:
        The API routes.
    """
    from litestar_typegen.codegen._loader import load_api_routes

    if config.routes:
        return list(config.routes)
    if config.routes_path is not None:
        return load_api_routes(config.routes_path)
    return []


def export_from_config(config: "TypeGenConfig") -> ExportResult:
    """Export declarations as described by a TypeGenConfig.

    Returns:
        ExportResult with ``skipped`` set when the generator style needs no types.
    """
    if not should_generate_types(config.generator_style):
        logger.debug("Generator style %r needs no type declarations", config.generator_style)
        return ExportResult(skipped=True)

    routes = resolve_routes(config) if config.only_used_types else None
    return export_types(
        resolve_definitions(config),
        output=config.output,
        routes=routes,
        casing=config.casing_config,
        only_used_types=config.only_used_types,
        allow_duplicates=config.allow_duplicates,
    )
