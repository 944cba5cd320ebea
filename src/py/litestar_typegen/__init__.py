"""Litestar-Typegen: TypeScript declarations for backend type models.

This package projects backend structs and enums into TypeScript interfaces
and string-literal unions, ready for a frontend client.

Basic usage:
    from litestar_typegen import TypeDefinition, FieldDefinition, generate_typescript_types

    document = generate_typescript_types(
        [
            TypeDefinition.enum("Status", ["active", "paused"]),
            TypeDefinition.struct("User", [FieldDefinition(name="UserID", type_name="number")]),
        ]
    )

With Litestar:
    from litestar import Litestar
    from litestar_typegen import TypeGenConfig, TypeGenPlugin

    app = Litestar(
        plugins=[
            TypeGenPlugin(
                config=TypeGenConfig(
                    model_path=Path("build/types.json"),
                    generate_on_startup=True,
                )
            )
        ],
    )
"""

from litestar_typegen.__metadata__ import __version__
from litestar_typegen.codegen import (
    APIRoute,
    ExportResult,
    FieldDefinition,
    GeneratorStyle,
    NameProcessor,
    TypeDefinition,
    collect_used_types,
    export_types,
    generate_typescript_types,
    should_generate_types,
)
from litestar_typegen.config import CasingConfig, StaticAssetConfig, TypeGenConfig
from litestar_typegen.plugin import TypeGenPlugin

__all__ = (
    "APIRoute",
    "CasingConfig",
    "ExportResult",
    "FieldDefinition",
    "GeneratorStyle",
    "NameProcessor",
    "StaticAssetConfig",
    "TypeDefinition",
    "TypeGenConfig",
    "TypeGenPlugin",
    "collect_used_types",
    "export_types",
    "generate_typescript_types",
    "should_generate_types",
    "__version__",
)
