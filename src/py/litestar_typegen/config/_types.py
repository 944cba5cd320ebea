"""Type generation configuration."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Union, cast

from litestar_typegen.config._casing import CasingConfig
from litestar_typegen.config._constants import DEFAULT_OUTPUT, TRUE_VALUES

if TYPE_CHECKING:
    from litestar_typegen.codegen import APIRoute, TypeDefinition

__all__ = ("TypeGenConfig",)


@dataclass
class TypeGenConfig:
    """Type generation settings.

    Definitions come either from memory (``definitions``/``routes``) or from the
    JSON files written by a model extractor (``model_path``/``routes_path``).
    In-memory values take precedence when both are given.

    Attributes:
        output: Destination of the generated declarations file.
        model_path: JSON file holding the extracted type definitions.
        routes_path: JSON file holding the extracted API routes.
        definitions: Type definitions supplied directly.
        routes: API routes supplied directly.
        casing: Casing policy for member names. ``True``/``None`` use the defaults.
        generator_style: Client generator style; styles that need no declarations
            (``basic``) skip generation entirely.
        only_used_types: Emit only the definitions referenced by the routes.
        allow_duplicates: Emit duplicate definition names instead of failing.
        generate_on_startup: Export the declarations when the Litestar app starts.
    """

    output: Path = field(default_factory=lambda: Path(os.getenv("TYPEGEN_OUTPUT", DEFAULT_OUTPUT)))
    model_path: "Path | None" = None
    routes_path: "Path | None" = None
    definitions: "list[TypeDefinition]" = field(default_factory=lambda: cast("list[TypeDefinition]", []))
    routes: "list[APIRoute]" = field(default_factory=lambda: cast("list[APIRoute]", []))
    casing: "Union[CasingConfig, bool, None]" = None
    generator_style: str = "basic-ts"
    only_used_types: bool = False
    allow_duplicates: bool = False
    generate_on_startup: bool = field(default_factory=lambda: os.getenv("TYPEGEN_ON_STARTUP", "False") in TRUE_VALUES)

    def __post_init__(self) -> None:
        """Normalize path types and the casing shortcut."""
        if isinstance(self.output, str):
            self.output = Path(self.output)
        if isinstance(self.model_path, str):
            self.model_path = Path(self.model_path)
        if isinstance(self.routes_path, str):
            self.routes_path = Path(self.routes_path)
        if self.casing is None or self.casing is True or self.casing is False:
            self.casing = CasingConfig(style="preserve") if self.casing is False else CasingConfig()

    @property
    def casing_config(self) -> CasingConfig:
        """Return the normalized casing policy.

        Returns:
            The CasingConfig instance.
        """
        return cast("CasingConfig", self.casing)
