"""Litestar-Typegen Configuration.

The configuration is split into logical groups:

- CasingConfig: How member names are re-cased
- TypeGenConfig: Where definitions come from and where declarations go
- StaticAssetConfig: Serving the built client bundle

Example usage::

    # Defaults: camelCase members, output to frontend/src/types/generated.d.ts
    TypeGenPlugin(config=TypeGenConfig(model_path=Path("build/types.json")))

    # snake_case members, only the types referenced by the routes
    TypeGenPlugin(
        config=TypeGenConfig(
            model_path=Path("build/types.json"),
            routes_path=Path("build/routes.json"),
            casing=CasingConfig(style="snake"),
            only_used_types=True,
        )
    )
"""

from litestar_typegen.config._casing import (  # pyright: ignore[reportPrivateUsage]
    AcronymStyle,
    BoundaryStrategy,
    CasingConfig,
    CasingStyle,
)
from litestar_typegen.config._constants import (  # pyright: ignore[reportPrivateUsage]
    DEFAULT_ACRONYMS,
    DEFAULT_OUTPUT,
    TRUE_VALUES,
    default_content_types,
)
from litestar_typegen.config._static import StaticAssetConfig  # pyright: ignore[reportPrivateUsage]
from litestar_typegen.config._types import TypeGenConfig  # pyright: ignore[reportPrivateUsage]

__all__ = (
    "DEFAULT_ACRONYMS",
    "DEFAULT_OUTPUT",
    "TRUE_VALUES",
    "AcronymStyle",
    "BoundaryStrategy",
    "CasingConfig",
    "CasingStyle",
    "StaticAssetConfig",
    "TypeGenConfig",
    "default_content_types",
)
