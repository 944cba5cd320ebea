"""Static asset serving configuration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Union

from litestar_typegen.config._constants import default_content_types

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

__all__ = ("StaticAssetConfig",)


@dataclass
class StaticAssetConfig:
    """Settings for serving a built client bundle.

    Attributes:
        directory: Bundle root. Either a filesystem path or an ``importlib.resources``
            traversable, so assets shipped inside a Python package can be served directly.
        path: URL prefix the bundle is mounted at.
        index_file: Document served for ``/`` and for client-side routes.
        spa_fallback: Serve ``index_file`` for unknown paths without a file extension.
        immutable_prefixes: Bundle-relative prefixes holding content-hashed files.
        content_types: Extension to MIME type mapping, consulted before ``mimetypes``.
        cache_control_immutable: Cache-Control for files under ``immutable_prefixes``.
        cache_control_html: Cache-Control for HTML documents.
        cache_control_default: Cache-Control for everything else.
    """

    directory: "Union[Path, str, Traversable]" = field(default_factory=lambda: Path("frontend/dist"))
    path: str = "/"
    index_file: str = "index.html"
    spa_fallback: bool = True
    immutable_prefixes: tuple[str, ...] = ("assets/",)
    content_types: dict[str, str] = field(default_factory=default_content_types)
    cache_control_immutable: str = "public, max-age=31536000, immutable"
    cache_control_html: str = "no-cache"
    cache_control_default: str = "public, max-age=3600"

    def __post_init__(self) -> None:
        """Normalize the directory and mount path."""
        if isinstance(self.directory, str):
            self.directory = Path(self.directory)
        path = "/" + self.path.strip("/")
        self.path = path
