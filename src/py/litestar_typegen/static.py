"""Serving a built client bundle.

The lookup (:func:`serve_static_file`) is framework independent and returns
everything a response needs; :func:`create_static_handler` wraps it in a
Litestar route handler. The bundle directory may be a plain path or an
``importlib.resources`` traversable, so a bundle shipped as package data can be
served without extracting it first.
"""

import mimetypes
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Any, Union, cast

from anyio import to_thread
from litestar import Request, Response, get
from litestar.exceptions import ImproperlyConfiguredException, NotFoundException

from litestar_typegen.config import StaticAssetConfig

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

    from litestar.handlers import HTTPRouteHandler

__all__ = ("StaticFileResponse", "create_static_handler", "serve_static_file", "static_asset_handler")

_CONFIG_OPT_KEY = "_typegen_static_config"
_DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class StaticFileResponse:
    """Outcome of a static asset lookup."""

    found: bool
    body: bytes = b""
    content_type: str = ""
    cache_control: str = ""
    status_code: int = 404


_NOT_FOUND = StaticFileResponse(found=False)


def _relative_parts(request_path: str, mount_path: str) -> "list[str] | None":
    path = request_path.split("?", 1)[0]
    if mount_path != "/":
        if path != mount_path and not path.startswith(f"{mount_path}/"):
            return None
        path = path[len(mount_path) :]
    parts = [part for part in path.split("/") if part not in {"", "."}]
    if any(part == ".." or "\\" in part for part in parts):
        return None
    return parts


def _content_type(config: StaticAssetConfig, name: str) -> str:
    suffix = PurePosixPath(name).suffix.lower()
    return config.content_types.get(suffix) or mimetypes.guess_type(name)[0] or _DEFAULT_CONTENT_TYPE


def _cache_control(config: StaticAssetConfig, relative: str, content_type: str) -> str:
    if any(relative.startswith(prefix) for prefix in config.immutable_prefixes):
        return config.cache_control_immutable
    if content_type.startswith("text/html"):
        return config.cache_control_html
    return config.cache_control_default


def _build_response(config: StaticAssetConfig, node: "Traversable", relative: str) -> StaticFileResponse:
    content_type = _content_type(config, node.name)
    return StaticFileResponse(
        found=True,
        body=node.read_bytes(),
        content_type=content_type,
        cache_control=_cache_control(config, relative, content_type),
        status_code=200,
    )


def serve_static_file(config: StaticAssetConfig, request_path: str) -> StaticFileResponse:
    """Look up the bundle file for a request path.

    ``/`` and directories resolve to the index document. When ``spa_fallback``
    is enabled, unknown paths without a file extension also resolve to the
    index so client-side routes survive a page reload. Paths escaping the
    bundle (``..``) are never served.

    Args:
        config: Static asset settings.
        request_path: URL path of the request, including the mount prefix.

    Returns:
        The lookup result. ``found`` is False (status 404) when nothing matches.
    """
    parts = _relative_parts(request_path, config.path)
    if parts is None:
        return _NOT_FOUND

    root = cast("Union[Path, Traversable]", config.directory)
    node = root
    for part in parts:
        node = node / part
    relative = "/".join(parts)

    if node.is_dir():
        node = node / config.index_file
        relative = f"{relative}/{config.index_file}" if relative else config.index_file

    if node.is_file():
        return _build_response(config, node, relative)

    if config.spa_fallback and not (parts and PurePosixPath(parts[-1]).suffix):
        index = root / config.index_file
        if index.is_file():
            return _build_response(config, index, config.index_file)
    return _NOT_FOUND


async def static_asset_handler(request: Request[Any, Any, Any]) -> Response[bytes]:
    """Serve a bundle file for the current request.

    The lookup and read run in a worker thread.

    Raises:
        ImproperlyConfiguredException: If the route was not built by ``create_static_handler``.
        NotFoundException: If no bundle file matches the request path.

    Returns:
        The file contents with content type and cache headers.
    """
    config = request.route_handler.opt.get(_CONFIG_OPT_KEY)
    if not isinstance(config, StaticAssetConfig):
        msg = "Static asset configuration is missing. Ensure create_static_handler() was used."
        raise ImproperlyConfiguredException(msg)

    result = await to_thread.run_sync(serve_static_file, config, request.url.path)
    if not result.found:
        raise NotFoundException(detail=f"Static asset not found: {request.url.path}")
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.content_type,
        headers={"Cache-Control": result.cache_control},
    )


def create_static_handler(config: StaticAssetConfig, *, name: str = "typegen_static") -> "HTTPRouteHandler":
    """Create a GET handler serving the bundle at ``config.path`` and below.

    Returns:
        The route handler, excluded from the OpenAPI schema.
    """
    base = config.path.rstrip("/")
    paths = [base or "/", f"{base}/{{path:path}}"]
    return get(
        path=paths,
        name=name,
        opt={_CONFIG_OPT_KEY: config},
        include_in_schema=False,
    )(static_asset_handler)
