"""Constants and utility functions for configuration."""

__all__ = (
    "DEFAULT_ACRONYMS",
    "DEFAULT_OUTPUT",
    "TRUE_VALUES",
    "default_content_types",
)

TRUE_VALUES = {"True", "true", "1", "yes", "Y", "T"}

DEFAULT_OUTPUT = "frontend/src/types/generated.d.ts"
"""Conventional location of the generated declarations inside a client source tree."""

DEFAULT_ACRONYMS = frozenset(
    {"API", "CSS", "DB", "HTML", "HTTP", "HTTPS", "ID", "IP", "JSON", "JWT", "SQL", "URI", "URL", "UUID", "XML"}
)


def default_content_types() -> dict[str, str]:
    """Default content-type mappings keyed by file extension.

    Returns:
        Dictionary mapping file extensions to MIME types.
    """
    return {
        ".js": "application/javascript",
        ".mjs": "application/javascript",
        ".cjs": "application/javascript",
        ".css": "text/css",
        ".html": "text/html; charset=utf-8",
        ".json": "application/json",
        ".map": "application/json",
        ".svg": "image/svg+xml",
        ".png": "image/png",
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".webp": "image/webp",
        ".ico": "image/x-icon",
        ".txt": "text/plain; charset=utf-8",
        ".woff2": "font/woff2",
        ".woff": "font/woff",
    }
