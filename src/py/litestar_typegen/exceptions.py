"""Litestar-Typegen exception classes."""

__all__ = [
    "DuplicateTypeDefinitionError",
    "MalformedTypeExpressionError",
    "TypeGenError",
    "TypeGenIOError",
    "TypeModelError",
]


class TypeGenError(Exception):
    """Base exception for Litestar-Typegen related errors."""


class TypeGenIOError(TypeGenError, OSError):
    """Raised when the generated types (or a model file) cannot be read or written."""

    def __init__(self, message: str, path: "str | None" = None) -> None:
        super().__init__(message)
        self.path = path


class TypeModelError(TypeGenError, ValueError):
    """Raised when the extractor output cannot be decoded into type definitions."""

    def __init__(self, source: str, detail: str) -> None:
        super().__init__(f"Invalid type model in {source!r}: {detail}")
        self.source = source
        self.detail = detail


class DuplicateTypeDefinitionError(TypeGenError, ValueError):
    """Raised when two type definitions share a name."""

    def __init__(self, names: "list[str]") -> None:
        super().__init__(
            f"Duplicate type definition names: {', '.join(repr(n) for n in names)}. "
            "Pass allow_duplicates=True to emit every definition anyway."
        )
        self.names = names


class MalformedTypeExpressionError(TypeGenError, ValueError):
    """Raised when a route type expression has broken generic syntax."""

    def __init__(self, expression: str, reason: str) -> None:
        super().__init__(f"Malformed type expression {expression!r}: {reason}")
        self.expression = expression
        self.reason = reason
