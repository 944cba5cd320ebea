"""Used-type collection from route signatures.

Route type expressions are small TypeScript snippets such as ``User``,
``User[]``, ``Partial<User>`` or ``Omit<User, 'id'>``. They are tokenized and
only parsed far enough to recover the base type name of the two wrapper forms.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from litestar_typegen.exceptions import MalformedTypeExpressionError

if TYPE_CHECKING:
    from litestar_typegen.codegen._models import APIRoute, TypeDefinition

__all__ = (
    "ARRAY_SUFFIX",
    "EXCLUDE_KEYS_WRAPPERS",
    "OPTIONAL_WRAPPERS",
    "GenericType",
    "Token",
    "collect_used_types",
    "extract_request_type_name",
    "extract_response_type_name",
    "filter_used_definitions",
    "parse_generic",
    "tokenize_type_expression",
)

logger = logging.getLogger("litestar_typegen.codegen")

EXCLUDE_KEYS_WRAPPERS = frozenset({"Omit"})
"""Wrappers taking a base type and the excluded keys: ``Omit<Base, 'key'>``."""

OPTIONAL_WRAPPERS = frozenset({"Partial"})
"""Wrappers taking only a base type: ``Partial<Base>``."""

ARRAY_SUFFIX = "[]"

_TOKEN_PATTERN = re.compile(
    r"""
    (?P<ws>\s+)
    |(?P<ident>[A-Za-z_$][\w$.]*)
    |(?P<string>'(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*")
    |(?P<array>\[\s*\])
    |(?P<lt><)
    |(?P<gt>>)
    |(?P<comma>,)
    |(?P<number>\d+(?:\.\d+)?)
    |(?P<unterminated>['"])
    |(?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)


class Token(NamedTuple):
    """A lexical token of a type expression."""

    kind: str
    value: str
    start: int
    end: int


@dataclass(frozen=True)
class GenericType:
    """A generic application spanning a whole expression, e.g. ``Omit<User, 'id'>``."""

    name: str
    args: tuple[str, ...]


def tokenize_type_expression(expression: str) -> list[Token]:
    """Split a type expression into tokens, skipping whitespace.

    Args:
        expression: The type expression.

    Raises:
        MalformedTypeExpressionError: If a string literal is not terminated.

    Returns:
        Tokens in source order.
    """
    tokens: list[Token] = []
    for match in _TOKEN_PATTERN.finditer(expression):
        kind = match.lastgroup or "other"
        if kind == "ws":
            continue
        if kind == "unterminated":
            raise MalformedTypeExpressionError(expression, f"unterminated string literal at offset {match.start()}")
        tokens.append(Token(kind, match.group(), match.start(), match.end()))
    return tokens


def parse_generic(expression: str) -> "GenericType | None":
    """Parse ``Name<arg, ...>`` when it makes up the whole expression.

    Arguments are returned as trimmed source text; nested generics stay intact.

    Args:
        expression: The type expression.

    Raises:
        MalformedTypeExpressionError: If the argument list is never closed.

    Returns:
        The generic application, or None when the expression is not one.
    """
    tokens = tokenize_type_expression(expression)
    if len(tokens) < 2 or tokens[0].kind != "ident" or tokens[1].kind != "lt":
        return None

    args: list[str] = []
    arg_start = tokens[1].end
    depth = 0
    for index in range(2, len(tokens)):
        token = tokens[index]
        if token.kind == "lt":
            depth += 1
        elif token.kind == "gt" and depth > 0:
            depth -= 1
        elif token.kind == "gt":
            args.append(expression[arg_start : token.start].strip())
            if index != len(tokens) - 1:
                # e.g. ``Partial<User>[]``: a generic, but not a bare wrapper.
                return None
            return GenericType(name=tokens[0].value, args=tuple(args))
        elif token.kind == "comma" and depth == 0:
            args.append(expression[arg_start : token.start].strip())
            arg_start = token.end
    raise MalformedTypeExpressionError(expression, "missing closing '>'")


def extract_request_type_name(expression: "str | None") -> "str | None":
    """Recover the referenced type name of a request type expression.

    One trailing ``[]`` is dropped first. ``Omit<Base, 'key'>`` and
    ``Partial<Base>`` then yield ``Base`` (wrappers may nest). Any other
    non-empty expression is returned whole.

    Returns:
        The referenced name, or None for empty or malformed expressions.
    """
    expression = (expression or "").strip()
    if expression.endswith(ARRAY_SUFFIX):
        expression = expression[: -len(ARRAY_SUFFIX)].strip()
    if not expression:
        return None
    try:
        generic = parse_generic(expression)
    except MalformedTypeExpressionError as e:
        logger.debug("Ignoring request type: %s", e)
        return None
    if generic is None:
        return expression

    if generic.name in EXCLUDE_KEYS_WRAPPERS:
        expected_args = 2
    elif generic.name in OPTIONAL_WRAPPERS:
        expected_args = 1
    else:
        return expression

    if len(generic.args) != expected_args:
        logger.debug(
            "Ignoring request type %r: %s expects %d argument(s), got %d",
            expression,
            generic.name,
            expected_args,
            len(generic.args),
        )
        return None
    return extract_request_type_name(generic.args[0])


def extract_response_type_name(expression: "str | None") -> "str | None":
    """Recover the referenced type name of a response type expression.

    Returns:
        The expression without one trailing ``[]``, or None when empty.
    """
    expression = (expression or "").strip()
    if expression.endswith(ARRAY_SUFFIX):
        expression = expression[: -len(ARRAY_SUFFIX)].strip()
    return expression or None


def collect_used_types(routes: "Iterable[APIRoute]", definitions: "Iterable[TypeDefinition]") -> list[str]:
    """Compute the definition names referenced by a set of routes.

    Names that match no definition (primitives, external types) are dropped.

    Args:
        routes: Route signatures to inspect.
        definitions: All known definitions.

    Returns:
        Referenced definition names, sorted.
    """
    used: set[str] = set()
    for route in routes:
        for name in (
            extract_request_type_name(route.request_type),
            extract_response_type_name(route.response_type),
        ):
            if name:
                used.add(name)

    known = {definition.name for definition in definitions}
    unresolved = used - known
    if unresolved:
        logger.debug("Route types without a definition: %s", ", ".join(sorted(unresolved)))
    return sorted(used & known)


def filter_used_definitions(
    definitions: "Iterable[TypeDefinition]", used_names: Iterable[str]
) -> "list[TypeDefinition]":
    """Keep the definitions whose name is in ``used_names``.

    Returns:
        Matching definitions in input order.
    """
    wanted = set(used_names)
    return [definition for definition in definitions if definition.name in wanted]
