"""Type model consumed by the emitter and the reference collector.

Instances are produced once per generation run by an external extractor and
are never mutated afterwards.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ("APIRoute", "FieldDefinition", "TypeDefinition")


@dataclass(frozen=True)
class FieldDefinition:
    """One member of a struct definition.

    Attributes:
        name: Source identifier of the field.
        type_name: Pre-resolved TypeScript type expression, copied verbatim into the output.
        serialization_key: Wire name of the field (the JSON tag), if it differs from ``name``.
        optional: Emit the member as possibly absent (``name?: T``).
    """

    name: str
    type_name: str
    serialization_key: "str | None" = None
    optional: bool = False

    @property
    def effective_name(self) -> str:
        """Return the serialization key when set, otherwise the source name.

        Returns:
            The name the emitted member is derived from.
        """
        return self.serialization_key or self.name


def _empty_fields() -> "tuple[FieldDefinition, ...]":
    return ()


@dataclass(frozen=True)
class TypeDefinition:
    """A struct or an enum to be projected.

    Structs become interfaces, enums become unions of string literals. The two
    shapes are exclusive: an enum carries ``enum_values`` only, a struct carries
    ``fields`` only.
    """

    name: str
    is_enum: bool = False
    enum_values: tuple[str, ...] = ()
    fields: "tuple[FieldDefinition, ...]" = field(default_factory=_empty_fields)

    def __post_init__(self) -> None:
        """Freeze sequences and reject mixed shapes.

        Raises:
            ValueError: If an enum has fields or a struct has enum values.
        """
        object.__setattr__(self, "enum_values", tuple(self.enum_values))
        object.__setattr__(self, "fields", tuple(self.fields))
        if self.is_enum and self.fields:
            msg = f"Enum definition {self.name!r} cannot declare fields"
            raise ValueError(msg)
        if not self.is_enum and self.enum_values:
            msg = f"Struct definition {self.name!r} cannot declare enum values"
            raise ValueError(msg)

    @classmethod
    def enum(cls, name: str, values: Iterable[str]) -> "TypeDefinition":
        """Build an enum definition.

        Returns:
            The enum TypeDefinition.
        """
        return cls(name=name, is_enum=True, enum_values=tuple(values))

    @classmethod
    def struct(cls, name: str, fields: Iterable[FieldDefinition]) -> "TypeDefinition":
        """Build a struct definition.

        Returns:
            The struct TypeDefinition.
        """
        return cls(name=name, fields=tuple(fields))


@dataclass(frozen=True)
class APIRoute:
    """One endpoint signature.

    Only ``request_type`` and ``response_type`` take part in used-type
    collection; the rest is descriptive.
    """

    method: str = "GET"
    path: str = ""
    request_type: "str | None" = None
    response_type: "str | None" = None
    handler: "str | None" = None
