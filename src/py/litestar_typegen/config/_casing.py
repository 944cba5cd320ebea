"""Field name casing configuration."""

from dataclasses import dataclass, field
from typing import Literal

from litestar_typegen.config._constants import DEFAULT_ACRONYMS

__all__ = ("AcronymStyle", "BoundaryStrategy", "CasingConfig", "CasingStyle")

CasingStyle = Literal["camel", "pascal", "snake", "preserve"]
BoundaryStrategy = Literal["case", "underscore", "both"]
AcronymStyle = Literal["capitalize", "preserve"]


@dataclass(frozen=True)
class CasingConfig:
    """Casing policy applied to emitted member names.

    Attributes:
        style: Target casing of the re-joined words. ``preserve`` leaves names untouched.
        boundaries: Where words are split: on case transitions, on underscores
            (hyphens and whitespace included), or both.
        acronyms: Known acronyms. Upper-case runs made only of known acronyms are
            split into them, so ``HTTPAPIKey`` yields ``HTTP``, ``API``, ``Key``.
        acronym_style: ``capitalize`` renders ``userId``; ``preserve`` renders ``userID``.
    """

    style: CasingStyle = "camel"
    boundaries: BoundaryStrategy = "both"
    acronyms: frozenset[str] = field(default_factory=lambda: DEFAULT_ACRONYMS)
    acronym_style: AcronymStyle = "capitalize"

    def __post_init__(self) -> None:
        """Normalize acronyms to an upper-cased frozenset."""
        object.__setattr__(self, "acronyms", frozenset(a.upper() for a in self.acronyms if a))
