"""Field name conversion between naming conventions.

Conversion is split into two steps: the identifier is broken into words (on
separators, case transitions or both) and the words are re-joined in the target
style. Both steps are chosen so that re-splitting a converted name yields the
same words again, which keeps :meth:`NameProcessor.process_field_name`
idempotent.
"""

import re

from litestar_typegen.config import CasingConfig

__all__ = ("NameProcessor", "process_field_name", "split_words")

_SEPARATOR_PATTERN = re.compile(r"[_\-\s]+")
_AFFIX_PATTERN = re.compile(r"^([_\-\s]*)(.*?)([_\-\s]*)$", re.DOTALL)

_UPPER, _LOWER, _DIGIT, _SEPARATOR, _OTHER = "U", "L", "D", "S", "O"


def _char_kind(char: str) -> str:
    if char in "_-" or char.isspace():
        return _SEPARATOR
    if char.isupper():
        return _UPPER
    if char.islower():
        return _LOWER
    if char.isdigit():
        return _DIGIT
    return _OTHER


def _split_case(part: str) -> list[str]:
    """Split a chunk on case, letter/digit and symbol transitions.

    Returns:
        The words of ``part`` in order.
    """
    kinds = [_char_kind(c) for c in part]
    words: list[str] = []
    start = 0
    for i in range(1, len(part)):
        prev, cur = kinds[i - 1], kinds[i]
        nxt = kinds[i + 1] if i + 1 < len(part) else None
        boundary = (
            (cur == _UPPER and prev in {_LOWER, _DIGIT, _OTHER})
            or (cur == _UPPER and prev == _UPPER and nxt == _LOWER)
            or (cur == _DIGIT and prev in {_UPPER, _LOWER})
            or (cur == _OTHER and prev in {_UPPER, _LOWER, _DIGIT})
        )
        if boundary:
            words.append(part[start:i])
            start = i
    words.append(part[start:])
    return words


def _segment_acronyms(run: str, acronyms: frozenset[str], *, letters: bool = False) -> "list[str] | None":
    """Split an upper-case run into known acronyms, longest first.

    With ``letters`` single letters are accepted as well, so the split always
    succeeds: ``URLIDX`` becomes ``URL``, ``ID``, ``X``.

    Returns:
        The pieces, or None when the run cannot be covered.
    """
    if not run:
        return []
    for size in range(len(run), 0, -1):
        head = run[:size]
        if head in acronyms or (letters and size == 1):
            rest = _segment_acronyms(run[size:], acronyms, letters=letters)
            if rest is not None:
                return [head, *rest]
    return None


def split_words(identifier: str, config: "CasingConfig | None" = None) -> list[str]:
    """Break an identifier into words according to the boundary strategy.

    Args:
        identifier: Identifier without leading or trailing separators.
        config: Casing policy. Defaults to ``CasingConfig()``.

    Returns:
        The words, in order. Empty chunks are dropped.
    """
    config = config or CasingConfig()
    split_separators = config.boundaries in {"underscore", "both"}
    split_case = config.boundaries in {"case", "both"}
    # Preserved acronyms and single letters both render upper-case, so any run
    # they form can be split back into them.
    letters = config.acronym_style == "preserve" and config.style in {"camel", "pascal"}

    parts = _SEPARATOR_PATTERN.split(identifier) if split_separators else [identifier]
    words: list[str] = []
    for part in parts:
        if not part:
            continue
        if not split_case:
            words.append(part)
            continue
        for word in _split_case(part):
            if len(word) > 1 and word.isalpha() and word.isupper() and word not in config.acronyms:
                words.extend(_segment_acronyms(word, config.acronyms, letters=letters) or [word])
            else:
                words.append(word)
    return words


class NameProcessor:
    """Converts field identifiers under a casing policy.

    Example::

        processor = NameProcessor(CasingConfig(style="camel"))
        processor.process_field_name("user_id")  # "userId"
        processor.process_field_name("userId")  # "userId"
    """

    __slots__ = ("_config",)

    def __init__(self, config: "CasingConfig | None" = None) -> None:
        self._config = config or CasingConfig()

    @property
    def config(self) -> CasingConfig:
        """Get the casing policy.

        Returns:
            The CasingConfig instance.
        """
        return self._config

    def process_field_name(self, identifier: str) -> str:
        """Convert ``identifier`` to the configured style.

        Leading and trailing separators (``_private``) are kept as they are.
        Any string is accepted; names without words are returned unchanged.

        Returns:
            The converted identifier.
        """
        if not identifier or self._config.style == "preserve":
            return identifier
        match = _AFFIX_PATTERN.match(identifier)
        if match is None:  # pragma: no cover
            return identifier
        prefix, core, suffix = match.groups()
        words = split_words(core, self._config)
        if not words:
            return identifier
        if self._config.style == "snake":
            return prefix + "_".join(w.lower() for w in words) + suffix

        rendered: list[str] = []
        for position, word in enumerate(words):
            piece = self._render_word(word, position)
            if rendered and self._joins_previous(rendered[-1], piece):
                piece = piece[:1].lower() + piece[1:]
            rendered.append(piece)
        return prefix + "".join(rendered) + suffix

    def _joins_previous(self, previous: str, piece: str) -> bool:
        """Whether ``piece`` would read as part of an upper-case run after ``previous``.

        Applies to capitalized acronyms only: ``x_a_b`` renders as ``xAb``.
        """
        if self._config.acronym_style != "capitalize":
            return False
        return previous[-1:].isupper() and piece[:1].isupper() and not piece[1:2].islower()

    def _render_word(self, word: str, position: int) -> str:
        config = self._config
        upper = word.upper()
        splits_case = config.boundaries in {"case", "both"}
        # A whole mixed-case word such as ``iD`` is not read as an acronym.
        is_acronym = upper in config.acronyms and (splits_case or word.isupper() or word.islower())
        # Words keep their inner casing when case transitions are not word boundaries.
        base = word.lower() if splits_case else word

        if position == 0 and config.style == "camel":
            return upper.lower() if is_acronym else base[:1].lower() + base[1:]
        if is_acronym:
            return upper if config.acronym_style == "preserve" else upper[:1] + upper[1:].lower()
        return base[:1].upper() + base[1:]


def process_field_name(identifier: str, config: "CasingConfig | None" = None) -> str:
    """Convert a single identifier under ``config``.

    Returns:
        The converted identifier.
    """
    return NameProcessor(config).process_field_name(identifier)
