"""
Field-by-field comparison shared by extensions, common attributes and entities.

Each comparable class lists its significant fields in a fixed order; every
field is compared with one of the ``compare_*`` helpers (returning -1, 0
or 1) and the results are folded by :func:`combine`.

Two folding rules exist:

``LEXICOGRAPHIC``
    The first non-zero field result decides. This is a total order and the
    default.

``BITWISE_OR``
    The per-field results are OR-ed together, as the legacy object model
    did. Any ``-1`` makes the whole result ``-1``; otherwise any ``1`` makes
    it ``1``. When fields disagree in sign this is not antisymmetric:
    ``a`` may compare less than ``b`` while ``b`` also compares less than
    ``a``. Use it only to reproduce legacy sort orders.
"""

from enum import Enum
from typing import Iterable, Optional
from urllib.parse import unquote, urlsplit, urlunsplit

from syndication_ext.scalars import normalize_language_tag


class ComparisonMode(str, Enum):
    """How per-field comparison results are combined."""

    LEXICOGRAPHIC = "lexicographic"
    BITWISE_OR = "bitwise_or"


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare_text(first: Optional[str], second: Optional[str]) -> int:
    """Ordinal, case-insensitive string comparison; None sorts as empty."""
    first = (first or "").upper()
    second = (second or "").upper()
    return _sign((first > second) - (first < second))


def _absolute_uri_key(uri: Optional[str]) -> str:
    if not uri:
        return ""
    try:
        parts = urlsplit(uri)
    except ValueError:
        return uri
    return urlunsplit(
        (
            parts.scheme.lower(),
            parts.netloc.lower(),
            unquote(parts.path),
            unquote(parts.query),
            unquote(parts.fragment),
        )
    )


def compare_uri(first: Optional[str], second: Optional[str]) -> int:
    """Compare two URIs as unescaped absolute-URI strings, ignoring case.

    A missing URI sorts before any present one.
    """
    if first is None and second is None:
        return 0
    if first is None:
        return -1
    if second is None:
        return 1
    return compare_text(_absolute_uri_key(first), _absolute_uri_key(second))


def compare_language(first: Optional[str], second: Optional[str]) -> int:
    """Compare two language tags by their normalized names.

    Tags that cannot be normalized are compared by their raw text.
    """
    first = normalize_language_tag(first) or first
    second = normalize_language_tag(second) or second
    return compare_text(first, second)


def compare_number(first, second) -> int:
    """Compare two numbers; None sorts before any number."""
    if first is None and second is None:
        return 0
    if first is None:
        return -1
    if second is None:
        return 1
    return _sign((first > second) - (first < second))


def compare_bool(first: Optional[bool], second: Optional[bool]) -> int:
    """Compare two flags; False sorts before True."""
    return compare_number(
        None if first is None else int(first),
        None if second is None else int(second),
    )


def compare_sequences(first: Iterable, second: Iterable, mode: Optional["ComparisonMode"] = None) -> int:
    """Compare two sequences of comparable objects element by element.

    The shorter sequence sorts first when all shared positions are equal.
    """
    first = list(first)
    second = list(second)
    results = [item.compare_to(other, mode=mode) for item, other in zip(first, second)]
    results.append(compare_number(len(first), len(second)))
    return combine(results, mode)


def default_mode() -> ComparisonMode:
    """Return the comparison mode selected in configuration."""
    from syndication_ext.config import get_config

    return ComparisonMode(get_config().comparison.mode)


def combine(results: Iterable[int], mode: Optional[ComparisonMode] = None) -> int:
    """Fold per-field comparison results into one.

    Args:
        results: Per-field results in declared field order
        mode: Folding rule; defaults to the configured mode

    Returns:
        -1, 0 or 1
    """
    mode = ComparisonMode(mode) if mode is not None else default_mode()

    if mode is ComparisonMode.BITWISE_OR:
        result = 0
        for value in results:
            result |= _sign(value)
        return _sign(result)

    for value in results:
        if value:
            return _sign(value)
    return 0


class ComparableMixin:
    """Ordering, equality and hashing for syndication objects.

    Subclasses implement :meth:`_comparison_fields` and ``to_xml``.
    Equality is ``compare_to(other) == 0``; the hash is that of the full
    serialized XML text.
    """

    def _comparison_fields(self, other, mode: Optional[ComparisonMode] = None) -> list[int]:
        """Return per-field comparison results against ``other`` in declared order."""
        raise NotImplementedError

    def to_xml(self) -> str:
        raise NotImplementedError

    def compare_to(self, other, mode: Optional[ComparisonMode] = None) -> int:
        """Compare with another instance of the same class.

        Args:
            other: Object to compare against; None sorts first
            mode: Folding rule; defaults to the configured mode

        Returns:
            -1, 0 or 1

        Raises:
            TypeError: If ``other`` is of an unrelated type
        """
        if other is None:
            return 1
        if not isinstance(other, type(self)):
            raise TypeError(
                f"other is not of type {type(self).__qualname__}, "
                f"type was found to be {type(other).__qualname__!r}"
            )
        return combine(self._comparison_fields(other, mode), mode)

    def __eq__(self, other) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.compare_to(other) == 0

    def __ne__(self, other) -> bool:
        return not self == other

    def __lt__(self, other):
        if other is None:
            return False
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __gt__(self, other):
        if other is None:
            return True
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __hash__(self) -> int:
        return hash(self.to_xml())
