"""Combine a pattern set into a single tagged-alternation matcher.

Every kind's pattern becomes one named group of an alternation, in the
order given:

    (?P<ident>[a-z]+)|(?P<number>\\d+)|(?P<ws>\\s+)

Python's alternation tries branches left to right and stops at the first
that succeeds, so earlier kinds win when several could match at the same
position. The group that participated in a match names the token kind.

The matcher is compiled with re.DOTALL so ``.`` also matches newlines.

Thread Safety:
CombinedMatcher is frozen and compiled patterns are immutable; a matcher
may be shared freely. Anchoring is passed per call, never stored.

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TypeAlias

from relex.config import get_lex_config
from relex.errors import EmptyMatchError, PatternError
from relex.utils.logger import get_logger

logger = get_logger(__name__)

PatternLike: TypeAlias = str | re.Pattern[str]
PatternSet: TypeAlias = Mapping[str, PatternLike] | Iterable[tuple[str, PatternLike]]

# Matches nothing, not even the empty string
_NEVER_MATCHES = "(?!)"

_FLAGS = re.DOTALL


@dataclass(frozen=True, slots=True)
class CombinedMatcher:
    """Compiled alternation of all patterns in a pattern set.

    Attributes:
        regex: The compiled combined pattern
        kinds: Kind names in priority order

    """

    regex: re.Pattern[str]
    kinds: tuple[str, ...]

    @property
    def pattern(self) -> str:
        """Source of the combined pattern."""
        return self.regex.pattern

    def __len__(self) -> int:
        return len(self.kinds)

    def match(self, source: str, position: int) -> re.Match[str] | None:
        """Match anchored at ``position``; never searches forward."""
        return self.regex.match(source, position)


def combine(pattern_set: PatternSet, *, strict: bool | None = None) -> CombinedMatcher:
    """Build one matcher from an ordered pattern set.

    Args:
        pattern_set: Mapping of kind name to pattern, or an iterable of
            ``(kind, pattern)`` pairs. Patterns are regex source strings or
            compiled ``re.Pattern`` objects (only their source is used).
        strict: Reject patterns that match the empty string. Defaults to
            the active LexConfig's ``strict_patterns``.

    Returns:
        CombinedMatcher trying each pattern in the given order

    Raises:
        PatternError: A kind name is invalid or repeated, a pattern has the
            wrong type or does not compile, or the combination fails.
        EmptyMatchError: ``strict`` is on and a pattern matches "".
    """
    if strict is None:
        strict = get_lex_config().strict_patterns

    kinds: list[str] = []
    fragments: list[str] = []

    for kind, pattern in _iter_entries(pattern_set):
        _check_kind(kind, kinds)
        source = _fragment_source(kind, pattern)

        try:
            compiled = re.compile(source, _FLAGS)
        except re.error as exc:
            raise PatternError(f"invalid pattern {source!r}: {exc}", kind=kind) from exc

        if strict and compiled.fullmatch("") is not None:
            raise EmptyMatchError(kind)

        kinds.append(kind)
        fragments.append(f"(?P<{kind}>{source})")

    combined = "|".join(fragments) or _NEVER_MATCHES
    try:
        regex = re.compile(combined, _FLAGS)
    except re.error as exc:
        raise PatternError(f"cannot combine patterns: {exc}") from exc

    logger.debug("Combined %d patterns: %s", len(kinds), ", ".join(kinds))
    return CombinedMatcher(regex=regex, kinds=tuple(kinds))


def _iter_entries(pattern_set: PatternSet) -> Iterable[tuple[object, object]]:
    """Yield ``(kind, pattern)`` pairs in priority order."""
    if isinstance(pattern_set, Mapping):
        yield from pattern_set.items()
        return

    if isinstance(pattern_set, (str, bytes)):
        raise PatternError(
            f"pattern set must be a mapping or (kind, pattern) pairs, "
            f"got {type(pattern_set).__name__}"
        )

    try:
        entries = iter(pattern_set)
    except TypeError as exc:
        raise PatternError(
            f"pattern set must be a mapping or (kind, pattern) pairs, "
            f"got {type(pattern_set).__name__}"
        ) from exc

    for entry in entries:
        try:
            kind, pattern = entry
        except (TypeError, ValueError) as exc:
            raise PatternError(f"expected a (kind, pattern) pair, got {entry!r}") from exc
        yield kind, pattern


def _check_kind(kind: object, seen: list[str]) -> None:
    """Validate a kind name for use as a group name."""
    if not isinstance(kind, str):
        raise PatternError(f"kind name must be a string, got {type(kind).__name__}")
    if not kind.isidentifier():
        raise PatternError("kind name must be a valid identifier", kind=kind)
    if kind in seen:
        raise PatternError("duplicate kind name", kind=kind)


def _fragment_source(kind: str, pattern: object) -> str:
    """Extract the regex source of a pattern, dropping any flags."""
    if isinstance(pattern, str):
        return pattern

    if isinstance(pattern, re.Pattern):
        if not isinstance(pattern.pattern, str):
            raise PatternError("bytes patterns are not supported", kind=kind)
        extra = pattern.flags & ~re.UNICODE
        if extra:
            logger.warning(
                "Pattern %r: flags %s of compiled pattern are ignored",
                kind,
                re.RegexFlag(extra),
            )
        return pattern.pattern

    raise PatternError(
        f"pattern must be a string or compiled re.Pattern, got {type(pattern).__name__}",
        kind=kind,
    )


__all__ = [
    "CombinedMatcher",
    "PatternLike",
    "PatternSet",
    "combine",
]
