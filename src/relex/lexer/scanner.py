"""Anchored single-match scanning.

match_at() asks the combined matcher for the one match that begins exactly
at a position. It never skips ahead: if nothing matches there, the result
is None even when a later part of the source would match.

"""

from __future__ import annotations

from typing import NamedTuple

from relex.patterns import CombinedMatcher


class Match(NamedTuple):
    """Kind and text of a successful scan."""

    kind: str
    text: str


def match_at(position: int, source: str, matcher: CombinedMatcher) -> Match | None:
    """Match the combined patterns starting exactly at ``position``.

    Args:
        position: Offset in ``source`` where the match must begin
        source: Full source text
        matcher: Matcher built by relex.patterns.combine()

    Returns:
        Match with the winning kind and matched text, or None if no
        pattern matches at ``position``. The text may be empty if a
        pattern matches zero characters.
    """
    m = matcher.match(source, position)
    if m is None:
        return None

    # Every alternative is a tag group and the tag closes after any group
    # nested inside it, so the last group to match is the winning kind.
    return Match(m.lastgroup, m.group())
