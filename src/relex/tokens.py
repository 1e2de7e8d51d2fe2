"""Token definition for the relex lexer.

Each Token has a kind (one of the pattern set's kind names), the exact
matched text, and the location where it starts.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from relex.location import Location


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        kind: Kind name of the pattern that matched
        text: The matched substring of the source
        loc: Location of the first character of ``text``

    """

    kind: str
    text: str
    loc: Location

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind}, {val!r}, {self.loc})"

    @property
    def index(self) -> int:
        """Start offset in source (convenience accessor)."""
        return self.loc.index

    @property
    def line(self) -> int:
        """Line number (convenience accessor)."""
        return self.loc.line

    @property
    def column(self) -> int:
        """Column number (convenience accessor)."""
        return self.loc.column

    @property
    def end_index(self) -> int:
        """Offset just past the token's text."""
        return self.loc.index + len(self.text)
