"""Source location tracking for tokens and error messages.

Provides the Location value object and advance(), which derives the next
location from the text just consumed.

Character units are Python str code points, the same units the re module
matches in. Only "\\n" starts a new line.

Thread Safety:
Location is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """Position of a character in source text.

    Attributes:
        index: Offset into the source string (0-indexed)
        line: Line number (1-indexed)
        column: Column number (1-indexed)

    Examples:
            >>> loc = Location.origin()
            >>> loc
        Location(index=0, line=1, column=1)

            >>> str(loc.advance("ab\\ncd"))
            '2:3'

    """

    index: int
    line: int
    column: int

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "10:5"
        """
        return f"{self.line}:{self.column}"

    @classmethod
    def origin(cls) -> Location:
        """Location of the first character of a document."""
        return cls(index=0, line=1, column=1)

    def advance(self, text: str) -> Location:
        """Location just past ``text`` when it is consumed from here."""
        return advance(self, text)


def advance(loc: Location, text: str) -> Location:
    """Compute the location that follows consuming ``text`` at ``loc``.

    The column restarts after the last newline in ``text``; without a
    newline it moves right by the length of ``text``.

    Args:
        loc: Location where ``text`` starts
        text: Consumed text

    Returns:
        New Location just past ``text``
    """
    length = len(text)
    newline_count = text.count("\n")

    if newline_count > 0:
        column = length - text.rfind("\n")
    else:
        column = loc.column + length

    return Location(
        index=loc.index + length,
        line=loc.line + newline_count,
        column=column,
    )
