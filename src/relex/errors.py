"""Exception classes for relex.

Two categories are kept apart so callers can tell a misconfigured lexer
from invalid input text:

- PatternError: the pattern set is unusable (raised before scanning starts)
- LexSyntaxError: no pattern matches at the current scan position
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from relex.location import Location


class RelexError(Exception):
    """Base exception for all relex errors.

    Subclass this for specific error categories.
    """

    pass


class PatternError(RelexError):
    """Error in the pattern set supplied to the lexer.

    Raised for malformed pattern sources, invalid or duplicate kind names,
    and unsupported pattern objects.
    """

    def __init__(self, message: str, kind: str | None = None) -> None:
        """Initialize pattern error.

        Args:
            message: Description of the problem
            kind: Kind name of the offending entry (optional)
        """
        self.message = message
        self.kind = kind

        prefix = f"Pattern {kind!r}: " if kind is not None else ""
        super().__init__(f"{prefix}{message}")

    def __reduce__(self) -> tuple:
        return (type(self), (self.message, self.kind))


class EmptyMatchError(PatternError):
    """A pattern matched zero characters.

    A zero-length token never advances the scan position, so the lexer
    refuses it instead of looping forever. Raised at combine time for
    patterns that match the empty string on their own, and at lex time
    for patterns that only do so in context (lookarounds, ``\\b``).
    """

    def __init__(self, kind: str, loc: Location | None = None) -> None:
        """Initialize empty match error.

        Args:
            kind: Kind name of the pattern that matched nothing
            loc: Scan location where the empty match happened (optional)
        """
        self.loc = loc
        where = f" at {loc}" if loc is not None else ""
        super().__init__(f"matches the empty string{where}", kind=kind)

    def __reduce__(self) -> tuple:
        return (type(self), (self.kind, self.loc))


class LexSyntaxError(RelexError):
    """No pattern matches the source at a scan location.

    The message points at the offending character:

        1:5: Unknown token
        one + 42
            ^

    Attributes:
        loc: Location where scanning was attempted
        source: The full source string
        msg: Bare message without location or marker
        line_text: Text of the offending source line
        source_file: Source file path (optional)
    """

    def __init__(
        self,
        loc: Location,
        source: str,
        msg: str,
        source_file: str | None = None,
    ) -> None:
        self.loc = loc
        self.source = source
        self.msg = msg
        self.source_file = source_file
        self.line_text = source.split("\n")[loc.line - 1]

        prefix = f"{source_file}:" if source_file else ""
        marker = " " * (loc.column - 1) + "^"
        super().__init__(f"{prefix}{loc}: {msg}\n{self.line_text}\n{marker}")

    def __reduce__(self) -> tuple:
        return (type(self), (self.loc, self.source, self.msg, self.source_file))
