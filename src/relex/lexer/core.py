"""Regex-driven lexer.

Repeatedly matches the combined pattern set at the current scan location,
emits a token, and advances the location past the matched text.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from relex.config import get_lex_config
from relex.errors import EmptyMatchError, LexSyntaxError, PatternError
from relex.lexer.scanner import match_at
from relex.location import Location, advance
from relex.patterns import PatternSet, combine
from relex.tokens import Token
from relex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Tokenizer driven by an ordered set of regex patterns.

    The pattern set is validated and combined when the lexer is created,
    so a PatternError surfaces before any scanning.

    Usage:
            >>> lexer = Lexer("one 42", {"id": r"[a-z]+", "num": r"\\d+", "ws": r"\\s+"})
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(id, 'one', 1:1)
        Token(ws, ' ', 1:4)
        Token(num, '42', 1:5)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_matcher",
        "_skip_kinds",
        "_loc",
    )

    def __init__(
        self,
        source: str,
        pattern_set: PatternSet,
        *,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexer with source text and patterns.

        Args:
            source: Source text to tokenize
            pattern_set: Ordered kind name to pattern mapping (or pairs)
            source_file: Optional source file path for error messages

        Raises:
            PatternError: The pattern set cannot be combined, or
                skip_kinds names a kind it does not define.
        """
        config = get_lex_config()
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._matcher = combine(pattern_set, strict=config.strict_patterns)
        self._skip_kinds = config.skip_kinds

        unknown = self._skip_kinds.difference(self._matcher.kinds)
        if unknown:
            raise PatternError(
                f"skip_kinds names kinds not in the pattern set: {', '.join(sorted(unknown))}"
            )
        self._loc = Location.origin()

    @property
    def location(self) -> Location:
        """Current scan location."""
        return self._loc

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time

        Raises:
            LexSyntaxError: No pattern matches at the scan location.
            EmptyMatchError: A pattern matched zero characters.
        """
        source = self._source
        matcher = self._matcher
        while self._loc.index < self._source_len:
            loc = self._loc
            m = match_at(loc.index, source, matcher)
            if m is None:
                raise LexSyntaxError(loc, source, "Unknown token", self._source_file)
            if not m.text:
                raise EmptyMatchError(m.kind, loc)

            self._loc = advance(loc, m.text)
            if m.kind not in self._skip_kinds:
                yield Token(m.kind, m.text, loc)


def lex(
    source: str,
    pattern_set: PatternSet,
    *,
    source_file: str | None = None,
) -> list[Token]:
    """Tokenize ``source`` with an ordered pattern set.

    All or nothing: either every character is covered by a token and the
    full list is returned, or an error is raised.

    Args:
        source: Source text to tokenize
        pattern_set: Ordered kind name to pattern mapping (or pairs)
        source_file: Optional source file path for error messages

    Returns:
        Tokens in source order

    Raises:
        PatternError: The pattern set is invalid.
        LexSyntaxError: Some input matches no pattern.

    Example:
        >>> lex("one + 42", {"id": r"[a-z]+", "num": r"\\d+", "ws": r"\\s+"})
        Traceback (most recent call last):
        ...
        relex.errors.LexSyntaxError: 1:5: Unknown token
        one + 42
            ^
    """
    tokens = list(Lexer(source, pattern_set, source_file=source_file).tokenize())
    logger.debug("Lexed %d tokens from %d characters", len(tokens), len(source))
    return tokens
