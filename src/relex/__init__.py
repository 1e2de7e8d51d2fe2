"""
relex — Regex-driven tokenizer

Turns a source string into tokens using an ordered mapping of kind names to
regular expressions. Every token records where it starts (index, line,
column), and unmatched input raises a located, caret-marked error.

Quick Start:
    >>> from relex import lex
    >>> patterns = {"id": r"[a-zA-Z_][a-zA-Z0-9_]*", "num": r"\\d+", "ws": r"\\s+"}
    >>> lex("one 42", patterns)
    [Token(id, 'one', 1:1), Token(ws, ' ', 1:4), Token(num, '42', 1:5)]

    >>> lex("one + 42", patterns)
    Traceback (most recent call last):
    ...
    relex.errors.LexSyntaxError: 1:5: Unknown token
    one + 42
        ^

Priority:
    Patterns are tried in the order given; the first one that matches at
    the scan position wins, even if a later one would match more text.

Installation:
    pip install relex              # Zero runtime dependencies
"""

from relex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from relex.errors import EmptyMatchError, LexSyntaxError, PatternError, RelexError
from relex.lexer import Lexer, Match, lex, match_at
from relex.location import Location, advance
from relex.patterns import CombinedMatcher, PatternSet, combine
from relex.tokens import Token

__version__ = "0.1.0"

__all__ = [
    "CombinedMatcher",
    "EmptyMatchError",
    "LexConfig",
    "LexSyntaxError",
    "Lexer",
    "Location",
    "Match",
    "PatternError",
    "PatternSet",
    "RelexError",
    "Token",
    "__version__",
    "advance",
    "combine",
    "get_lex_config",
    "lex",
    "lex_config_context",
    "match_at",
    "reset_lex_config",
    "set_lex_config",
]
