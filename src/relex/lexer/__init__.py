"""Regex-driven lexer for relex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, lex, match_at
├── core.py              # Lexer class and lex() entry point
└── scanner.py           # Anchored single-match scanning

Usage:
    >>> from relex.lexer import lex
    >>> lex("a1", {"letter": "[a-z]", "digit": "[0-9]"})
    [Token(letter, 'a', 1:1), Token(digit, '1', 1:2)]

"""

from relex.lexer.core import Lexer, lex
from relex.lexer.scanner import Match, match_at

__all__ = ["Lexer", "Match", "lex", "match_at"]
