"""Tests for the high-level relex API."""

import re

import pytest

from relex import Lexer, LexSyntaxError, Location, PatternError, Token, lex

IDENT = r"[a-zA-Z_][a-zA-Z0-9_]*"
PATTERNS = {"id": IDENT, "num": r"\d+", "ws": r"\s+"}


class TestLexFunction:
    """Tests for the lex() function."""

    def test_full_tokenization(self) -> None:
        tokens = lex("one 42", PATTERNS)

        assert tokens == [
            Token("id", "one", Location(0, 1, 1)),
            Token("ws", " ", Location(3, 1, 4)),
            Token("num", "42", Location(4, 1, 5)),
        ]

    def test_returns_list(self) -> None:
        assert isinstance(lex("one", PATTERNS), list)

    def test_empty_source(self) -> None:
        """Empty source yields no tokens and no error."""
        assert lex("", PATTERNS) == []

    def test_empty_source_still_validates_patterns(self) -> None:
        with pytest.raises(PatternError):
            lex("", {"bad": "("})

    def test_first_listed_wins(self) -> None:
        """When two kinds match at the same place, the earlier one wins."""
        tokens = lex("if", {"id": IDENT, "kw": "if"})
        assert [t.kind for t in tokens] == ["id"]

        tokens = lex("if", {"kw": "if", "id": IDENT})
        assert [t.kind for t in tokens] == ["kw"]

    def test_first_listed_wins_over_longer_match(self) -> None:
        """Priority is order, not length."""
        tokens = lex("iffy", {"kw": "if", "id": IDENT})
        assert [(t.kind, t.text) for t in tokens] == [("kw", "if"), ("id", "fy")]

    def test_pairs_pattern_set(self) -> None:
        pairs = [("num", r"\d+"), ("id", IDENT), ("ws", r"\s+")]
        tokens = lex("x 1", pairs)
        assert [t.kind for t in tokens] == ["id", "ws", "num"]

    def test_compiled_patterns(self) -> None:
        tokens = lex("ab12", {"word": re.compile("[a-z]+"), "num": re.compile(r"\d+")})
        assert [(t.kind, t.text) for t in tokens] == [("word", "ab"), ("num", "12")]

    def test_dot_matches_newline(self) -> None:
        """Wildcards span lines."""
        tokens = lex('"a\nb"x', {"str": r'".*?"', "x": "x"})

        assert tokens[0].kind == "str"
        assert tokens[0].text == '"a\nb"'
        assert tokens[1].loc == Location(5, 2, 3)

    def test_unknown_token(self) -> None:
        with pytest.raises(LexSyntaxError) as exc_info:
            lex("one + 42", PATTERNS)

        assert str(exc_info.value) == "1:5: Unknown token\none + 42\n    ^"

    def test_unknown_token_with_source_file(self) -> None:
        with pytest.raises(LexSyntaxError) as exc_info:
            lex("one + 42", PATTERNS, source_file="calc.txt")

        assert str(exc_info.value) == "calc.txt:1:5: Unknown token\none + 42\n    ^"
        assert exc_info.value.source_file == "calc.txt"

    def test_keyword_kind_names(self) -> None:
        """Python keywords are valid kind names."""
        tokens = lex("if", {"if": "if"})
        assert tokens[0].kind == "if"


class TestLexerClass:
    """Tests for the Lexer class."""

    def test_tokenize_is_lazy(self) -> None:
        """Tokens before an error are yielded when iterating directly."""
        stream = Lexer("ab?", {"word": "[a-z]+"}).tokenize()

        first = next(stream)
        assert first == Token("word", "ab", Location(0, 1, 1))
        with pytest.raises(LexSyntaxError):
            next(stream)

    def test_location_tracks_progress(self) -> None:
        lexer = Lexer("ab\ncd", {"word": "[a-z]+", "nl": "\n"})
        assert lexer.location == Location.origin()

        list(lexer.tokenize())
        assert lexer.location == Location(5, 2, 3)

    def test_location_stays_at_error(self) -> None:
        lexer = Lexer("ab?", {"word": "[a-z]+"})
        with pytest.raises(LexSyntaxError):
            list(lexer.tokenize())
        assert lexer.location == Location(2, 1, 3)

    def test_pattern_error_at_construction(self) -> None:
        """Bad patterns fail before any tokenization is attempted."""
        with pytest.raises(PatternError):
            Lexer("abc", {"bad": "[a-"})


class TestTokenRepr:
    """Tests for Token's debug helpers."""

    def test_repr(self) -> None:
        token = Token("id", "one", Location(0, 1, 1))
        assert repr(token) == "Token(id, 'one', 1:1)"

    def test_repr_truncates_long_text(self) -> None:
        token = Token("str", "x" * 30, Location(0, 1, 1))
        assert repr(token) == f"Token(str, {'x' * 17 + '...'!r}, 1:1)"

    def test_accessors(self) -> None:
        token = Token("num", "42", Location(4, 2, 5))
        assert token.index == 4
        assert token.line == 2
        assert token.column == 5
        assert token.end_index == 6

    def test_immutability(self) -> None:
        token = Token("num", "42", Location(4, 1, 5))
        with pytest.raises(AttributeError):
            token.kind = "id"  # type: ignore[misc]
