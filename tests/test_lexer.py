# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the Pawn lexer/tokenizer.
#
# Test coverage includes:
#   - String literals (kept whole, quotes included)
#   - Punctuation, word runs and single-character fallbacks
#   - Whitespace handling
#   - Token classification
#   - Tokenization trace lines
# =============================================================================

from pawn2py.lexer import PawnLexer, Token, TokenKind, classify, tokenize
from pawn2py.trace import TraceLog


# =============================================================================
# Helper Function
# =============================================================================

def texts(source: str) -> list:
    """Tokenize and return just the lexeme texts."""
    return [t.text for t in tokenize(source)]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition for simple inputs."""

    def test_empty_source(self):
        """Empty source produces no tokens."""
        assert tokenize("") == []

    def test_whitespace_only(self):
        """Whitespace runs never become tokens."""
        assert texts("   \n\t  \r\n ") == []

    def test_punctuation_is_split(self):
        """Each of { } ( ) ; = is its own token even without spaces."""
        assert texts("main(){x=5;}") == ["main", "(", ")", "{", "x", "=", "5", ";", "}"]

    def test_word_runs(self):
        """Identifiers and numbers are maximal runs of word characters."""
        assert texts("int x1 42 _tmp") == ["int", "x1", "42", "_tmp"]

    def test_other_characters_are_single_tokens(self):
        """Operators and other characters become one-character tokens."""
        assert texts("a+b-c,d.e") == ["a", "+", "b", "-", "c", ",", "d", ".", "e"]

    def test_compound_operator_is_split(self):
        """There are no multi-character operators: '==' is two '=' tokens."""
        assert texts("x==y") == ["x", "=", "=", "y"]

    def test_float_literal_is_split(self):
        """A decimal point breaks a number into three tokens."""
        assert texts("3.14") == ["3", ".", "14"]


# =============================================================================
# String Literal Tests
# =============================================================================

class TestStringLiterals:
    """Test double-quoted string literal handling."""

    def test_string_with_spaces_is_one_token(self):
        """Internal whitespace never splits a string literal."""
        assert texts('print("hello   big world");') == [
            "print", "(", '"hello   big world"', ")", ";",
        ]

    def test_string_keeps_punctuation(self):
        """Punctuation inside quotes stays inside the literal."""
        assert texts('"a; b = {c}"') == ['"a; b = {c}"']

    def test_empty_string(self):
        """Two adjacent quotes form an empty string literal."""
        tokens = tokenize('""')
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.STRING

    def test_no_escape_sequences(self):
        """A backslash does not protect a quote; the first quote closes."""
        assert texts(r'"a\"b"') == ['"a\\"', "b", '"']

    def test_unterminated_quote(self):
        """A lone quote with no partner falls back to a single-character token."""
        assert texts('"abc') == ['"', "abc"]

    def test_string_spanning_lines(self):
        """A literal may contain a newline but is then not classified as a string."""
        tokens = tokenize('"a\nb"')
        assert len(tokens) == 1
        assert tokens[0].text == '"a\nb"'
        assert tokens[0].kind == TokenKind.OTHER


# =============================================================================
# Classification Tests
# =============================================================================

class TestClassification:
    """Test TokenKind assignment."""

    def test_type_keywords(self):
        """The four primitive type names are type keywords."""
        for name in ("int", "float", "bool", "string"):
            assert classify(name) == TokenKind.TYPE_KEYWORD

    def test_statement_keywords(self):
        """main, print and return have their own kinds."""
        assert classify("main") == TokenKind.MAIN
        assert classify("print") == TokenKind.PRINT
        assert classify("return") == TokenKind.RETURN

    def test_words(self):
        """Identifiers and numbers share the WORD kind."""
        assert classify("counter") == TokenKind.WORD
        assert classify("0") == TokenKind.WORD

    def test_punctuation_and_other(self):
        """Grammar punctuation is distinguished from other characters."""
        assert classify(";") == TokenKind.PUNCTUATION
        assert classify("=") == TokenKind.PUNCTUATION
        assert classify("+") == TokenKind.OTHER

    def test_keywords_are_case_sensitive(self):
        """'Int' is an ordinary word."""
        assert classify("Int") == TokenKind.WORD

    def test_token_helpers(self):
        """Token convenience predicates follow the kind."""
        token = Token(text="bool", index=0, kind=TokenKind.TYPE_KEYWORD)
        assert token.is_type_keyword()
        assert not token.is_string_literal()

    def test_indices_are_sequential(self):
        """Token index is its zero-based position in the list."""
        tokens = tokenize("int x ;")
        assert [t.index for t in tokens] == [0, 1, 2]


# =============================================================================
# Trace Tests
# =============================================================================

class TestTokenizationTrace:
    """Test the narration written during tokenization."""

    def test_trace_reports_count_and_tokens(self):
        """The trace lists the token count and every token."""
        trace = TraceLog()
        PawnLexer("x = 5;", trace).tokenize()
        assert trace.lines == [
            "Starting tokenization process...",
            "Tokenization completed. 4 tokens found.",
            "Tokens: x = 5 ;",
            "",
        ]

    def test_lexer_without_trace(self):
        """A lexer creates its own trace when none is given."""
        lexer = PawnLexer("main")
        lexer.tokenize()
        assert "Tokenization completed. 1 tokens found." in lexer.trace.text
