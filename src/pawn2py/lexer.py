"""
Pawn Lexer (Tokenizer)
======================

This module splits Pawn source text into a flat, ordered list of lexemes
for the parser.

Tokenization Rules
------------------
Scanning is a single left-to-right pass; the first rule that matches at the
current position wins:

| Rule              | Example         | Token           |
|-------------------|-----------------|-----------------|
| String literal    | "hello world"   | "hello world"   |
| Whitespace run    | spaces, \\n     | (discarded)     |
| Punctuation       | { } ( ) ; =     | one character   |
| Word              | x1, 42, int     | maximal run     |
| Anything else     | + - , .         | one character   |

String literals keep their quotes and have no escape sequences: the first
'"' after the opening one closes the literal. Numbers and identifiers are
both plain words; nothing distinguishes them lexically.

Token Classification
--------------------
Every token is classified once, when it is created, into a TokenKind. The
parser still compares lexeme text for fixed punctuation (the kind is a
convenience, not a separate grammar).

Example Usage
-------------
>>> from pawn2py.lexer import PawnLexer
>>> tokens = PawnLexer('main() { print("hi there"); }').tokenize()
>>> [t.text for t in tokens]
['main', '(', ')', '{', 'print', '(', '"hi there"', ')', ';', '}']
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from pawn2py.trace import TraceLog


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Lexical category of a token, derived from its text."""

    TYPE_KEYWORD = auto()   # int, float, bool, string
    MAIN = auto()           # main
    PRINT = auto()          # print
    RETURN = auto()         # return
    STRING = auto()         # "..." (quotes included)
    WORD = auto()           # identifiers and numeric literals
    PUNCTUATION = auto()    # { } ( ) ; =
    OTHER = auto()          # any other single character


TYPE_KEYWORDS = frozenset({"int", "float", "bool", "string"})

KEYWORDS: dict[str, TokenKind] = {
    "main": TokenKind.MAIN,
    "print": TokenKind.PRINT,
    "return": TokenKind.RETURN,
    **{name: TokenKind.TYPE_KEYWORD for name in TYPE_KEYWORDS},
}

PUNCTUATION = frozenset("{}();=")

# Alternation order matters: a string literal must win over the
# single-character fallback that would otherwise take its opening quote.
TOKEN_PATTERN = re.compile(r'("[^"]*"|\s+|[{}();=]|\b\w+\b|.)')

# A whole token that starts and ends with a double quote.
STRING_LITERAL_PATTERN = re.compile(r'^".*"$')

WORD_PATTERN = re.compile(r"\w+")


def classify(text: str) -> TokenKind:
    """Return the TokenKind for a lexeme."""
    if text in KEYWORDS:
        return KEYWORDS[text]
    if STRING_LITERAL_PATTERN.match(text):
        return TokenKind.STRING
    if text in PUNCTUATION:
        return TokenKind.PUNCTUATION
    if WORD_PATTERN.fullmatch(text):
        return TokenKind.WORD
    return TokenKind.OTHER


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexeme from Pawn source.

    Attributes:
        text: The lexeme exactly as it appeared in the source
        index: Zero-based position in the token list
        kind: Classification of the lexeme
    """
    text: str
    index: int
    kind: TokenKind

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.index})"

    def is_type_keyword(self) -> bool:
        """Return True if this token names one of the four primitive types."""
        return self.kind == TokenKind.TYPE_KEYWORD

    def is_string_literal(self) -> bool:
        """Return True if this token is a quoted string literal."""
        return self.kind == TokenKind.STRING


# =============================================================================
# Lexer Implementation
# =============================================================================

class PawnLexer:
    """
    Tokenizes Pawn source code.

    Usage:
        lexer = PawnLexer(source_text, trace)
        tokens = lexer.tokenize()

    Attributes:
        source: The source code being tokenized
        trace: Trace log receiving the tokenization narration
    """

    def __init__(self, source: str, trace: Optional[TraceLog] = None):
        self.source = source
        self.trace = trace if trace is not None else TraceLog()

    def tokenize(self) -> list[Token]:
        """
        Split the source into tokens.

        Whitespace runs are dropped; every other match becomes a token.
        The token count and the full token list are written to the trace.

        Returns:
            List of Token objects in source order
        """
        self.trace.log("Starting tokenization process...")

        lexemes = [
            match.group(0)
            for match in TOKEN_PATTERN.finditer(self.source)
            if match.group(0) and not match.group(0).isspace()
        ]
        tokens = [
            Token(text=text, index=index, kind=classify(text))
            for index, text in enumerate(lexemes)
        ]

        self.trace.log(f"Tokenization completed. {len(tokens)} tokens found.")
        self.trace.log("Tokens: " + " ".join(lexemes))
        self.trace.log("")
        return tokens


def tokenize(source: str) -> list[Token]:
    """Tokenize source without keeping a trace."""
    return PawnLexer(source).tokenize()
