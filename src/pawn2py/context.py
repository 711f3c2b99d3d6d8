"""
Per-Translation State
=====================

Everything one translation run reads and writes lives on a single
CompilationContext: the token stream, the symbol table, the diagnostics,
the trace and the output buffer. A context is created for each run and
thrown away afterwards; nothing is shared between runs.
"""

from dataclasses import dataclass, field
from typing import Optional

from pawn2py.emitter import PythonEmitter
from pawn2py.errors import DiagnosticCollector
from pawn2py.lexer import PawnLexer, Token
from pawn2py.symbols import SymbolTable
from pawn2py.trace import TraceLog


class TokenStream:
    """
    Forward-only cursor over a list of tokens.

    Reading past the end is not an error: peek() and next() return None,
    and callers treat that as "not found". Every read is narrated to the
    trace.
    """

    def __init__(self, tokens: list[Token], trace: TraceLog):
        self._tokens = tokens
        self._trace = trace
        self._position = 0

    @property
    def position(self) -> int:
        """Index of the next token to be consumed."""
        return self._position

    def __len__(self) -> int:
        return len(self._tokens)

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it."""
        token = self._current()
        self._trace.log(f"Peeking next token: {_describe(token)}")
        return token

    def next(self) -> Optional[Token]:
        """Consume and return the next token."""
        token = self._current()
        if token is not None:
            self._position += 1
        self._trace.log(f"Getting next token: {_describe(token)}")
        return token

    def lookahead(self, offset: int) -> Optional[Token]:
        """Return the token offset places past the next one, without narration."""
        index = self._position + offset
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    def _current(self) -> Optional[Token]:
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return None


def _describe(token: Optional[Token]) -> str:
    return f"'{token.text}'" if token is not None else "null"


@dataclass
class CompilationContext:
    """
    State owned by one translation run.

    Attributes:
        source: Pawn source being translated
        trace: Narration of the run
        diagnostics: Errors recorded so far
        symbols: Declared variables
        emitter: Python output buffer
        stream: Token cursor (set by create())
    """
    source: str
    trace: TraceLog = field(default_factory=TraceLog)
    diagnostics: DiagnosticCollector = field(default_factory=DiagnosticCollector)
    symbols: SymbolTable = field(default_factory=SymbolTable)
    emitter: PythonEmitter = field(default_factory=PythonEmitter)
    stream: Optional[TokenStream] = None

    @classmethod
    def create(cls, source: str, indent: str = "    ") -> "CompilationContext":
        """Build a context and tokenize the source into it."""
        context = cls(source=source, emitter=PythonEmitter(indent))
        tokens = PawnLexer(source, context.trace).tokenize()
        context.stream = TokenStream(tokens, context.trace)
        return context
