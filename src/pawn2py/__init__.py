"""
pawn2py - Pawn to Python Translator
===================================

This package translates programs written in a small subset of Pawn into
equivalent Python modules.

The supported subset is one entry point, `main() { ... }`, whose body may
contain:

- Variable declarations of type int, float, bool or string, with or
  without a single-token initializer
- print() of a string literal or a declared variable
- Assignments to declared variables (the right-hand side is copied as-is)
- `return 0;`, which is dropped

Main Components
---------------
- **lexer**: splits source into lexemes (PawnLexer)
- **parser**: recognizes the grammar and drives emission (PawnParser)
- **emitter**: writes the Python text (PythonEmitter)
- **symbols**: declared variable types (SymbolTable)
- **errors**: diagnostics and the exception hierarchy
- **trace**: narration of each run (TraceLog)
- **cli**: the `pawn2py` command

Quick Start
-----------
    >>> from pawn2py import PawnCompiler
    >>> compiler = PawnCompiler()
    >>> code = compiler.compile('main() { bool ok; print(ok); }')
    >>> compiler.get_diagnostics()
    []

Or use the command-line tool:
    $ pawn2py hello.pwn hello.py hello.log
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from pawn2py.compiler import (
    PawnCompiler,
    TranslatorOptions,
    TranslationResult,
    compile_pawn,
)
from pawn2py.errors import (
    PawnError,
    TranslationDiagnostic,
    StructureMismatchError,
    MissingTerminatorError,
    UnexpectedTokenError,
    UndeclaredVariableError,
    UnknownTypeError,
    UnrecognizedStatementError,
    InvalidPrintArgumentError,
    TranslationFailedError,
    DiagnosticCollector,
)
from pawn2py.lexer import PawnLexer, Token, TokenKind, tokenize
from pawn2py.parser import PawnParser
from pawn2py.emitter import PythonEmitter
from pawn2py.symbols import PawnType, SymbolTable
from pawn2py.trace import TraceLog

__all__ = [
    "__version__",
    # Main API
    "PawnCompiler",
    "TranslatorOptions",
    "TranslationResult",
    "compile_pawn",
    # Errors
    "PawnError",
    "TranslationDiagnostic",
    "StructureMismatchError",
    "MissingTerminatorError",
    "UnexpectedTokenError",
    "UndeclaredVariableError",
    "UnknownTypeError",
    "UnrecognizedStatementError",
    "InvalidPrintArgumentError",
    "TranslationFailedError",
    "DiagnosticCollector",
    # Lexer
    "PawnLexer",
    "Token",
    "TokenKind",
    "tokenize",
    # Parser and emitter
    "PawnParser",
    "PythonEmitter",
    # Symbols
    "PawnType",
    "SymbolTable",
    # Trace
    "TraceLog",
]
