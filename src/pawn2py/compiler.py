"""
pawn2py Compiler Main Module
============================

This module provides the main translator interface. It orchestrates one
translation run:

    Source → Lex → Parse + Emit → Python source

Usage
-----
Command line:
    $ pawn2py hello.pwn hello.py hello.log

Programmatic:
    >>> from pawn2py import compile_pawn
    >>> print(compile_pawn('main() { int x = 5; print(x); }'))
    # Compiled from Pawn to Python
    <BLANKLINE>
    def main():
        x = 5
        print(str(x))
    <BLANKLINE>
    if __name__ == "__main__":
        main()
    <BLANKLINE>

Success Is All-or-Nothing
-------------------------
The parser records every problem it finds and keeps going, but a run that
recorded any diagnostic produces no usable Python. PawnCompiler.compile()
returns None in that case; the diagnostics and the trace are still
available afterwards.

This module performs no file I/O; see pawn2py.cli for the driver.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from pawn2py.context import CompilationContext
from pawn2py.errors import DiagnosticCollector, TranslationDiagnostic
from pawn2py.parser import PawnParser
from pawn2py.symbols import PawnType

logger = logging.getLogger(__name__)


DEFAULT_HEADER = "# Compiled from Pawn to Python"


@dataclass
class TranslatorOptions:
    """
    Translator configuration options.

    Attributes:
        indent: Indent unit for the body of main (default: four spaces)
        header: One-line comment placed at the top of the generated module
    """
    indent: str = "    "
    header: str = DEFAULT_HEADER

    def __post_init__(self):
        if not self.indent or not self.indent.isspace():
            raise ValueError(f"indent must be non-empty whitespace, got {self.indent!r}")
        if "\n" in self.header:
            raise ValueError("header must be a single line")
        if not self.header.startswith("#"):
            raise ValueError(f"header must be a Python comment, got {self.header!r}")


@dataclass
class TranslationResult:
    """
    Result of a translation.

    Attributes:
        filename: Source filename (for reporting only)
        success: True if no diagnostics were recorded
        python_code: Generated Python (empty on failure)
        diagnostics: Recorded diagnostics, in order
        trace: Narration of the run
        token_count: Number of tokens lexed
        symbols: Declared variables and their types
    """
    filename: str = "<input>"
    success: bool = False
    python_code: str = ""
    diagnostics: list[TranslationDiagnostic] = field(default_factory=list)
    trace: str = ""
    token_count: int = 0
    symbols: dict[str, PawnType] = field(default_factory=dict)


class PawnCompiler:
    """
    Pawn to Python translator.

    Each call to compile() or compile_source() is an independent run with
    its own tokens, symbol table, diagnostics and trace.

    Example:
        compiler = PawnCompiler()
        python_code = compiler.compile(source)
        if python_code is None:
            for diagnostic in compiler.get_diagnostics():
                print(diagnostic)

    Attributes:
        options: Translator configuration
    """

    def __init__(self, options: Optional[TranslatorOptions] = None):
        self.options = options or TranslatorOptions()
        self._last: Optional[TranslationResult] = None

    def compile(self, source: str) -> Optional[str]:
        """
        Translate Pawn source to Python.

        Returns:
            The generated Python source, or None if any diagnostic was recorded
        """
        result = self.compile_source(source)
        return result.python_code if result.success else None

    def get_diagnostics(self) -> list[TranslationDiagnostic]:
        """Diagnostics from the most recent run."""
        if self._last is None:
            return []
        return list(self._last.diagnostics)

    def get_trace(self) -> str:
        """Trace text from the most recent run."""
        if self._last is None:
            return ""
        return self._last.trace

    def compile_source(self, source: str, filename: str = "<input>") -> TranslationResult:
        """
        Translate Pawn source and return the full result.

        Args:
            source: Pawn source code
            filename: Source filename, used only in log messages

        Returns:
            TranslationResult with output, diagnostics and trace
        """
        logger.debug(f"Translating {filename} ({len(source)} characters)")
        context = CompilationContext.create(source, indent=self.options.indent)
        trace = context.trace

        trace.log("Starting compilation process...")
        context.emitter.header(self.options.header)
        PawnParser(context).parse()
        trace.log("Compilation process completed.")

        diagnostics = context.diagnostics
        result = TranslationResult(
            filename=filename,
            diagnostics=diagnostics.errors,
            token_count=len(context.stream),
            symbols=context.symbols.snapshot(),
        )

        if diagnostics.has_errors():
            trace.log("Compilation errors:")
            for diagnostic in diagnostics.errors:
                trace.log(str(diagnostic))
            logger.info(f"{filename}: translation failed with {diagnostics.error_count()} error(s)")
        else:
            result.success = True
            result.python_code = context.emitter.text
            logger.info(f"{filename}: translated {result.token_count} tokens")

        result.trace = trace.text
        self._last = result
        return result


# =============================================================================
# Convenience Functions
# =============================================================================

def compile_pawn(source: str, options: Optional[TranslatorOptions] = None) -> str:
    """
    Translate Pawn source code to Python.

    Args:
        source: Pawn source code
        options: Translator configuration (defaults if None)

    Returns:
        Generated Python source

    Raises:
        TranslationFailedError: If any diagnostic was recorded
    """
    result = PawnCompiler(options).compile_source(source)
    collector = DiagnosticCollector()
    for diagnostic in result.diagnostics:
        collector.add(diagnostic)
    collector.raise_if_errors()
    return result.python_code
