"""
pawn2py Error Hierarchy
=======================

This module defines the exception hierarchy for the Pawn to Python
translator. All exceptions inherit from PawnError, allowing callers to
catch every translator-related error with a single except clause.

Exception Hierarchy
-------------------
PawnError (base)
├── TranslationDiagnostic - one recorded, non-fatal problem
│   ├── StructureMismatchError - an expected fixed lexeme was absent
│   ├── MissingTerminatorError - a statement lacks its ';'
│   ├── UnexpectedTokenError - input outside of the main function
│   ├── UndeclaredVariableError - assignment to an undeclared name
│   ├── UnknownTypeError - declaration with an unknown type
│   ├── UnrecognizedStatementError - statement of unsupported shape
│   └── InvalidPrintArgumentError - print argument is not printable
└── TranslationFailedError - aggregate report of all diagnostics

Diagnostics vs. Exceptions
--------------------------
The parser never raises a TranslationDiagnostic. It records instances in a
DiagnosticCollector and keeps going, so a single run surfaces every problem
it can find. Only the convenience helpers raise, and then only the
aggregate TranslationFailedError.

Error messages follow this format:
    Error at token 7: Expected ';', but got '}'
"""

from typing import Optional, List


# =============================================================================
# Base Exception Class
# =============================================================================

class PawnError(Exception):
    """
    Base exception for all pawn2py errors.

        try:
            python_code = compile_pawn(source)
        except PawnError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Diagnostics
# =============================================================================

class TranslationDiagnostic(PawnError):
    """
    A non-fatal translation error tagged with its token position.

    Attributes:
        message: The error description
        position: Token cursor index at the moment the error was recorded
    """

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return f"Error at token {self.position}: {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TranslationDiagnostic):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.position == other.position
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.message, self.position))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, position={self.position})"


class StructureMismatchError(TranslationDiagnostic):
    """
    An expected fixed lexeme was not found.

    Example:
        main( {      // Expected ')', but got '{'
    """

    def __init__(self, expected: str, found: Optional[str], position: int):
        self.expected = expected
        self.found = found
        super().__init__(
            f"Expected '{expected}', but got '{found or ''}'",
            position,
        )


class MissingTerminatorError(TranslationDiagnostic):
    """
    A statement was not terminated by ';'.

    Recorded for a declaration, print, or return whose ';' is replaced by
    some other token, and for a generic statement that runs into end of
    input before its ';'.
    """

    def __init__(self, found: Optional[str], position: int, end_of_statement: bool = False):
        self.expected = ";"
        self.found = found
        if end_of_statement:
            message = "Expected ';' at the end of statement"
        else:
            message = f"Expected ';', but got '{found or ''}'"
        super().__init__(message, position)


class UnexpectedTokenError(TranslationDiagnostic):
    """Token found at top level that does not start a main function."""

    def __init__(self, token: str, position: int):
        self.token = token
        super().__init__(
            f"Unexpected token outside of main function: '{token}'",
            position,
        )


class UndeclaredVariableError(TranslationDiagnostic):
    """
    Assignment to a variable that was never declared.

    Example:
        z = 3;       // Assignment to undeclared variable: z
    """

    def __init__(self, name: str, position: int):
        self.name = name
        super().__init__(f"Assignment to undeclared variable: {name}", position)


class UnknownTypeError(TranslationDiagnostic):
    """Declaration of a type with no Python default value."""

    def __init__(self, type_name: str, position: int):
        self.type_name = type_name
        super().__init__(f"Unknown type: {type_name}", position)


class UnrecognizedStatementError(TranslationDiagnostic):
    """Statement that is neither a declaration, print, return 0, nor assignment."""

    def __init__(self, statement: str, position: int):
        self.statement = statement
        super().__init__(f"Unrecognized statement: {statement}", position)


class InvalidPrintArgumentError(TranslationDiagnostic):
    """
    print() argument is neither a string literal nor a declared variable.

    Example:
        print(y);    // y was never declared
    """

    def __init__(self, argument: Optional[str], position: int):
        self.argument = argument
        super().__init__(
            f"Invalid print argument: {argument or ''}. "
            "Expected a string literal or a declared variable.",
            position,
        )


# =============================================================================
# Aggregate Failure
# =============================================================================

class TranslationFailedError(PawnError):
    """
    Aggregate error raised when a translation recorded any diagnostics.

    The message is the pre-formatted report from DiagnosticCollector.

    Attributes:
        diagnostics: The collected diagnostics, in the order recorded
    """

    def __init__(self, report: str, diagnostics: Optional[List[TranslationDiagnostic]] = None):
        self.diagnostics = list(diagnostics or [])
        super().__init__(report)


# =============================================================================
# Error Collection (for multi-error reporting)
# =============================================================================

class DiagnosticCollector:
    """
    Collects diagnostics for batch reporting.

    The parser uses this to continue after every error, so that a user can
    fix many problems from a single run. Nothing is ever dropped, merged or
    deduplicated; order of recording is preserved.

    Example:
        collector = DiagnosticCollector()
        collector.add(UnknownTypeError("long", 3))
        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self):
        self._errors: List[TranslationDiagnostic] = []

    def add(self, error: TranslationDiagnostic) -> None:
        """Add a diagnostic to the collection."""
        self._errors.append(error)

    @property
    def errors(self) -> List[TranslationDiagnostic]:
        """Return a copy of the collected diagnostics, in order."""
        return list(self._errors)

    def has_errors(self) -> bool:
        """Return True if any diagnostics have been collected."""
        return len(self._errors) > 0

    def error_count(self) -> int:
        """Return the number of collected diagnostics."""
        return len(self._errors)

    def report(self) -> str:
        """Format all diagnostics for display."""
        lines = [str(error) for error in self._errors]
        word = "error" if len(self._errors) == 1 else "errors"
        lines.append(f"{len(self._errors)} {word}")
        return "\n".join(lines)

    def raise_if_errors(self) -> None:
        """Raise a TranslationFailedError if any diagnostics were collected."""
        if self.has_errors():
            raise TranslationFailedError(self.report(), self._errors)
