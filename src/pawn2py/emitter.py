"""
Python Code Emitter
===================

This module owns everything that knows what Python looks like. The parser
recognizes Pawn statements and calls one emitter method per statement
kind; the emitter appends the corresponding Python lines to its output
buffer.

Generated Module Shape
----------------------
    # Compiled from Pawn to Python

    def main():
        x = 5
        print(str(x))

    if __name__ == "__main__":
        main()

Every main function is followed by its own entry-point trailer, so a
source with two main blocks yields two definitions and two trailers.

Indentation
-----------
There is exactly one nesting level (the body of main), so indentation is a
fixed depth of one indent unit rather than a stack.
"""

from pawn2py.symbols import PawnType


ENTRY_POINT = "main"


class PythonEmitter:
    """
    Appends Python source lines to an output buffer.

    Each statement method returns the line it emitted (without the
    indentation) so callers can narrate it.

    Attributes:
        indent: Indent unit used for the body of main
    """

    BODY_DEPTH = 1

    def __init__(self, indent: str = "    "):
        self.indent = indent
        self._output: list[str] = []

    @property
    def text(self) -> str:
        """Return the generated Python source."""
        if not self._output:
            return ""
        return "\n".join(self._output) + "\n"

    # =========================================================================
    # Output Methods
    # =========================================================================

    def _emit(self, line: str = "") -> None:
        """Emit a line of Python at module level."""
        self._output.append(line)

    def _emit_body(self, line: str) -> str:
        """Emit a line of Python inside the body of main."""
        self._emit(self.indent * self.BODY_DEPTH + line)
        return line

    # =========================================================================
    # Module Structure
    # =========================================================================

    def header(self, comment: str) -> None:
        """Emit the one-line header comment and a blank separator."""
        self._emit(comment)
        self._emit()

    def begin_main(self) -> None:
        """Open the entry-point function definition."""
        self._emit(f"def {ENTRY_POINT}():")

    def entry_point_trailer(self) -> None:
        """Emit the idiom that calls main() when run as a script."""
        self._emit()
        self._emit('if __name__ == "__main__":')
        self._emit(f"{self.indent}{ENTRY_POINT}()")

    # =========================================================================
    # Statements
    # =========================================================================

    def declaration(self, name: str, value: str) -> str:
        """Emit a variable declaration as a plain assignment."""
        return self._emit_body(f"{name} = {value}")

    def print_call(self, argument: str) -> str:
        """Emit a print() call with an already formatted argument."""
        return self._emit_body(f"print({argument})")

    def assignment(self, name: str, value: str) -> str:
        """Emit an assignment whose right-hand side is passed through verbatim."""
        return self._emit_body(f"{name} = {value}")

    # =========================================================================
    # Value Formatting
    # =========================================================================

    @staticmethod
    def default_value(pawn_type: PawnType) -> str:
        """Python literal used for an uninitialized declaration."""
        return pawn_type.python_default

    @staticmethod
    def format_print_argument(name: str, pawn_type: PawnType) -> str:
        """
        Wrap a variable for printing according to its declared type.

        bool variables print as the words True/False; everything else goes
        through str().
        """
        if pawn_type is PawnType.BOOL:
            return f"'True' if {name} else 'False'"
        return f"str({name})"
