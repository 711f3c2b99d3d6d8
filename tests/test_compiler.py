"""
Tests for the PawnCompiler API
==============================

These tests cover the public translation interface: compile(),
compile_source(), the diagnostics and trace accessors, configuration
options and the compile_pawn() convenience function.
"""

import pytest

from pawn2py import (
    PawnCompiler,
    TranslatorOptions,
    TranslationFailedError,
    InvalidPrintArgumentError,
    compile_pawn,
)


HELLO = """
main() {
    string greeting = "Hello, world";
    int count = 3;
    bool done;
    print(greeting);
    print(count);
    print(done);
    count = count + 1;
    return 0;
}
"""


# =============================================================================
# Compile API
# =============================================================================

class TestCompile:
    """Tests for compile() and its accessors."""

    def test_hello_program(self):
        """A complete program translates to a runnable module."""
        compiler = PawnCompiler()
        code = compiler.compile(HELLO)
        assert compiler.get_diagnostics() == []
        assert code == (
            "# Compiled from Pawn to Python\n"
            "\n"
            "def main():\n"
            '    greeting = "Hello, world"\n'
            "    count = 3\n"
            "    done = False\n"
            "    print(str(greeting))\n"
            "    print(str(count))\n"
            "    print('True' if done else 'False')\n"
            "    count = count + 1\n"
            "\n"
            'if __name__ == "__main__":\n'
            "    main()\n"
        )

    def test_failure_returns_none(self):
        """Any diagnostic makes compile() return the failure marker."""
        compiler = PawnCompiler()
        assert compiler.compile("main() { print(y); }") is None
        assert len(compiler.get_diagnostics()) == 1

    def test_accessors_before_compile(self):
        """Accessors are empty before the first run."""
        compiler = PawnCompiler()
        assert compiler.get_diagnostics() == []
        assert compiler.get_trace() == ""

    def test_runs_are_independent(self):
        """A later run sees nothing from an earlier one."""
        compiler = PawnCompiler()
        compiler.compile("main() { int x; }")
        assert compiler.compile("main() { x = 1; }") is None
        assert compiler.compile("main() { int y; }") is not None
        assert compiler.get_diagnostics() == []

    def test_deterministic(self):
        """Compiling the same text twice gives identical results."""
        source = "main() { int x = 5; print(x); print(q); }"
        compiler = PawnCompiler()
        first = compiler.compile_source(source)
        second = compiler.compile_source(source)
        assert first.python_code == second.python_code
        assert first.diagnostics == second.diagnostics
        assert [str(d) for d in first.diagnostics] == [str(d) for d in second.diagnostics]
        assert first.trace == second.trace

    def test_deterministic_success(self):
        """Successful output is byte-identical across runs."""
        assert PawnCompiler().compile(HELLO) == PawnCompiler().compile(HELLO)


# =============================================================================
# TranslationResult
# =============================================================================

class TestTranslationResult:
    """Tests for compile_source()."""

    def test_result_fields(self):
        """The result carries tokens, symbols and filename."""
        result = PawnCompiler().compile_source("main() { int x; }", "prog.pwn")
        assert result.success
        assert result.filename == "prog.pwn"
        assert result.token_count == 8
        assert list(result.symbols) == ["x"]

    def test_failed_result_has_no_code(self):
        """A failed result keeps diagnostics but no Python."""
        result = PawnCompiler().compile_source("main() { print(nope); }")
        assert not result.success
        assert result.python_code == ""
        assert isinstance(result.diagnostics[0], InvalidPrintArgumentError)


# =============================================================================
# Trace
# =============================================================================

class TestTrace:
    """Tests for the translation trace."""

    def test_trace_narrates_run(self):
        """The trace follows the run from tokenization to completion."""
        compiler = PawnCompiler()
        compiler.compile("main() { int x = 5; print(x); }")
        trace = compiler.get_trace()
        lines = trace.splitlines()
        assert lines[0] == "Starting tokenization process..."
        assert "Tokenization completed. 15 tokens found." in lines
        assert "Starting compilation process..." in lines
        assert "Compiling main function..." in lines
        assert "Variable declaration compiled: x = 5" in lines
        assert "Compiling print statement..." in lines
        assert "Print statement compiled: print(str(x))" in lines
        assert "Main function compilation completed." in lines
        assert lines[-2:] == ["Peeking next token: null", "Compilation process completed."]

    def test_trace_lists_errors_on_failure(self):
        """A failed run ends its trace with the full error list."""
        compiler = PawnCompiler()
        compiler.compile("junk main() { }")
        lines = compiler.get_trace().splitlines()
        assert lines[-2:] == [
            "Compilation errors:",
            "Error at token 0: Unexpected token outside of main function: 'junk'",
        ]

    def test_trace_does_not_affect_output(self):
        """Output is the same whether or not anyone reads the trace."""
        compiler = PawnCompiler()
        first = compiler.compile(HELLO)
        compiler.get_trace()
        assert compiler.compile(HELLO) == first


# =============================================================================
# Options
# =============================================================================

class TestOptions:
    """Tests for TranslatorOptions."""

    def test_custom_indent(self):
        """The indent unit applies to the body and the trailer."""
        code = PawnCompiler(TranslatorOptions(indent="  ")).compile("main() { int x; }")
        assert "\n  x = 0\n" in code
        assert code.endswith('if __name__ == "__main__":\n  main()\n')

    def test_custom_header(self):
        """The header comment is configurable."""
        code = PawnCompiler(TranslatorOptions(header="# generated")).compile("")
        assert code == "# generated\n\n"

    def test_invalid_indent(self):
        """Indent must be whitespace."""
        with pytest.raises(ValueError):
            TranslatorOptions(indent="xx")
        with pytest.raises(ValueError):
            TranslatorOptions(indent="")

    def test_multiline_header_rejected(self):
        """The header is a single line."""
        with pytest.raises(ValueError):
            TranslatorOptions(header="# one\n# two")

    def test_non_comment_header_rejected(self):
        """The header must be a comment so the module still parses."""
        with pytest.raises(ValueError):
            TranslatorOptions(header="x =")


# =============================================================================
# compile_pawn
# =============================================================================

class TestCompilePawn:
    """Tests for the convenience function."""

    def test_success(self):
        """Returns the Python source directly."""
        assert compile_pawn("main() { }").startswith("# Compiled from Pawn to Python")

    def test_failure_raises(self):
        """Raises an aggregate error carrying every diagnostic."""
        with pytest.raises(TranslationFailedError) as exc_info:
            compile_pawn("main() { print(a); print(b); }")
        assert len(exc_info.value.diagnostics) == 2
        assert str(exc_info.value).endswith("2 errors")
