#!/usr/bin/env python3
"""
pawn2py Translation Demo
========================

This script demonstrates how to use the translator from Python to:
1. Translate a Pawn program to Python
2. Inspect diagnostics when translation fails
3. Read the translation trace

Usage:
    python examples/translate_demo.py
"""

from pathlib import Path

from pawn2py import PawnCompiler, TranslatorOptions


def main():
    compiler = PawnCompiler(TranslatorOptions(indent="    "))

    # ==========================================================================
    # 1. Translate a working program
    # ==========================================================================
    source = (Path(__file__).parent / "hello.pwn").read_text()
    python_code = compiler.compile(source)
    print(python_code)

    # ==========================================================================
    # 2. Translate a broken one; every problem is reported in one run
    # ==========================================================================
    broken = "main() { print(missing); total = 1; int x = 5 }"
    if compiler.compile(broken) is None:
        print("Translation failed:")
        for diagnostic in compiler.get_diagnostics():
            print(f"  {diagnostic}")

    # ==========================================================================
    # 3. The trace is always available
    # ==========================================================================
    print()
    print(compiler.get_trace().splitlines()[1])


if __name__ == "__main__":
    main()
