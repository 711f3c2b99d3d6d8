"""
pawn2py Command-Line Interface
==============================

- **pawn2py**: translate a Pawn source file to a Python module

The tool is a Click-based CLI application; the translation itself lives in
pawn2py.compiler and performs no I/O.
"""

__all__ = ["pawn2py"]
