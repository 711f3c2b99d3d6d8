"""
Pawn Recursive Descent Parser
=============================

This module recognizes the Pawn subset and drives the Python emitter as it
goes. There is no syntax tree: each grammar production is translated the
moment it is recognized.

Grammar
-------
program         ::= (main_function | unexpected_token)*
main_function   ::= 'main' '(' ')' '{' statement* '}'
statement       ::= var_decl | print_stmt | return_zero | other_stmt
var_decl        ::= type IDENTIFIER ('=' VALUE)? ';'
print_stmt      ::= 'print' '(' ARGUMENT ')' ';'
return_zero     ::= 'return' '0' ';'
other_stmt      ::= (any token but ';')* ';'
type            ::= 'int' | 'float' | 'bool' | 'string'

Statements are dispatched in the order listed. other_stmt is the
catch-all; the only form it translates is an assignment to a declared
variable, whose right-hand side is copied through as text.

Error Recovery
--------------
Errors never stop the parse. _expect() records a diagnostic when the
consumed token is not the expected lexeme, and parsing continues with the
following token. Top-level tokens other than 'main' are reported and
skipped one at a time. A run can therefore report many errors.
"""

import re
from typing import Optional

from pawn2py.context import CompilationContext
from pawn2py.errors import (
    TranslationDiagnostic,
    StructureMismatchError,
    MissingTerminatorError,
    UnexpectedTokenError,
    UndeclaredVariableError,
    UnknownTypeError,
    UnrecognizedStatementError,
    InvalidPrintArgumentError,
)
from pawn2py.lexer import Token, TokenKind
from pawn2py.symbols import PawnType


# name = anything, over the space-joined statement text
ASSIGNMENT_PATTERN = re.compile(r"^(\w+)\s*=\s*(.+)$")


def _text(token: Optional[Token]) -> Optional[str]:
    return token.text if token is not None else None


class PawnParser:
    """
    Single-pass parser and translator for Pawn.

    Example:
        context = CompilationContext.create(source)
        PawnParser(context).parse()
        print(context.emitter.text)
    """

    def __init__(self, context: CompilationContext):
        self.context = context
        self.stream = context.stream
        self.symbols = context.symbols
        self.emitter = context.emitter
        self.trace = context.trace

    def parse(self) -> None:
        """Translate every main function in the token stream."""
        while True:
            token = self.stream.peek()
            if token is None:
                break
            if token.kind == TokenKind.MAIN:
                self._parse_main()
            else:
                self._error(UnexpectedTokenError(token.text, self.stream.position))
                self.stream.next()

    # =========================================================================
    # Token Helpers
    # =========================================================================

    def _error(self, diagnostic: TranslationDiagnostic) -> None:
        self.context.diagnostics.add(diagnostic)

    def _expect(self, lexeme: str) -> Optional[Token]:
        """
        Consume the next token and check it against lexeme.

        A mismatch is recorded but the token stays consumed.
        """
        token = self.stream.next()
        found = _text(token)
        if found != lexeme:
            position = self.stream.position
            if lexeme == ";":
                self._error(MissingTerminatorError(found, position))
            else:
                self._error(StructureMismatchError(lexeme, found, position))
        return token

    # =========================================================================
    # Main Function
    # =========================================================================

    def _parse_main(self) -> None:
        self.trace.log("Compiling main function...")
        self.emitter.begin_main()
        for lexeme in ("main", "(", ")", "{"):
            self._expect(lexeme)

        while True:
            token = self.stream.peek()
            if token is None or token.text == "}":
                break
            self._parse_statement(token)

        self._expect("}")
        self.emitter.entry_point_trailer()
        self.trace.log("Main function compilation completed.")

    def _parse_statement(self, token: Token) -> None:
        """Dispatch one statement of main's body."""
        if token.is_type_keyword():
            self._parse_declaration()
        elif token.kind == TokenKind.PRINT:
            self._parse_print()
        elif self._is_return_zero():
            self._skip_return_zero()
        else:
            self._parse_other_statement()

    # =========================================================================
    # Statements
    # =========================================================================

    def _parse_declaration(self) -> None:
        """type name ('=' value)? ';'"""
        type_token = self.stream.next()
        name_token = self.stream.next()
        name = _text(name_token) or ""
        pawn_type = PawnType.from_keyword(_text(type_token))
        if pawn_type is not None and name_token is not None:
            self.symbols.declare(name, pawn_type)

        following = self.stream.peek()
        if following is not None and following.text == "=":
            self.stream.next()
            value = _text(self.stream.next()) or ""
            self._expect(";")
        else:
            self._expect(";")
            value = self._default_value(type_token, pawn_type)

        line = self.emitter.declaration(name, value)
        self.trace.log(f"Variable declaration compiled: {line}")

    def _default_value(self, type_token: Optional[Token], pawn_type: Optional[PawnType]) -> str:
        if pawn_type is None:
            self._error(UnknownTypeError(_text(type_token) or "", self.stream.position))
            return "None"
        return self.emitter.default_value(pawn_type)

    def _parse_print(self) -> None:
        """'print' '(' argument ')' ';'"""
        self.trace.log("Compiling print statement...")
        self._expect("print")
        self._expect("(")

        argument_token = self.stream.next()
        argument = _text(argument_token) or ""
        declared = self.symbols.lookup(_text(argument_token))
        if argument_token is not None and argument_token.is_string_literal():
            pass
        elif declared is not None:
            argument = self.emitter.format_print_argument(argument, declared)
        else:
            self._error(InvalidPrintArgumentError(_text(argument_token), self.stream.position))

        self._expect(")")
        line = self.emitter.print_call(argument)
        self._expect(";")
        self.trace.log(f"Print statement compiled: {line}")

    def _is_return_zero(self) -> bool:
        token = self.stream.peek()
        following = self.stream.lookahead(1)
        return (
            token is not None
            and token.kind == TokenKind.RETURN
            and following is not None
            and following.text == "0"
        )

    def _skip_return_zero(self) -> None:
        """'return' '0' ';' has no Python counterpart and emits nothing."""
        self.trace.log("Encountered 'return 0;' statement. Skipping in Python output...")
        for lexeme in ("return", "0", ";"):
            self._expect(lexeme)
        self.trace.log("'return 0;' statement skipped.")

    def _parse_other_statement(self) -> None:
        """Collect tokens up to ';' and translate them if they form an assignment."""
        self.trace.log("Compiling other statement...")
        parts = []
        token = self.stream.next()
        while token is not None and token.text != ";":
            parts.append(token.text)
            token = self.stream.next()
        statement = " ".join(parts)

        if statement:
            match = ASSIGNMENT_PATTERN.match(statement)
            if match is None:
                self._error(UnrecognizedStatementError(statement, self.stream.position))
            else:
                name, value = match.groups()
                if name not in self.symbols:
                    self._error(UndeclaredVariableError(name, self.stream.position))
                else:
                    line = self.emitter.assignment(name, value)
                    self.trace.log(f"Assignment compiled: {line}")

        if token is None:
            self._error(MissingTerminatorError(None, self.stream.position, end_of_statement=True))
