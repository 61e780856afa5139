"""
Osclan Assembler Error Hierarchy
================================

This module defines the exception hierarchy for the assembler front end.
All exceptions inherit from OsclanError, allowing callers to catch every
assembler-related error with a single except clause.

Exception Hierarchy
-------------------
OsclanError (base)
└── AssemblerError (positioned, formatted)
    ├── LexicalError - the lexer could not tokenize the source
    │   ├── InvalidNumberError - '#' literal that does not decode
    │   └── UnexpectedCharacterError - character outside the syntax
    └── AssemblySyntaxError - the parser rejected a statement
        ├── UnexpectedTokenError - statement starts with the wrong token
        ├── UnknownInstructionError - identifier is not a known mnemonic
        ├── UnexpectedOperandError - operand is not an identifier/number
        ├── ExpectedCommaError - operands not separated by ','
        ├── ExpectedNewlineError - statement not terminated
        │   └── DirectiveNewlineError - directive not terminated
        ├── UnexpectedDirectiveOperandError - bad directive operand
        ├── UnexpectedEndOfInputError - input ended mid-statement
        └── OperandShapeError - operands don't match (strict mode)

Every error class carries a ``code`` naming the condition it signals, so
callers can branch on the condition without matching message text.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class OsclanError(Exception):
    """
    Base exception for all assembler errors.

        try:
            parse(source)
        except OsclanError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Position Tracking
# =============================================================================

@dataclass(frozen=True)
class Position:
    """
    A location in source text.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (0-indexed, reset after every newline)
    """
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(OsclanError):
    """
    Base exception for errors raised while processing a source file.

    Attributes:
        message: The error description
        position: Where in the source the error occurred (optional)
        filename: Name of the source file (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    code = "assembler-error"

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        filename: Optional[str] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.position = position
        self.filename = filename
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def location(self) -> str:
        """Return 'filename:line:column', omitting the unknown parts."""
        parts = []
        if self.filename:
            parts.append(self.filename)
        if self.position:
            parts.append(str(self.position))
        return ":".join(parts)

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            loop.s:3:8: error: expected ',' after operand, found identifier
                MOV R0 R1
                       ^
        """
        parts = []

        location = self.location
        if location:
            parts.append(f"{location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.position is not None:
            parts.append(f"    {self.source_line}")
            padding = " " * (4 + self.position.column)
            parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(AssemblerError):
    """Raised when the lexer cannot turn source text into tokens."""

    code = "lexical-error"


class InvalidNumberError(LexicalError):
    """
    A '#' literal that does not decode to a signed 64-bit integer.

    Examples:
        #0xZZ      ; not hexadecimal
        #0b102     ; not binary
        #12ab      ; not decimal
    """

    code = "invalid-number"

    def __init__(
        self,
        literal: str,
        position: Optional[Position] = None,
        filename: Optional[str] = None,
        reason: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.literal = literal
        message = f"invalid numeric literal '#{literal}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            position=position,
            filename=filename,
            hint="use decimal (#42), hexadecimal (#0x2A) or binary (#0b101010)",
            source_line=source_line,
        )


class UnexpectedCharacterError(LexicalError):
    """A character that cannot start any token."""

    code = "unexpected-character"

    def __init__(
        self,
        char: str,
        position: Optional[Position] = None,
        filename: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unexpected character {char!r}",
            position=position,
            filename=filename,
            source_line=source_line,
        )


# =============================================================================
# Syntax Errors
# =============================================================================

class AssemblySyntaxError(AssemblerError):
    """
    Syntax error in assembly source code.

    Raised by the parser on the first malformed statement. Parsing does
    not resynchronize; no partial tree is returned.
    """

    code = "syntax-error"


class UnexpectedTokenError(AssemblySyntaxError):
    """A statement starts with a token that cannot begin a statement."""

    code = "unexpected-token-at-statement-start"


class UnknownInstructionError(AssemblySyntaxError):
    """An instruction statement names a mnemonic the registry doesn't know."""

    code = "unknown-instruction"

    def __init__(
        self,
        mnemonic: str,
        position: Optional[Position] = None,
        filename: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.mnemonic = mnemonic
        super().__init__(
            f"expected an instruction, found '{mnemonic}'",
            position=position,
            filename=filename,
            hint=hint,
        )


class UnexpectedOperandError(AssemblySyntaxError):
    """An operand slot holds a token that is neither identifier nor number."""

    code = "unexpected-operand-token"


class ExpectedCommaError(AssemblySyntaxError):
    """Two operands are not separated by a comma."""

    code = "expected-comma"


class ExpectedNewlineError(AssemblySyntaxError):
    """A statement is followed by something other than a newline."""

    code = "expected-newline"


class DirectiveNewlineError(ExpectedNewlineError):
    """A directive's operand is not followed by a newline."""

    code = "expected-newline-after-directive"


class UnexpectedDirectiveOperandError(AssemblySyntaxError):
    """A directive operand that is neither identifier nor number."""

    code = "unexpected-directive-operand"


class UnexpectedEndOfInputError(AssemblySyntaxError):
    """The token sequence ended while a token was still required."""

    code = "unexpected-end-of-input"


class OperandShapeError(AssemblySyntaxError):
    """
    The operand kinds of an instruction match none of its accepted shapes.

    Only raised when the parser runs in strict mode.
    """

    code = "operand-shape-mismatch"

    def __init__(
        self,
        mnemonic: str,
        found: str,
        accepted: list[str],
        position: Optional[Position] = None,
        filename: Optional[str] = None,
    ):
        self.mnemonic = mnemonic
        self.found = found
        self.accepted = accepted

        if accepted:
            hint = f"{mnemonic} accepts: " + "; ".join(accepted)
        else:
            hint = f"{mnemonic} takes no operands"

        super().__init__(
            f"'{mnemonic}' does not accept operands ({found})",
            position=position,
            filename=filename,
            hint=hint,
        )
