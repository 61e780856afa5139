"""
Osclan Assembler - Front End for a Reduced AArch64 Syntax
=========================================================

This package provides the front end of an assembler for a reduced
AArch64-like instruction syntax: the lexer, the instruction registry and
the parser that turn one source file into a syntax tree for a later
encoding stage.

Quick Start
-----------
    >>> from osclan_asm import parse
    >>> root = parse("MOV X0, #0x10\\nRET\\n")
    >>> print(root.pretty())
    Root
      Instruction 'MOV' @1:0
        Register 'X0' @1:4
        Immediate '16' @1:8
      Instruction 'RET' @2:0

Or use the command-line tool:
    $ osasm program.s
    $ osasm --tokens program.s
"""

__version__ = "0.1.0"

from osclan_asm.assembler import (
    Frontend,
    Lexer,
    Node,
    NodeKind,
    Parser,
    Token,
    TokenKind,
    parse,
    tokenize,
)
from osclan_asm.config import FrontendConfig
from osclan_asm.errors import (
    OsclanError,
    Position,
    AssemblerError,
    LexicalError,
    InvalidNumberError,
    UnexpectedCharacterError,
    AssemblySyntaxError,
    UnexpectedTokenError,
    UnknownInstructionError,
    UnexpectedOperandError,
    ExpectedCommaError,
    ExpectedNewlineError,
    DirectiveNewlineError,
    UnexpectedDirectiveOperandError,
    UnexpectedEndOfInputError,
    OperandShapeError,
)

__all__ = [
    "__version__",
    # Front end
    "Frontend",
    "FrontendConfig",
    "Lexer",
    "Parser",
    "Token",
    "TokenKind",
    "Node",
    "NodeKind",
    "parse",
    "tokenize",
    # Exception hierarchy
    "OsclanError",
    "Position",
    "AssemblerError",
    "LexicalError",
    "InvalidNumberError",
    "UnexpectedCharacterError",
    "AssemblySyntaxError",
    "UnexpectedTokenError",
    "UnknownInstructionError",
    "UnexpectedOperandError",
    "ExpectedCommaError",
    "ExpectedNewlineError",
    "DirectiveNewlineError",
    "UnexpectedDirectiveOperandError",
    "UnexpectedEndOfInputError",
    "OperandShapeError",
]
