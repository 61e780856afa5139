"""
AArch64 Assembler Front End
===========================

This package turns the text of one assembly source file into a syntax tree
ready for instruction encoding.

Main Components
---------------
- **Lexer**: Tokenizes source text into positioned tokens
- **InstructionRegistry**: Known mnemonics and their accepted operand shapes
- **Parser**: Builds the syntax tree, consulting the registry
- **Node**: Syntax tree node handed to the code generator
- **Frontend**: Runs lexer and parser over a string or file

Pipeline
--------
    source text -> Lexer -> tokens -> Parser (+ registry) -> Root node

Both stages are fail-fast: the first error raises and nothing partial is
returned.

Supported Syntax
----------------
- Instructions: MOV, ADD, SVC, BL, RET (case-insensitive)
- Registers: R/W/X followed by digits or 'zr' (X0, w12, XZR)
- Immediates: #decimal, #0xhex, #0bbinary
- Labels: 'name:' definitions and bare-word references
- Directives: '.name operand'
- Comments: ';' to end of line
"""

from osclan_asm.assembler.ast import Node, NodeKind
from osclan_asm.assembler.frontend import Frontend, parse, tokenize
from osclan_asm.assembler.lexer import Lexer, Token, TokenKind
from osclan_asm.assembler.parser import Parser, parse_tokens
from osclan_asm.assembler.registers import Register, is_register, parse_register
from osclan_asm.assembler.registry import (
    DEFAULT_REGISTRY,
    INSTRUCTION_TABLE,
    InstructionRegistry,
    InstructionSpec,
    OperandKind,
)

__all__ = [
    # Front end
    "Frontend",
    "tokenize",
    "parse",
    # Lexer
    "Lexer",
    "Token",
    "TokenKind",
    # Parser
    "Parser",
    "parse_tokens",
    # Syntax tree
    "Node",
    "NodeKind",
    # Registers
    "Register",
    "is_register",
    "parse_register",
    # Registry
    "DEFAULT_REGISTRY",
    "INSTRUCTION_TABLE",
    "InstructionRegistry",
    "InstructionSpec",
    "OperandKind",
]
