"""
Assembler Front End - Main Interface
====================================

This module provides the Frontend class, which runs the lexer and parser
over a source file and hands back the syntax tree for the (future) code
generator.

Example Usage
-------------
>>> from osclan_asm.assembler import Frontend
>>> frontend = Frontend()
>>> root = frontend.parse_string('''
... start:
...     MOV X0, #0x2A
...     RET
... ''')
>>> [child.kind.name for child in root.children]
['LABEL', 'INSTRUCTION', 'INSTRUCTION']

Or with the convenience functions:

>>> from osclan_asm.assembler import tokenize, parse
>>> tokens = tokenize("MOV R0, #5\\n")
>>> root = parse("MOV R0, #5\\n")
"""

import logging
from pathlib import Path
from typing import Optional

from osclan_asm.config import FrontendConfig
from osclan_asm.assembler.ast import Node
from osclan_asm.assembler.lexer import Lexer, Token
from osclan_asm.assembler.parser import Parser
from osclan_asm.assembler.registry import DEFAULT_REGISTRY, InstructionRegistry

logger = logging.getLogger(__name__)


class Frontend:
    """
    Lexer + parser pipeline for one source at a time.

    Each call owns its own lexer and parser, so a Frontend holds no state
    between calls.

    Attributes:
        config: Active FrontendConfig
        registry: Instruction registry consulted by the parser
    """

    def __init__(
        self,
        config: Optional[FrontendConfig] = None,
        registry: Optional[InstructionRegistry] = None,
    ):
        self.config = config if config is not None else FrontendConfig()
        self.registry = registry if registry is not None else DEFAULT_REGISTRY

    def tokenize_string(self, source: str, filename: Optional[str] = None) -> list[Token]:
        """
        Tokenize source text.

        Raises:
            LexicalError: On the first lexical error
        """
        filename = filename or self.config.default_filename
        return Lexer(source, filename).tokenize()

    def parse_string(self, source: str, filename: Optional[str] = None) -> Node:
        """
        Tokenize and parse source text.

        Returns:
            Root node of the syntax tree

        Raises:
            AssemblerError: On the first lexical or syntax error
        """
        filename = filename or self.config.default_filename
        tokens = self.tokenize_string(source, filename)
        parser = Parser(
            tokens,
            registry=self.registry,
            filename=filename,
            strict=self.config.strict_operands,
        )
        return parser.parse()

    def read_file(self, filepath: str | Path) -> str:
        """
        Read a source file with the configured encoding.

        Raises:
            FileNotFoundError: If the source file does not exist
        """
        filepath = Path(filepath)
        source = filepath.read_text(encoding=self.config.encoding)
        logger.debug(f"Read {len(source)} characters from {filepath}")
        return source

    def tokenize_file(self, filepath: str | Path) -> list[Token]:
        return self.tokenize_string(self.read_file(filepath), str(filepath))

    def parse_file(self, filepath: str | Path) -> Node:
        """
        Tokenize and parse a source file.

        Raises:
            AssemblerError: On the first lexical or syntax error
            FileNotFoundError: If the source file does not exist
        """
        return self.parse_string(self.read_file(filepath), str(filepath))


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str, filename: str = "<input>") -> list[Token]:
    """Convenience function to tokenize source text."""
    return Lexer(source, filename).tokenize()


def parse(source: str, filename: str = "<input>", strict: bool = False) -> Node:
    """
    Convenience function to tokenize and parse source text.

    Args:
        source: Assembly source text
        filename: Name used in error messages
        strict: Reject operand lists that match no registered shape

    Returns:
        Root node of the syntax tree
    """
    frontend = Frontend(FrontendConfig(strict_operands=strict))
    return frontend.parse_string(source, filename)
