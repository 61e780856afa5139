"""
AArch64 Assembly Language Lexer
===============================

This module implements the lexer (tokenizer) for the reduced AArch64
assembly syntax. It converts source text into a list of positioned tokens
that the parser can process.

Token Kinds
-----------
- IDENTIFIER: Mnemonics, register names, label names
- DIRECTIVE: '.' followed by a name (text excludes the '.')
- NUMBER: '#' followed by a literal, decoded to a decimal string
- COMMA, COLON: Delimiters (empty text)
- NEWLINE: End of line (significant for statement boundaries)

The lexer does not tell registers from labels: every bare word is an
IDENTIFIER, and the parser classifies it.

Number Formats
--------------
| Format      | Prefix | Example   | Token text |
|-------------|--------|-----------|------------|
| Decimal     | (none) | #123      | "123"      |
| Hexadecimal | 0x     | #0x1F     | "31"       |
| Binary      | 0b     | #0b101    | "5"        |

Comments
--------
A semicolon starts a comment that runs up to and including the next
newline, so no NEWLINE token is produced for a commented line.

Example
-------
>>> from osclan_asm.assembler.lexer import Lexer
>>> for token in Lexer("loop: MOV X0, #0x10\\n").tokenize():
...     print(token)
Token(IDENTIFIER, 'loop', 1:0)
Token(COLON, 1:4)
Token(IDENTIFIER, 'MOV', 1:6)
Token(IDENTIFIER, 'X0', 1:10)
Token(COMMA, 1:12)
Token(NUMBER, '16', 1:14)
Token(NEWLINE, 1:19)
"""

import logging
import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from osclan_asm.errors import (
    InvalidNumberError,
    Position,
    UnexpectedCharacterError,
)

logger = logging.getLogger(__name__)

# Largest value a '#' literal may decode to (signed 64-bit)
MAX_IMMEDIATE = 2**63 - 1


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for the assembly language.

    LABEL, LBRACKET, RBRACKET and EXCLAMATION_MARK are reserved for
    addressing syntax and are never produced by the current lexer.
    """

    IDENTIFIER = auto()   # Mnemonics, registers, labels
    DIRECTIVE = auto()    # .word, .global
    NUMBER = auto()       # #42, #0x2A, #0b101010
    COMMA = auto()        # ,
    COLON = auto()        # :
    NEWLINE = auto()      # \n

    # Reserved
    LABEL = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    EXCLAMATION_MARK = auto()

    def __str__(self) -> str:
        """Return human-readable name for error messages."""
        return self.name.lower().replace("_", " ")


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    Represents a single token from the source code.

    Attributes:
        kind: The TokenKind classification
        text: Identifier/directive name, or decoded decimal digits for
              numbers; empty for delimiters and newlines
        position: Position of the token's first character
    """
    kind: TokenKind
    text: str
    position: Position

    def __repr__(self) -> str:
        if self.text:
            return f"Token({self.kind.name}, {self.text!r}, {self.position})"
        return f"Token({self.kind.name}, {self.position})"

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes assembly source code.

    Lexing is fail-fast: the first invalid literal or unexpected character
    raises, and no partial token list is returned.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = lexer.tokenize()

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
    """

    SINGLE_CHAR_TOKENS = {
        ",": TokenKind.COMMA,
        ":": TokenKind.COLON,
    }

    # Valid digits per literal base
    DIGITS = {
        2: "01",
        10: string.digits,
        16: string.hexdigits.lower(),
    }

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename
        self._reset()

    def _reset(self) -> None:
        self._pos = 0
        self._line = 1
        self._column = 0
        self._line_start_pos = 0

    def tokenize(self) -> list[Token]:
        """
        Tokenize the whole source.

        Each call starts over from the first character, so repeated calls
        return identical lists.

        Returns:
            The tokens in source order

        Raises:
            LexicalError: On an invalid numeric literal or unexpected character
        """
        self._reset()
        tokens = list(self._scan())
        logger.debug(f"Tokenized {self.filename}: {len(tokens)} tokens")
        return tokens

    def _scan(self) -> Iterator[Token]:
        while not self._at_end():
            char = self._peek()

            if char == ";":
                self._skip_comment()
                continue

            if char != "\n" and char.isspace():
                self._advance()
                continue

            yield self._scan_token()

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self) -> str:
        """Current character, or empty string at end of source."""
        if self._at_end():
            return ""
        return self.source[self._pos]

    def _advance(self) -> str:
        """
        Consume and return the current character.

        Updates line and column tracking.
        """
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 0
            self._line_start_pos = self._pos
        else:
            self._column += 1

        return char

    def _position(self) -> Position:
        return Position(self._line, self._column)

    def _current_line(self, start: int) -> str:
        line_end = self.source.find("\n", start)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[start:line_end]

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _skip_comment(self) -> None:
        """Skip a ';' comment up to and including the next newline."""
        while not self._at_end() and self._peek() != "\n":
            self._advance()
        self._advance()

    def _scan_token(self) -> Token:
        start = self._position()
        char = self._peek()

        if char == "\n":
            self._advance()
            return Token(TokenKind.NEWLINE, "", start)

        if self._is_word_char(char) and not char.isdigit():
            return Token(TokenKind.IDENTIFIER, self._scan_word(), start)

        if char == ".":
            self._advance()
            return Token(TokenKind.DIRECTIVE, self._scan_word(), start)

        if char == "#":
            return self._scan_number(start)

        if char in self.SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(self.SINGLE_CHAR_TOKENS[char], "", start)

        raise UnexpectedCharacterError(
            char,
            position=start,
            filename=self.filename,
            source_line=self._current_line(self._line_start_pos),
        )

    @staticmethod
    def _is_word_char(char: str) -> bool:
        return char.isalnum() or char == "_"

    def _scan_word(self) -> str:
        """Greedily consume identifier characters."""
        chars = []
        while self._peek() and self._is_word_char(self._peek()):
            chars.append(self._advance())
        return "".join(chars)

    def _scan_number(self, start: Position) -> Token:
        """
        Scan a '#' literal and decode it to decimal text.

        All alphanumeric characters after '#' form the raw literal so that
        0x/0b prefixes and hex digits are captured in one piece.
        """
        line_start = self._line_start_pos
        self._advance()  # consume #

        chars = []
        while self._peek() and self._peek().isalnum():
            chars.append(self._advance())
        literal = "".join(chars)

        value = self._decode_number(literal, start, line_start)
        return Token(TokenKind.NUMBER, str(value), start)

    def _decode_number(self, literal: str, start: Position, line_start: int) -> int:
        def invalid(reason: str) -> InvalidNumberError:
            return InvalidNumberError(
                literal,
                position=start,
                filename=self.filename,
                reason=reason,
                source_line=self._current_line(line_start),
            )

        if not literal:
            raise invalid("expected digits after '#'")
        if not literal.isascii():
            raise invalid("non-ASCII digits")

        prefix = literal[:2].lower()
        if prefix == "0x":
            base, digits, name = 16, literal[2:], "hexadecimal"
        elif prefix == "0b":
            base, digits, name = 2, literal[2:], "binary"
        else:
            base, digits, name = 10, literal, "decimal"

        # int() would also accept a second base prefix ("0x0x1F")
        if not digits or any(c not in self.DIGITS[base] for c in digits.lower()):
            raise invalid(f"not a valid {name} number")

        value = int(digits, base)

        if value > MAX_IMMEDIATE:
            raise invalid("value does not fit in 64 bits")

        return value
