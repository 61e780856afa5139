# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the assembly lexer/tokenizer.
#
# Test coverage includes:
#   - Token kinds: identifiers, directives, numbers, delimiters, newlines
#   - Number formats: decimal, hexadecimal (0x), binary (0b)
#   - Comments and whitespace handling
#   - Position tracking (1-indexed lines, 0-indexed columns)
#   - Error conditions
# =============================================================================

import pytest
from osclan_asm.assembler.lexer import Lexer, Token, TokenKind, MAX_IMMEDIATE
from osclan_asm.errors import (
    InvalidNumberError,
    LexicalError,
    Position,
    UnexpectedCharacterError,
)


# =============================================================================
# Helper Functions
# =============================================================================

def tokenize(source: str) -> list[Token]:
    return Lexer(source, "<test>").tokenize()


def kinds(source: str) -> list[TokenKind]:
    return [t.kind for t in tokenize(source)]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition for simple inputs."""

    def test_empty_source(self):
        """Empty source produces no tokens."""
        assert tokenize("") == []

    def test_whitespace_only(self):
        """Spaces, tabs and carriage returns produce no tokens."""
        assert tokenize("   \t  \r ") == []

    def test_instruction_line(self):
        """A complete instruction line."""
        tokens = tokenize("MOV R0, #5\n")
        assert [t.kind for t in tokens] == [
            TokenKind.IDENTIFIER,
            TokenKind.IDENTIFIER,
            TokenKind.COMMA,
            TokenKind.NUMBER,
            TokenKind.NEWLINE,
        ]
        assert [t.text for t in tokens] == ["MOV", "R0", "", "5", ""]

    def test_instruction_line_positions(self):
        """Each token is positioned at its first character."""
        tokens = tokenize("MOV R0, #5\n")
        assert [t.position for t in tokens] == [
            Position(1, 0),
            Position(1, 4),
            Position(1, 6),
            Position(1, 8),
            Position(1, 10),
        ]

    def test_identifier_with_underscore_and_digits(self):
        """Identifiers may contain underscores and digits."""
        tokens = tokenize("_start loop_1")
        assert [t.text for t in tokens] == ["_start", "loop_1"]
        assert all(t.kind == TokenKind.IDENTIFIER for t in tokens)

    def test_registers_are_identifiers(self):
        """The lexer does not single out register names."""
        tokens = tokenize("X0 wzr r12")
        assert all(t.kind == TokenKind.IDENTIFIER for t in tokens)

    def test_label_definition(self):
        """A label is an identifier followed by a colon."""
        tokens = tokenize("loop:")
        assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER, TokenKind.COLON]
        assert tokens[1].text == ""
        assert tokens[1].position == Position(1, 4)

    def test_directive(self):
        """Directive text excludes the leading dot."""
        tokens = tokenize(".word")
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.DIRECTIVE
        assert tokens[0].text == "word"
        assert tokens[0].position == Position(1, 0)

    def test_bare_dot_directive(self):
        """A lone dot is a directive with empty text."""
        tokens = tokenize(". ")
        assert tokens[0].kind == TokenKind.DIRECTIVE
        assert tokens[0].text == ""

    def test_reserved_kinds_are_never_produced(self):
        """Reserved token kinds don't appear in lexer output."""
        reserved = {
            TokenKind.LABEL,
            TokenKind.LBRACKET,
            TokenKind.RBRACKET,
            TokenKind.EXCLAMATION_MARK,
        }
        produced = set(kinds("start: MOV X0, #1\n.word #2\nloop\n"))
        assert not produced & reserved


# =============================================================================
# Number Format Tests
# =============================================================================

class TestNumberFormats:
    """Test '#' literal decoding."""

    @pytest.mark.parametrize("source,expected", [
        ("#42", "42"),
        ("#0", "0"),
        ("#007", "7"),
        ("#0x1F", "31"),
        ("#0x1f", "31"),
        ("#0X1F", "31"),
        ("#0b101", "5"),
        ("#0B11", "3"),
        ("#0xDEADBEEF", "3735928559"),
    ])
    def test_decoded_to_decimal(self, source, expected):
        """Literals are rendered as decimal text."""
        tokens = tokenize(source)
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.NUMBER
        assert tokens[0].text == expected

    def test_number_position_is_hash(self):
        """The token is positioned at the '#'."""
        tokens = tokenize("  #0x10")
        assert tokens[0].position == Position(1, 2)

    def test_largest_value(self):
        """The signed 64-bit maximum is accepted."""
        tokens = tokenize("#0x7FFFFFFFFFFFFFFF")
        assert tokens[0].text == str(MAX_IMMEDIATE)

    def test_overflow(self):
        """Values beyond signed 64 bits are rejected."""
        with pytest.raises(InvalidNumberError, match="64 bits"):
            tokenize("#0x8000000000000000")

    @pytest.mark.parametrize("source,literal", [
        ("#0xZZ", "0xZZ"),
        ("#0b102", "0b102"),
        ("#12ab", "12ab"),
        ("#0x", "0x"),
        ("#0b", "0b"),
        ("#0x0x1F", "0x0x1F"),
    ])
    def test_invalid_literal(self, source, literal):
        """Literals that don't decode raise InvalidNumberError."""
        with pytest.raises(InvalidNumberError) as exc_info:
            tokenize(source)
        assert exc_info.value.literal == literal
        assert f"#{literal}" in exc_info.value.message

    def test_empty_literal(self):
        """'#' without digits is an invalid literal."""
        with pytest.raises(InvalidNumberError) as exc_info:
            tokenize("MOV X0, #\n")
        assert exc_info.value.literal == ""
        assert exc_info.value.position == Position(1, 8)

    def test_literal_stops_at_delimiter(self):
        """A literal ends at the first non-alphanumeric character."""
        tokens = tokenize("#0x10,#2")
        assert [t.text for t in tokens] == ["16", "", "2"]


# =============================================================================
# Comment and Whitespace Tests
# =============================================================================

class TestComments:
    """Test ';' comment handling."""

    def test_full_line_comment(self):
        """A comment line contributes no tokens, including its newline."""
        tokens = tokenize("; header\nRET\n")
        assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER, TokenKind.NEWLINE]
        assert tokens[0].position == Position(2, 0)

    def test_comment_consumes_line_break(self):
        """A trailing comment swallows the newline that ends it."""
        tokens = tokenize("RET ; done\nBL\n")
        assert [t.text for t in tokens] == ["RET", "BL", ""]
        assert tokens[1].position == Position(2, 0)

    def test_comment_at_end_of_input(self):
        """A comment without a trailing newline ends the input."""
        tokens = tokenize("RET ; done")
        assert [t.text for t in tokens] == ["RET"]

    def test_comment_hides_invalid_characters(self):
        """Anything goes inside a comment."""
        assert kinds("; [x1]! @$%\n") == []

    def test_tab_and_carriage_return(self):
        """Tabs and carriage returns are skipped but still counted as columns."""
        tokens = tokenize("\tMOV\r\n")
        assert tokens[0].position == Position(1, 1)
        assert tokens[1].kind == TokenKind.NEWLINE
        assert tokens[1].position == Position(1, 5)


# =============================================================================
# Position Tracking Tests
# =============================================================================

class TestPositions:
    """Test line and column tracking."""

    def test_newline_advances_line(self):
        """Newlines are positioned on their own line, then reset the column."""
        tokens = tokenize("RET\n\nBL\n")
        assert [t.position for t in tokens] == [
            Position(1, 0),
            Position(1, 3),
            Position(2, 0),
            Position(3, 0),
            Position(3, 2),
        ]

    def test_positions_never_decrease(self):
        """Positions are monotonic over a file."""
        source = "start:\n  MOV X0, #0x10 ; set\n  .word #5\n\nRET\n"
        positions = [(t.line, t.column) for t in tokenize(source)]
        assert positions == sorted(positions)


# =============================================================================
# Error Condition Tests
# =============================================================================

class TestErrors:
    """Test lexical error conditions."""

    @pytest.mark.parametrize("char", ["[", "]", "!", "@", "$", "+", "-", "\"", "="])
    def test_unexpected_character(self, char):
        """Characters outside the syntax raise UnexpectedCharacterError."""
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            tokenize(f"MOV X0, {char}")
        assert exc_info.value.char == char
        assert exc_info.value.position == Position(1, 8)

    def test_leading_digit(self):
        """A bare number is not an identifier."""
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            tokenize("1abc")
        assert exc_info.value.char == "1"

    def test_error_on_later_line(self):
        """Errors report the line they occur on."""
        with pytest.raises(LexicalError) as exc_info:
            tokenize("RET\nRET\n  ?")
        assert exc_info.value.position == Position(3, 2)

    def test_error_message_format(self):
        """Errors show file, position, source line and caret."""
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            Lexer("MOV X0, @\n", "prog.s").tokenize()

        lines = str(exc_info.value).split("\n")
        assert lines[0] == "prog.s:1:8: error: unexpected character '@'"
        assert lines[1] == "    MOV X0, @"
        assert lines[2] == " " * 12 + "^"


# =============================================================================
# Idempotence Tests
# =============================================================================

class TestIdempotence:
    """Tokenizing is repeatable."""

    SOURCE = "loop:\n  MOV X0, #0b11\n  .word #7\n  RET\n"

    def test_same_lexer_twice(self):
        """Calling tokenize() again restarts from the beginning."""
        lexer = Lexer(self.SOURCE)
        assert lexer.tokenize() == lexer.tokenize()

    def test_separate_lexers(self):
        """Independent lexers agree."""
        assert Lexer(self.SOURCE).tokenize() == Lexer(self.SOURCE).tokenize()

    def test_token_repr(self):
        """Tokens print with kind, text and position."""
        assert repr(Token(TokenKind.NUMBER, "5", Position(1, 8))) == "Token(NUMBER, '5', 1:8)"
        assert repr(Token(TokenKind.COMMA, "", Position(2, 3))) == "Token(COMMA, 2:3)"
