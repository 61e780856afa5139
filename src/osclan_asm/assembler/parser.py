"""
AArch64 Assembly Language Parser
================================

This module implements a recursive-descent parser that turns the lexer's
token list into a syntax tree (see ast.py). Every non-empty line becomes
one child of the Root node.

Statement Types
---------------
1. **Label definition**: identifier followed by a colon
   ```asm
   loop:
   ```

2. **Instruction**: known mnemonic with comma-separated operands
   ```asm
   MOV X0, #16
   MOV X1, buffer
   RET
   ```

3. **Directive**: '.' name with exactly one operand
   ```asm
   .word #5
   .global main
   ```

Blank lines are skipped.

Operand Classification
----------------------
| Token                        | Node kind  |
|------------------------------|------------|
| identifier naming a register | Register   |
| any other identifier         | Label      |
| number                       | Immediate  |

Parsing is fail-fast: the first malformed statement raises an
AssemblySyntaxError subclass and no tree is returned.

Operand shapes from the instruction registry are descriptive by default.
With ``strict=True`` the parser also rejects operand lists that match none
of the mnemonic's shapes.
"""

import logging
from typing import Optional

from osclan_asm.errors import (
    DirectiveNewlineError,
    ExpectedCommaError,
    ExpectedNewlineError,
    OperandShapeError,
    Position,
    UnexpectedDirectiveOperandError,
    UnexpectedEndOfInputError,
    UnexpectedOperandError,
    UnexpectedTokenError,
    UnknownInstructionError,
)
from osclan_asm.assembler.ast import Node, NodeKind
from osclan_asm.assembler.lexer import Token, TokenKind
from osclan_asm.assembler.registers import is_register
from osclan_asm.assembler.registry import (
    DEFAULT_REGISTRY,
    InstructionRegistry,
    OperandKind,
    format_shape,
)

logger = logging.getLogger(__name__)

# Operand node kinds and the registry kinds they satisfy
_OPERAND_KINDS = {
    NodeKind.REGISTER: OperandKind.REGISTER,
    NodeKind.IMMEDIATE: OperandKind.IMMEDIATE,
    NodeKind.LABEL: OperandKind.LABEL,
}


class Parser:
    """
    Parses a token list into a syntax tree.

    Usage:
        tokens = Lexer(source, filename).tokenize()
        root = Parser(tokens, filename=filename).parse()
    """

    def __init__(
        self,
        tokens: list[Token],
        registry: Optional[InstructionRegistry] = None,
        filename: str = "<input>",
        strict: bool = False,
    ):
        """
        Initialize the parser.

        Args:
            tokens: Tokens from the lexer
            registry: Known instructions (default: DEFAULT_REGISTRY)
            filename: Source filename for error reporting
            strict: Reject operand lists that match no registered shape
        """
        self._tokens = tokens
        self._registry = registry if registry is not None else DEFAULT_REGISTRY
        self._filename = filename
        self._strict = strict
        self._pos = 0

    def parse(self) -> Node:
        """
        Parse all tokens.

        Returns:
            Root node with one child per statement

        Raises:
            AssemblySyntaxError: On the first malformed statement
        """
        self._pos = 0
        root = Node.root()

        while not self._at_end():
            if self._check(TokenKind.NEWLINE):
                self._advance()
                continue
            root.add_child(self._parse_statement())

        logger.debug(f"Parsed {self._filename}: {len(root.children)} statements")
        return root

    # =========================================================================
    # Token Navigation
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _current(self) -> Token:
        return self._tokens[self._pos]

    def _peek(self, offset: int = 0) -> Optional[Token]:
        """Look ahead at a token, or None past the end."""
        pos = self._pos + offset
        if pos >= len(self._tokens):
            return None
        return self._tokens[pos]

    def _advance(self) -> Token:
        token = self._current()
        self._pos += 1
        return token

    def _check(self, *kinds: TokenKind) -> bool:
        """Check if the current token is one of the given kinds."""
        return not self._at_end() and self._current().kind in kinds

    def _match(self, *kinds: TokenKind) -> Optional[Token]:
        if self._check(*kinds):
            return self._advance()
        return None

    def _at_statement_end(self) -> bool:
        return self._at_end() or self._check(TokenKind.NEWLINE)

    def _last_position(self) -> Position:
        """Position of the last consumed token, for end-of-input errors."""
        if self._pos > 0:
            return self._tokens[self._pos - 1].position
        return Position(1, 0)

    def _require(self, expected: str) -> Token:
        """Return the current token, raising if the input has ended."""
        if self._at_end():
            raise UnexpectedEndOfInputError(
                f"unexpected end of input, expected {expected}",
                position=self._last_position(),
                filename=self._filename,
            )
        return self._current()

    # =========================================================================
    # Statement Parsing
    # =========================================================================

    def _parse_statement(self) -> Node:
        token = self._current()

        if token.kind == TokenKind.IDENTIFIER:
            following = self._peek(1)
            if following is not None and following.kind == TokenKind.COLON:
                return self._parse_label()
            return self._parse_instruction()

        if token.kind == TokenKind.DIRECTIVE:
            return self._parse_directive()

        raise UnexpectedTokenError(
            f"unexpected {token.kind} at start of statement",
            position=token.position,
            filename=self._filename,
        )

    def _parse_label(self) -> Node:
        """Parse 'name:'. The rest of the line is parsed as its own statement."""
        name = self._advance()
        self._advance()  # consume colon
        return Node(NodeKind.LABEL, name.text, position=name.position)

    # =========================================================================
    # Instruction Parsing
    # =========================================================================

    def _parse_instruction(self) -> Node:
        token = self._advance()
        spec = self._registry.get(token.text)
        if spec is None:
            known = ", ".join(sorted(self._registry.mnemonics))
            raise UnknownInstructionError(
                token.text,
                position=token.position,
                filename=self._filename,
                hint=f"known instructions: {known}",
            )

        node = Node(NodeKind.INSTRUCTION, spec.mnemonic, position=token.position)

        # A comma directly before the newline (or end of input) ends the list
        while not self._at_statement_end():
            operand = node.add_child(self._parse_operand())
            if self._at_statement_end():
                break
            if not self._check(TokenKind.COMMA):
                raise ExpectedCommaError(
                    f"expected ',' after operand, found {self._current().kind}",
                    position=operand.position,
                    filename=self._filename,
                )
            self._advance()  # consume comma

        if self._strict:
            self._check_operand_shape(node)

        self._end_statement()
        return node

    def _parse_operand(self) -> Node:
        token = self._require("operand")

        if token.kind == TokenKind.IDENTIFIER:
            kind = NodeKind.REGISTER if is_register(token.text) else NodeKind.LABEL
        elif token.kind == TokenKind.NUMBER:
            kind = NodeKind.IMMEDIATE
        else:
            raise UnexpectedOperandError(
                f"unexpected {token.kind} used as operand",
                position=token.position,
                filename=self._filename,
            )

        self._advance()
        return Node(kind, token.text, position=token.position)

    def _check_operand_shape(self, node: Node) -> None:
        kinds = tuple(_OPERAND_KINDS[child.kind] for child in node.children)
        if self._registry.accepts(node.value, kinds):
            return

        shapes = self._registry.lookup(node.value) or ()
        raise OperandShapeError(
            node.value,
            format_shape(kinds),
            [format_shape(shape) for shape in shapes],
            position=node.position,
            filename=self._filename,
        )

    def _end_statement(self) -> None:
        """Consume the newline ending a statement; end of input also ends it."""
        if self._at_end():
            return
        # Unreachable after an operand list, which only stops at a newline or EOF
        if not self._match(TokenKind.NEWLINE):
            raise ExpectedNewlineError(
                f"expected newline, found {self._current().kind}",
                position=self._current().position,
                filename=self._filename,
            )

    # =========================================================================
    # Directive Parsing
    # =========================================================================

    def _parse_directive(self) -> Node:
        """Parse '.name operand' followed by a mandatory newline."""
        token = self._advance()
        node = Node(NodeKind.DIRECTIVE, token.text, position=token.position)

        operand = self._require(f"operand after directive '.{token.text}'")
        if operand.kind == TokenKind.IDENTIFIER:
            kind = NodeKind.LABEL
        elif operand.kind == TokenKind.NUMBER:
            kind = NodeKind.IMMEDIATE
        else:
            raise UnexpectedDirectiveOperandError(
                f"unexpected {operand.kind} used as operand of '.{token.text}'",
                position=operand.position,
                filename=self._filename,
            )
        self._advance()
        node.add_child(Node(kind, operand.text, position=operand.position))

        if self._at_end():
            raise DirectiveNewlineError(
                f"expected newline after '.{token.text}' operand, found end of input",
                position=operand.position,
                filename=self._filename,
            )
        if not self._match(TokenKind.NEWLINE):
            raise DirectiveNewlineError(
                f"expected newline after '.{token.text}' operand, "
                f"found {self._current().kind}",
                position=self._current().position,
                filename=self._filename,
            )

        return node


# =============================================================================
# Convenience Functions
# =============================================================================

def parse_tokens(
    tokens: list[Token],
    filename: str = "<input>",
    registry: Optional[InstructionRegistry] = None,
    strict: bool = False,
) -> Node:
    """
    Convenience function to parse a token list.

    Returns:
        Root node of the syntax tree
    """
    return Parser(tokens, registry=registry, filename=filename, strict=strict).parse()
