"""
AArch64 Instruction Registry
============================

This module defines the instructions the assembler recognizes and the
operand shapes each one accepts. The table is plain literal data, built
once at import time and never modified afterwards.

Operand Shapes
--------------
A shape is an ordered sequence of operand kinds. An instruction may accept
several alternative shapes; an empty set of shapes means the instruction
takes no operands.

| Mnemonic | Accepted shapes                                  |
|----------|--------------------------------------------------|
| MOV      | register, immediate / register, label            |
| ADD      | register, register, register / ..., immediate    |
| SVC      | immediate                                        |
| BL       | (none)                                           |
| RET      | (none)                                           |

Mnemonic lookup is case-insensitive: ``mov``, ``Mov`` and ``MOV`` are the
same instruction.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional


# =============================================================================
# Operand Kind Enumeration
# =============================================================================

class OperandKind(Enum):
    """Kinds of instruction operands."""
    REGISTER = auto()   # X0, W1, XZR
    IMMEDIATE = auto()  # #42
    LABEL = auto()      # loop

    def __str__(self) -> str:
        return self.name.lower()


Shape = tuple[OperandKind, ...]


def format_shape(shape: Shape) -> str:
    """Render a shape as 'register, immediate' (or 'no operands')."""
    if not shape:
        return "no operands"
    return ", ".join(str(kind) for kind in shape)


# =============================================================================
# Instruction Specification
# =============================================================================

@dataclass(frozen=True)
class InstructionSpec:
    """
    A registered instruction.

    Attributes:
        mnemonic: Canonical (uppercase) mnemonic
        operand_shapes: Alternative operand sequences; empty means no operands
    """
    mnemonic: str
    operand_shapes: tuple[Shape, ...] = ()

    def accepts(self, kinds: Iterable[OperandKind]) -> bool:
        """Check an operand kind sequence against the accepted shapes."""
        kinds = tuple(kinds)
        if not self.operand_shapes:
            return not kinds
        return kinds in self.operand_shapes


_R = OperandKind.REGISTER
_I = OperandKind.IMMEDIATE
_L = OperandKind.LABEL

# =============================================================================
# Instruction Table
# =============================================================================

INSTRUCTION_TABLE: tuple[InstructionSpec, ...] = (
    InstructionSpec("MOV", ((_R, _I), (_R, _L))),
    InstructionSpec("ADD", ((_R, _R, _R), (_R, _R, _I))),
    InstructionSpec("SVC", ((_I,),)),
    InstructionSpec("BL"),
    InstructionSpec("RET"),
)


# =============================================================================
# Registry
# =============================================================================

class InstructionRegistry:
    """
    Read-only mnemonic lookup table.

    Usage:
        registry = InstructionRegistry(INSTRUCTION_TABLE)
        if "mov" in registry:
            shapes = registry.lookup("mov")
    """

    def __init__(self, specs: Iterable[InstructionSpec]):
        self._specs: dict[str, InstructionSpec] = {}
        for spec in specs:
            key = spec.mnemonic.upper()
            if key in self._specs:
                raise ValueError(f"duplicate mnemonic '{key}'")
            self._specs[key] = spec

    def get(self, mnemonic: str) -> Optional[InstructionSpec]:
        """Return the full specification for a mnemonic, or None."""
        return self._specs.get(mnemonic.upper())

    def lookup(self, mnemonic: str) -> Optional[tuple[Shape, ...]]:
        """
        Look up the accepted operand shapes of a mnemonic.

        Returns:
            The shapes (empty tuple for no-operand instructions), or None
            if the mnemonic is unknown
        """
        spec = self.get(mnemonic)
        return spec.operand_shapes if spec is not None else None

    def contains(self, mnemonic: str) -> bool:
        return mnemonic.upper() in self._specs

    def accepts(self, mnemonic: str, kinds: Iterable[OperandKind]) -> bool:
        """
        Check an operand kind sequence against a mnemonic's shapes.

        Unknown mnemonics accept nothing.
        """
        spec = self.get(mnemonic)
        return spec is not None and spec.accepts(kinds)

    @property
    def mnemonics(self) -> frozenset[str]:
        return frozenset(self._specs)

    def __contains__(self, mnemonic: object) -> bool:
        return isinstance(mnemonic, str) and self.contains(mnemonic)

    def __len__(self) -> int:
        return len(self._specs)


DEFAULT_REGISTRY = InstructionRegistry(INSTRUCTION_TABLE)
