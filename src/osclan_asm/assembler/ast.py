"""
Syntax Tree
===========

The parser produces a single rooted tree of Node objects. The root's
children are the top-level statements in source order:

    Root
    ├── Label 'loop'
    ├── Instruction 'MOV'
    │   ├── Register 'X0'
    │   └── Immediate '16'
    └── Directive 'word'
        └── Immediate '5'

Each node owns its children outright; nodes are never shared between
parents. Once the parser returns the tree, consumers only read it.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Optional

from osclan_asm.errors import Position
from osclan_asm.assembler.registers import Register, parse_register


class NodeKind(Enum):
    """Syntax tree node kinds."""
    ROOT = auto()
    INSTRUCTION = auto()
    DIRECTIVE = auto()
    LABEL = auto()
    REGISTER = auto()
    IMMEDIATE = auto()

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass
class Node:
    """
    A syntax tree node.

    Attributes:
        kind: The NodeKind classification
        value: Mnemonic, directive name, label name, register name, or
               decimal digits of an immediate; empty for the root
        children: Child nodes in source order
        position: Source position of the token that produced the node
                  (ignored when comparing nodes)
    """
    kind: NodeKind
    value: str = ""
    children: list["Node"] = field(default_factory=list)
    position: Optional[Position] = field(default=None, compare=False)

    @classmethod
    def root(cls) -> "Node":
        return cls(NodeKind.ROOT)

    def add_child(self, child: "Node") -> "Node":
        """Append a child and return it."""
        self.children.append(child)
        return child

    def walk(self) -> Iterator["Node"]:
        """Yield this node and all descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    @property
    def immediate(self) -> int:
        """Integer value of an Immediate node."""
        if self.kind is not NodeKind.IMMEDIATE:
            raise TypeError(f"{self.kind} node has no immediate value")
        return int(self.value)

    @property
    def register(self) -> Register:
        """Decoded register of a Register node."""
        if self.kind is not NodeKind.REGISTER:
            raise TypeError(f"{self.kind} node is not a register")
        return parse_register(self.value)

    def pretty(self, indent: int = 0) -> str:
        """Render the subtree as indented text, one node per line."""
        pad = "  " * indent
        line = f"{pad}{self.kind}"
        if self.value:
            line += f" {self.value!r}"
        if self.position is not None:
            line += f" @{self.position}"
        lines = [line]
        for child in self.children:
            lines.append(child.pretty(indent + 1))
        return "\n".join(lines)
