"""
Register Name Classification
============================

The lexer emits every bare word as an IDENTIFIER, so the parser needs a
textual rule to tell register references from label references. A word is
a register when, ignoring case, it starts with R, W or X and the rest is
either all decimal digits (possibly none) or "zr":

    X0, x30, W12, R7, XZR, wzr, X   -> registers
    loop, X1a, WSP, SP              -> not registers

A bare prefix letter classifies as a register but carries no index, so
parse_register() rejects it.

The rule is a pure function of the text, kept apart from the lexer so it
can be tested on its own and replaced by a stricter grammar later.
"""

from dataclasses import dataclass

# Register width prefixes (R = generic, W = 32-bit, X = 64-bit)
REGISTER_PREFIXES = frozenset({"R", "W", "X"})

# Index the zero register decodes to
ZERO_REGISTER = 31


def is_register(text: str) -> bool:
    """
    Check whether an identifier names a register.

    Args:
        text: Identifier text as written in the source

    Returns:
        True if the text follows the register naming rule
    """
    if not text or text[0].upper() not in REGISTER_PREFIXES:
        return False

    rest = text[1:]
    if rest.lower() == "zr":
        return True
    # A bare prefix ("X") has an empty remainder and still counts
    return rest.isascii() and (rest == "" or rest.isdigit())


@dataclass(frozen=True)
class Register:
    """
    A decoded register reference.

    Attributes:
        width: Uppercase prefix letter ('R', 'W' or 'X')
        number: Register index (the zero register is 31)
    """
    width: str
    number: int

    @property
    def is_zero(self) -> bool:
        return self.number == ZERO_REGISTER

    def __str__(self) -> str:
        return f"{self.width}{self.number}"


def parse_register(text: str) -> Register:
    """
    Decode a register name into width and index.

    Raises:
        ValueError: If the text is not a register name, or is a bare
                    prefix letter with no index
    """
    if not is_register(text):
        raise ValueError(f"not a register: {text!r}")

    rest = text[1:]
    if not rest:
        raise ValueError(f"register has no index: {text!r}")
    number = ZERO_REGISTER if rest.lower() == "zr" else int(rest)
    return Register(width=text[0].upper(), number=number)
