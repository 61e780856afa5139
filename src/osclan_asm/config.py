"""
Front End Configuration
=======================

Settings for the lexer/parser pipeline. Configuration can come from:
- Default values (defined here)
- Environment variables (FrontendConfig.from_env)
- Command-line flags (applied by the osasm CLI on top of the above)
"""

from dataclasses import dataclass
import codecs
import os

# Environment variable values treated as "enabled"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass
class FrontendConfig:
    """
    Configuration for tokenizing and parsing.

    Attributes:
        strict_operands: Reject operand lists that match none of the
                         instruction's registered shapes (default: False)
        default_filename: Name used in messages for in-memory sources
        encoding: Text encoding used when reading source files
    """

    strict_operands: bool = False
    default_filename: str = "<input>"
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "FrontendConfig":
        """
        Create FrontendConfig from environment variables.

        Environment variables (all optional):
            OSCLAN_ASM_STRICT: Enable strict operand checking (1/true/yes/on)
            OSCLAN_ASM_ENCODING: Source file encoding (e.g., "latin-1")

        Invalid values are ignored and the default is kept.
        """
        config = cls()

        if strict := os.environ.get("OSCLAN_ASM_STRICT"):
            value = strict.strip().lower()
            if value in _TRUE_VALUES:
                config.strict_operands = True
            elif value in _FALSE_VALUES:
                config.strict_operands = False

        if encoding := os.environ.get("OSCLAN_ASM_ENCODING"):
            try:
                codecs.lookup(encoding)
            except LookupError:
                pass  # Ignore unknown encodings
            else:
                config.encoding = encoding

        return config
