"""
Osclan Assembler Command-Line Interface
=======================================

This package provides the osasm command, a Click application that
tokenizes and parses one assembly source file and prints the token list
or syntax tree.
"""

__all__ = ["osasm"]
