"""Lexer, token types and interactive prompt for the Opal programming language."""

__version__ = "0.1.0"