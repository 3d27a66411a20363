"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto


class TokenType(IntEnum):
    """Every kind of token; values are consecutive integers from zero."""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return count

    # Keywords
    CLASS = auto()
    FN = auto()
    IF = auto()
    ELIF = auto()
    ELSE = auto()
    WHILE = auto()
    FOR = auto()
    FOREACH = auto()
    IN = auto()
    TRY = auto()
    CATCH = auto()
    FINALLY = auto()
    RET = auto()
    THIS = auto()
    CONST = auto()
    ENUM = auto()
    SWITCH = auto()
    CASE = auto()
    DEFAULT = auto()
    BREAK = auto()
    CONTINUE = auto()
    LOAD = auto()

    # Literals
    NUMBER = auto()
    STRING = auto()
    TRUE = auto()
    FALSE = auto()
    NIL = auto()

    # Identifiers
    IDENTIFIER = auto()

    # Basic operators
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    MODULO = auto()
    POWER = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    NOT = auto()
    NOT_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()
    AND = auto()
    OR = auto()
    INCREMENT = auto()
    DECREMENT = auto()
    RANGE = auto()

    # Assignment operators
    PLUS_EQUAL = auto()
    MINUS_EQUAL = auto()
    MULTIPLY_EQUAL = auto()
    DIVIDE_EQUAL = auto()
    MODULO_EQUAL = auto()
    POWER_EQUAL = auto()
    AND_EQUAL = auto()
    OR_EQUAL = auto()
    XOR_EQUAL = auto()
    SHIFT_LEFT_EQUAL = auto()
    SHIFT_RIGHT_EQUAL = auto()

    # Bitwise operators
    BITWISE_AND = auto()
    BITWISE_OR = auto()
    BITWISE_XOR = auto()
    BITWISE_NOT = auto()
    SHIFT_LEFT = auto()
    SHIFT_RIGHT = auto()

    # Delimiters
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    COMMA = auto()
    DOT = auto()
    COLON = auto()
    SEMICOLON = auto()

    # Special tokens
    COMMENT = auto()
    EOF_TOKEN = auto()
    ERROR = auto()


@dataclass(frozen=True)
class Token:
    """A scanned token with its text and the position where it starts."""

    type: TokenType
    value: str
    line: int
    column: int