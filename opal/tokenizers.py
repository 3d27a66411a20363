"""Scanner state and the tokenizers that recognise each kind of token."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from opal.errors import ErrorLog
from opal.tokens import Token, TokenType

_NUL = "\0"

KEYWORDS: dict[str, TokenType] = {
    "class": TokenType.CLASS,
    "fn": TokenType.FN,
    "if": TokenType.IF,
    "elif": TokenType.ELIF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
    "foreach": TokenType.FOREACH,
    "in": TokenType.IN,
    "try": TokenType.TRY,
    "catch": TokenType.CATCH,
    "finally": TokenType.FINALLY,
    "ret": TokenType.RET,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "nil": TokenType.NIL,
    "and": TokenType.AND,
    "or": TokenType.OR,
    "not": TokenType.NOT,
    "const": TokenType.CONST,
    "enum": TokenType.ENUM,
    "switch": TokenType.SWITCH,
    "case": TokenType.CASE,
    "default": TokenType.DEFAULT,
    "break": TokenType.BREAK,
    "continue": TokenType.CONTINUE,
    "load": TokenType.LOAD,
}

OPERATORS: dict[str, TokenType] = {
    # Delimiters
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    # Arithmetic
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "%": TokenType.MODULO,
    "^": TokenType.POWER,
    # Comparison
    "=": TokenType.EQUAL,
    "!": TokenType.NOT,
    "<": TokenType.LESS,
    ">": TokenType.GREATER,
    "==": TokenType.EQUAL_EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "<=": TokenType.LESS_EQUAL,
    ">=": TokenType.GREATER_EQUAL,
    # Logical
    "&&": TokenType.AND,
    "||": TokenType.OR,
    # Increment / decrement
    "++": TokenType.INCREMENT,
    "--": TokenType.DECREMENT,
    # Range
    "..": TokenType.RANGE,
    # Bitwise
    "&": TokenType.BITWISE_AND,
    "|": TokenType.BITWISE_OR,
    "~": TokenType.BITWISE_NOT,
    "#": TokenType.BITWISE_XOR,
    "<<": TokenType.SHIFT_LEFT,
    ">>": TokenType.SHIFT_RIGHT,
    # Compound assignment
    "+=": TokenType.PLUS_EQUAL,
    "-=": TokenType.MINUS_EQUAL,
    "*=": TokenType.MULTIPLY_EQUAL,
    "/=": TokenType.DIVIDE_EQUAL,
    "%=": TokenType.MODULO_EQUAL,
    "^=": TokenType.POWER_EQUAL,
    "&=": TokenType.AND_EQUAL,
    "|=": TokenType.OR_EQUAL,
    "#=": TokenType.XOR_EQUAL,
    "<<=": TokenType.SHIFT_LEFT_EQUAL,
    ">>=": TokenType.SHIFT_RIGHT_EQUAL,
}


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"


def _is_alphanumeric(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


@dataclass
class ScanState:
    """Position in the source and the tokens produced so far."""

    source: str
    errors: ErrorLog = field(default_factory=ErrorLog)
    tokens: list[Token] = field(default_factory=list)
    start: int = 0
    current: int = 0
    line: int = 1
    column: int = 1

    def at_end(self) -> bool:
        """Whether every character has been consumed."""
        return self.current >= len(self.source)

    def peek(self) -> str:
        """The current character, or NUL at the end."""
        if self.at_end():
            return _NUL
        return self.source[self.current]

    def peek_next(self) -> str:
        """The character after the current one, or NUL past the end."""
        if self.current + 1 >= len(self.source):
            return _NUL
        return self.source[self.current + 1]

    def advance(self) -> str:
        """Consume and return the current character."""
        c = self.source[self.current]
        self.current += 1
        self.column += 1
        return c

    def add_token(self, type: TokenType, value: str | None = None) -> None:
        """Append a token; its text defaults to the span scanned since ``start``."""
        if value is None:
            value = self.source[self.start:self.current]
        column = self.column - (self.current - self.start)
        self.tokens.append(Token(type, value, self.line, column))


class Tokenizer(ABC):
    """Recognises one family of tokens."""

    @abstractmethod
    def can_handle(self, state: ScanState, c: str) -> bool:
        """Whether a token of this family starts at ``c``."""

    @abstractmethod
    def tokenize(self, state: ScanState) -> None:
        """Consume one token from the state and record it."""


class CommentTokenizer(Tokenizer):
    """Line comments and nestable block comments."""

    def can_handle(self, state: ScanState, c: str) -> bool:
        return c == "/" and state.peek_next() in ("/", "*")

    def tokenize(self, state: ScanState) -> None:
        state.advance()
        if state.peek() == "/":
            state.advance()
            self._single_line(state)
        elif state.peek() == "*":
            state.advance()
            self._multi_line(state)

    @staticmethod
    def _single_line(state: ScanState) -> None:
        while state.peek() != "\n" and not state.at_end():
            state.advance()
        state.add_token(TokenType.COMMENT)

    @staticmethod
    def _multi_line(state: ScanState) -> None:
        nesting = 1
        while nesting > 0 and not state.at_end():
            if state.peek() == "*" and state.peek_next() == "/":
                state.advance()
                state.advance()
                nesting -= 1
            elif state.peek() == "/" and state.peek_next() == "*":
                state.advance()
                state.advance()
                nesting += 1
            else:
                if state.peek() == "\n":
                    state.line += 1
                    state.column = 1
                state.advance()

        if nesting > 0:
            state.errors.lexer_error(state.line, state.column, "Unterminated multi-line comment")
            return
        state.add_token(TokenType.COMMENT)


class StringTokenizer(Tokenizer):
    """Double-quoted strings; the token holds the text between the quotes."""

    def can_handle(self, state: ScanState, c: str) -> bool:
        return c == '"'

    def tokenize(self, state: ScanState) -> None:
        state.advance()
        while state.peek() != '"' and not state.at_end():
            if state.peek() == "\n":
                state.line += 1
                state.column = 1
            state.advance()

        if state.at_end():
            state.errors.lexer_error(state.line, state.column, "Unterminated string")
            return

        state.advance()
        state.add_token(TokenType.STRING, state.source[state.start + 1:state.current - 1])


class NumberTokenizer(Tokenizer):
    """Integer and decimal literals."""

    def can_handle(self, state: ScanState, c: str) -> bool:
        return _is_digit(c)

    def tokenize(self, state: ScanState) -> None:
        while _is_digit(state.peek()):
            state.advance()
        if state.peek() == "." and _is_digit(state.peek_next()):
            state.advance()
            while _is_digit(state.peek()):
                state.advance()
        state.add_token(TokenType.NUMBER)


class OperatorTokenizer(Tokenizer):
    """Operators and delimiters, longest match first."""

    def can_handle(self, state: ScanState, c: str) -> bool:
        two = c + state.peek()
        three = two + state.peek_next()
        return c in OPERATORS or two in OPERATORS or three in OPERATORS

    def tokenize(self, state: ScanState) -> None:
        first = state.advance()

        if not state.at_end():
            three = first + state.peek() + state.peek_next()
            if three in OPERATORS:
                state.advance()
                state.advance()
                state.add_token(OPERATORS[three])
                return

            two = first + state.peek()
            if two in OPERATORS:
                state.advance()
                state.add_token(OPERATORS[two])
                return

        if first in OPERATORS:
            state.add_token(OPERATORS[first])


class IdentifierTokenizer(Tokenizer):
    """Identifiers and reserved words."""

    def can_handle(self, state: ScanState, c: str) -> bool:
        return _is_alpha(c)

    def tokenize(self, state: ScanState) -> None:
        while _is_alphanumeric(state.peek()):
            state.advance()
        text = state.source[state.start:state.current]
        state.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER), text)


def create_tokenizers() -> list[Tokenizer]:
    """The tokenizers in the order they are tried."""
    return [
        CommentTokenizer(),
        StringTokenizer(),
        NumberTokenizer(),
        OperatorTokenizer(),
        IdentifierTokenizer(),
    ]