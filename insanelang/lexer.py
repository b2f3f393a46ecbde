"""Conversion of source text into tokens."""

from __future__ import annotations

from collections.abc import Iterator

from .tokens import Token, TokenType

KEYWORDS = frozenset(
    {"module", "func", "class", "var", "if", "else", "loop", "unsafe", "return", "true", "false"}
)

_SINGLE_SYMBOLS = frozenset("(){}:,;+*/")
_WHITESPACE = frozenset(" \t\n\v\f\r")
_NUL = "\0"


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


class Lexer:
    """Produces tokens from source text one at a time."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._index = 0
        self._line = 1
        self._column = 1

    def _at_end(self) -> bool:
        return self._index >= len(self._source)

    def _peek_char(self, offset: int = 0) -> str:
        position = self._index + offset
        return self._source[position] if position < len(self._source) else _NUL

    def _advance(self) -> str:
        if self._at_end():
            return _NUL
        char = self._source[self._index]
        self._index += 1
        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return char

    def _skip_whitespace_and_comments(self) -> None:
        while not self._at_end():
            char = self._peek_char()
            if char in _WHITESPACE:
                self._advance()
            elif char == "/" and self._peek_char(1) == "/":
                self._advance()
                self._advance()
                while not self._at_end() and self._peek_char() != "\n":
                    self._advance()
            else:
                break

    def _make(self, token_type: TokenType, lexeme: str) -> Token:
        return Token(token_type, lexeme, self._line, self._column)

    def _identifier(self) -> Token:
        start = self._index - 1
        while _is_alpha(self._peek_char()) or _is_digit(self._peek_char()):
            self._advance()
        lexeme = self._source[start:self._index]
        token_type = TokenType.KEYWORD if lexeme in KEYWORDS else TokenType.IDENTIFIER
        return self._make(token_type, lexeme)

    def _number(self) -> Token:
        start = self._index - 1
        while _is_digit(self._peek_char()):
            self._advance()
        if self._peek_char() == "." and _is_digit(self._peek_char(1)):
            self._advance()
            while _is_digit(self._peek_char()):
                self._advance()
        return self._make(TokenType.NUMBER, self._source[start:self._index])

    def _string(self) -> Token:
        start = self._index
        while not self._at_end() and self._peek_char() != '"':
            if self._peek_char() == "\\":
                self._advance()
            self._advance()
        lexeme = self._source[start:self._index]
        if self._peek_char() == '"':
            self._advance()
        return self._make(TokenType.STRING, lexeme)

    def next_token(self) -> Token:
        """Return the next token and move past it."""
        self._skip_whitespace_and_comments()
        if self._at_end():
            return self._make(TokenType.END_OF_FILE, "")
        char = self._advance()
        if char in _SINGLE_SYMBOLS:
            return self._make(TokenType.SYMBOL, char)
        if char in "-=":
            follower = ">" if char == "-" else "="
            if self._peek_char() == follower:
                self._advance()
                return self._make(TokenType.SYMBOL, char + follower)
            return self._make(TokenType.SYMBOL, char)
        if char == '"':
            return self._string()
        if _is_digit(char):
            return self._number()
        if _is_alpha(char):
            return self._identifier()
        return self._make(TokenType.SYMBOL, char)

    def peek_token(self) -> Token:
        """Return the next token without consuming it."""
        saved = (self._index, self._line, self._column)
        try:
            return self.next_token()
        finally:
            self._index, self._line, self._column = saved

    def __iter__(self) -> Iterator[Token]:
        """Yield the remaining tokens, ending with the end-of-file token."""
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.END_OF_FILE:
                return


def tokenize(source: str) -> list[Token]:
    """Return every token of ``source``, the end-of-file token included."""
    return list(Lexer(source))