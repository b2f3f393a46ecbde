"""Token types and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Category of a lexical token."""

    IDENTIFIER = 0
    NUMBER = 1
    STRING = 2
    KEYWORD = 3
    SYMBOL = 4
    END_OF_FILE = 5


@dataclass(frozen=True)
class Token:
    """A lexeme with its category and the position where the lexer emitted it."""

    type: TokenType
    lexeme: str
    line: int
    column: int = 1

    @property
    def is_eof(self) -> bool:
        return self.type is TokenType.END_OF_FILE