"""Parsing of a token sequence into a syntax tree."""

from __future__ import annotations

from collections.abc import Iterable

from .nodes import ModuleDecl, SourceLocation
from .tokens import Token


class Parser:
    """Builds a module declaration from tokens."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)

    def parse(self) -> ModuleDecl:
        """Return the module described by the tokens.

        The grammar currently recognises no declarations, so the result is an
        unnamed module with no members.
        """
        return ModuleDecl("", members=[], loc=SourceLocation(1, 1))