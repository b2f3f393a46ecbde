"""Syntax tree node definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Optional


@dataclass(frozen=True)
class SourceLocation:
    """Line and column of a node in the source text."""

    line: int = 1
    column: int = 1


class NodeKind(Enum):
    """Discriminator for syntax tree nodes."""

    MODULE = auto()
    FUNCTION = auto()
    VAR_DECL = auto()
    IDENTIFIER = auto()
    NUMBER_LITERAL = auto()
    STRING_LITERAL = auto()
    BINARY_EXPR = auto()
    CALL_EXPR = auto()
    BLOCK = auto()
    RETURN_STMT = auto()
    EXPRESSION_STMT = auto()


@dataclass
class ASTNode:
    """Base of every syntax tree node."""

    kind: ClassVar[NodeKind]
    loc: SourceLocation = field(default_factory=SourceLocation, kw_only=True)


@dataclass
class Expression(ASTNode):
    """Base of expression nodes."""


@dataclass
class Statement(ASTNode):
    """Base of statement nodes."""


@dataclass
class IdentifierExpr(Expression):
    kind: ClassVar[NodeKind] = NodeKind.IDENTIFIER
    name: str


@dataclass
class NumberLiteralExpr(Expression):
    kind: ClassVar[NodeKind] = NodeKind.NUMBER_LITERAL
    value: str


@dataclass
class StringLiteralExpr(Expression):
    kind: ClassVar[NodeKind] = NodeKind.STRING_LITERAL
    value: str


@dataclass
class BinaryExpr(Expression):
    kind: ClassVar[NodeKind] = NodeKind.BINARY_EXPR
    op: str
    left: ASTNode
    right: ASTNode


@dataclass
class CallExpr(Expression):
    kind: ClassVar[NodeKind] = NodeKind.CALL_EXPR
    callee: ASTNode
    args: list[ASTNode] = field(default_factory=list)


@dataclass
class VarDeclStmt(Statement):
    kind: ClassVar[NodeKind] = NodeKind.VAR_DECL
    name: str
    type_name: str = ""
    initializer: Optional[ASTNode] = None


@dataclass
class ReturnStmt(Statement):
    kind: ClassVar[NodeKind] = NodeKind.RETURN_STMT
    value: Optional[ASTNode] = None


@dataclass
class ExpressionStmt(Statement):
    kind: ClassVar[NodeKind] = NodeKind.EXPRESSION_STMT
    expr: ASTNode


@dataclass
class BlockStmt(Statement):
    kind: ClassVar[NodeKind] = NodeKind.BLOCK
    statements: list[ASTNode] = field(default_factory=list)


@dataclass
class Parameter:
    """A named, typed function parameter."""

    name: str
    type_name: str


@dataclass
class FunctionDecl(ASTNode):
    kind: ClassVar[NodeKind] = NodeKind.FUNCTION
    name: str
    params: list[Parameter] = field(default_factory=list)
    return_type: str = ""
    body: Optional[BlockStmt] = None


@dataclass
class ModuleDecl(ASTNode):
    kind: ClassVar[NodeKind] = NodeKind.MODULE
    name: str
    members: list[ASTNode] = field(default_factory=list)

    @property
    def functions(self) -> list[FunctionDecl]:
        """The function declarations among the module's members, in order."""
        return [member for member in self.members if isinstance(member, FunctionDecl)]