import pytest

from insanelang.nodes import (
    BinaryExpr,
    BlockStmt,
    CallExpr,
    ExpressionStmt,
    FunctionDecl,
    IdentifierExpr,
    ModuleDecl,
    NodeKind,
    NumberLiteralExpr,
    Parameter,
    ReturnStmt,
    SourceLocation,
    StringLiteralExpr,
    VarDeclStmt,
)


@pytest.mark.parametrize(
    "node, kind",
    [
        (IdentifierExpr("x"), NodeKind.IDENTIFIER),
        (NumberLiteralExpr("1"), NodeKind.NUMBER_LITERAL),
        (StringLiteralExpr("s"), NodeKind.STRING_LITERAL),
        (BinaryExpr("+", IdentifierExpr("a"), IdentifierExpr("b")), NodeKind.BINARY_EXPR),
        (CallExpr(IdentifierExpr("f")), NodeKind.CALL_EXPR),
        (VarDeclStmt("v", "int", None), NodeKind.VAR_DECL),
        (ReturnStmt(), NodeKind.RETURN_STMT),
        (ExpressionStmt(IdentifierExpr("x")), NodeKind.EXPRESSION_STMT),
        (BlockStmt(), NodeKind.BLOCK),
        (FunctionDecl("f"), NodeKind.FUNCTION),
        (ModuleDecl("m"), NodeKind.MODULE),
    ],
)
def test_each_node_reports_its_kind(node, kind):
    assert node.kind is kind


def test_location_is_keyword_only_and_kept():
    loc = SourceLocation(3, 4)
    node = IdentifierExpr("x", loc=loc)
    assert node.loc == loc
    assert node.name == "x"


def test_collections_are_not_shared_between_instances():
    first = BlockStmt()
    second = BlockStmt()
    first.statements.append(ReturnStmt())
    assert second.statements == []


def test_module_functions_filters_members():
    f = FunctionDecl("f", params=[Parameter("a", "int")], return_type="int")
    g = FunctionDecl("g", body=BlockStmt())
    module = ModuleDecl("m", members=[f, VarDeclStmt("v"), g])
    assert module.functions == [f, g]
    assert [fn.name for fn in module.functions] == ["f", "g"]


def test_empty_module_has_no_functions():
    assert ModuleDecl("m").functions == []


def test_call_expr_keeps_argument_order():
    args = [NumberLiteralExpr("1"), StringLiteralExpr("two")]
    call = CallExpr(IdentifierExpr("f"), args)
    assert call.args == args
    assert call.callee == IdentifierExpr("f")