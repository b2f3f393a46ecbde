from insanelang.codegen import CodeGenerator
from insanelang.nodes import FunctionDecl, ModuleDecl, VarDeclStmt
from insanelang.parser import Parser


def test_empty_module():
    assert CodeGenerator().generate(ModuleDecl("core")) == "; Module: core\n"


def test_functions_listed_in_order_and_other_members_skipped():
    module = ModuleDecl("m", members=[FunctionDecl("f"), VarDeclStmt("v"), FunctionDecl("g")])
    assert CodeGenerator().generate(module) == "; Module: m\n; Function: f\n; Function: g\n"


def test_parsed_module_output():
    assert CodeGenerator().generate(Parser([]).parse()) == "; Module: \n"


def test_one_line_per_function_plus_header():
    module = ModuleDecl("m", members=[FunctionDecl(name) for name in ("a", "b", "c")])
    output = CodeGenerator().generate(module)
    assert len(output.splitlines()) == len(module.functions) + 1