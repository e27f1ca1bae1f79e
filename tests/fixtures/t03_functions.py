"""Named function with a nested if/else, then an anonymous function."""

from jsir import (
    Module, BooleanLiteral, FunctionNode, BlockStatement,
    ConditionalStatement, VariableStatement, VariableDeclarator,
)


def build():
    module = Module(use_strict=False)
    check = ConditionalStatement(
        BooleanLiteral(False),
        BlockStatement([VariableStatement([VariableDeclarator("y")])]),
        BlockStatement([]),
    )
    module.push(FunctionNode("check", ["a", "b"], BlockStatement([check])))
    module.push(FunctionNode())
    return module
