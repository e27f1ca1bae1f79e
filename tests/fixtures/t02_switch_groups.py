"""Switch with a fallthrough case group and a default group."""

from jsir import (
    Module, BooleanLiteral, SwitchStatement, SwitchMember,
    BlockStatement, EmptyStatement,
)


def build():
    module = Module(use_strict=False)
    SwitchStatement(
        BooleanLiteral(True),
        [
            SwitchMember(["1", "2"], [EmptyStatement()]),
            SwitchMember([], [BlockStatement([EmptyStatement()])]),
        ],
        module,
    )
    return module
