"""
jsir - a minimal JavaScript intermediate representation

Nodes for modules, statements, literals and declarations that render
themselves back into source text with correct nesting and indentation.

Example:
    >>> from jsir import Module, BooleanLiteral, ConditionalStatement
    >>> module = Module()
    >>> module.push(ConditionalStatement(BooleanLiteral(True)))
    1
    >>> print(module.serialize())
    "use strict"
    <BLANKLINE>
    if (true) ;

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "jsir Team"

from .ir import (
    Node,
    InvalidArgument,
    Module,
    EmptyStatement,
    BooleanLiteral,
    BlockStatement,
    ConditionalStatement,
    SwitchMember,
    SwitchStatement,
    VariableDeclarator,
    VariableStatement,
    FunctionNode,
)
from .utils import Settings, DEFAULT_SETTINGS, indent

__all__ = [
    "__version__",
    "__author__",
    "Node",
    "InvalidArgument",
    "Module",
    "EmptyStatement",
    "BooleanLiteral",
    "BlockStatement",
    "ConditionalStatement",
    "SwitchMember",
    "SwitchStatement",
    "VariableDeclarator",
    "VariableStatement",
    "FunctionNode",
    "Settings",
    "DEFAULT_SETTINGS",
    "indent",
]
