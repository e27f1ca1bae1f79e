"""
Intermediate Representation (IR) module for jsir.

This module defines the node catalog used to assemble a program tree and
render it back into source text.
"""

from .base import Node, InvalidArgument
from .nodes import (
    # Container
    Module,
    # Statements and literals
    EmptyStatement,
    BooleanLiteral,
    BlockStatement,
    ConditionalStatement,
    # Switch
    SwitchMember,
    SwitchStatement,
    # Declarations
    VariableDeclarator,
    VariableStatement,
    FunctionNode,
)

__all__ = [
    "Node",
    "InvalidArgument",
    # Container
    "Module",
    # Statements and literals
    "EmptyStatement",
    "BooleanLiteral",
    "BlockStatement",
    "ConditionalStatement",
    # Switch
    "SwitchMember",
    "SwitchStatement",
    # Declarations
    "VariableDeclarator",
    "VariableStatement",
    "FunctionNode",
]
