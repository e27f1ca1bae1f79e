"""
IR node definitions for jsir.

This module contains the node catalog: the root Module container plus the
statement, literal and declaration nodes that render themselves back into
source text.

Composite nodes adopt their children at construction time and indent each
child's rendering by one level when embedding it. Nodes that take a
trailing ``module`` argument push themselves into that Module as the last
step of construction, after any validation has passed.
"""

import logging
from dataclasses import dataclass, field, InitVar
from typing import List, Optional, Union

from .base import Node, InvalidArgument
from ..utils.settings import DEFAULT_SETTINGS
from ..utils.text import indent

logger = logging.getLogger(__name__)


def _indent_child(text: str) -> str:
    return indent(text, DEFAULT_SETTINGS.indent_width)


# ==================== Container ====================

@dataclass(eq=False)
class Module(Node):
    """Root container, typically one per output file.

    Attributes:
        use_strict: Whether to emit the strict-mode directive first
        elements: Top-level nodes in insertion order
    """
    use_strict: bool = True
    elements: List[Node] = field(default_factory=list)

    def __post_init__(self):
        for element in self.elements:
            self.become_parent_of(element)

    def push(self, *nodes: Node) -> int:
        """Append nodes to the top-level sequence.

        Args:
            *nodes: Nodes to append, in order

        Returns:
            int: The number of top-level nodes after appending
        """
        for node in nodes:
            self.become_parent_of(node)
            self.elements.append(node)
        logger.debug(f"Pushed {len(nodes)} node(s), module now holds {len(self.elements)}")
        return len(self.elements)

    def pop(self) -> Optional[Node]:
        """Remove and return the last top-level node.

        Returns:
            Optional[Node]: The removed node, or None if the module is empty
        """
        if not self.elements:
            return None
        node = self.elements.pop()
        logger.debug(f"Popped {type(node).__name__}, module now holds {len(self.elements)}")
        return node

    def serialize(self) -> str:
        out = ""

        if self.use_strict:
            out += DEFAULT_SETTINGS.strict_prefix

        for element in self.elements:
            out += element.serialize()

        return out


# ==================== Statements and literals ====================

@dataclass(eq=False)
class EmptyStatement(Node):
    """No-op statement, rendered as a lone semicolon."""
    module: InitVar[Optional[Module]] = None

    def __post_init__(self, module):
        if module is not None:
            module.push(self)

    def serialize(self) -> str:
        return ";"


@dataclass(eq=False)
class BooleanLiteral(Node):
    """Boolean literal.

    Attributes:
        value: The literal value; must be a real bool, not just truthy
    """
    value: bool
    module: InitVar[Optional[Module]] = None

    def __post_init__(self, module):
        if not isinstance(self.value, bool):
            raise InvalidArgument(
                f"BooleanLiteral requires a boolean value, got {type(self.value).__name__}"
            )
        if module is not None:
            module.push(self)

    def serialize(self) -> str:
        return "true" if self.value else "false"


@dataclass(eq=False)
class BlockStatement(Node):
    """Braced statement sequence.

    ``statements=None`` means the block has no body at all and renders as
    ``{}``; an empty list still renders the newline between the braces.

    Attributes:
        statements: Statements in the block, or None for an absent body
    """
    statements: Optional[List[Node]] = None
    module: InitVar[Optional[Module]] = None

    def __post_init__(self, module):
        if self.statements is not None:
            for statement in self.statements:
                self.become_parent_of(statement)
        if module is not None:
            module.push(self)

    def serialize(self) -> str:
        out = "{"

        if self.statements is not None:
            out += "\n"
            for statement in self.statements:
                out += _indent_child(statement.serialize()) + "\n"

        out += "}"
        return out


@dataclass(eq=False)
class ConditionalStatement(Node):
    """If/else statement.

    Attributes:
        condition: Condition expression node
        then_statement: Statement run when the condition holds
            (an EmptyStatement when omitted)
        else_statement: Optional statement for the else branch
    """
    condition: Node
    then_statement: Optional[Node] = None
    else_statement: Optional[Node] = None
    module: InitVar[Optional[Module]] = None

    def __post_init__(self, module):
        if not isinstance(self.condition, Node):
            raise InvalidArgument("ConditionalStatement requires a node as its condition")
        if self.then_statement is None:
            self.then_statement = EmptyStatement()

        self.become_parent_of(self.condition)
        self.become_parent_of(self.then_statement)
        self.become_parent_of(self.else_statement)

        if module is not None:
            module.push(self)

    def serialize(self) -> str:
        out = "if (" + self.condition.serialize() + ") "
        out += self.then_statement.serialize()

        if self.else_statement is not None:
            out += "else " + self.else_statement.serialize()

        return out


# ==================== Switch ====================

@dataclass(eq=False)
class SwitchMember(Node):
    """One case group of a switch statement.

    Every label gets its own ``case`` line ahead of the shared body, which
    is how fallthrough groups are written. An empty label list renders as
    the ``default:`` clause.

    Attributes:
        labels: Case labels, as strings or nodes
        statements: Statements shared by all labels
    """
    labels: List[Union[str, Node]]
    statements: List[Node]

    def __post_init__(self):
        for label in self.labels:
            if isinstance(label, Node):
                self.become_parent_of(label)
        for statement in self.statements:
            self.become_parent_of(statement)

    def serialize(self) -> str:
        if self.labels:
            out = "".join(f"case {label}:\n" for label in self.labels)
        else:
            out = "default:\n"

        out += "\n".join(_indent_child(statement.serialize()) for statement in self.statements)
        return out


@dataclass(eq=False)
class SwitchStatement(Node):
    """Switch statement.

    Attributes:
        discriminant: Expression switched on
        members: Case groups in order, or None for an absent body
    """
    discriminant: Node
    members: Optional[List[SwitchMember]] = None
    module: InitVar[Optional[Module]] = None

    def __post_init__(self, module):
        self.become_parent_of(self.discriminant)
        if self.members is not None:
            for member in self.members:
                self.become_parent_of(member)
        if module is not None:
            module.push(self)

    def serialize(self) -> str:
        out = "switch (" + self.discriminant.serialize() + ") {"

        if self.members is not None:
            out += "\n"
            for member in self.members:
                out += _indent_child(member.serialize()) + "\n"

        out += "}"
        return out


# ==================== Declarations ====================

@dataclass(eq=False)
class VariableDeclarator(Node):
    """Single name with an optional initializer.

    Attributes:
        name: Declared name
        initializer: Optional initializer expression
    """
    name: str
    initializer: Optional[Node] = None

    def __post_init__(self):
        self.become_parent_of(self.initializer)

    def serialize(self) -> str:
        if self.initializer is None:
            return self.name
        return self.name + " = " + self.initializer.serialize()


@dataclass(eq=False)
class VariableStatement(Node):
    """``var`` declaration list.

    Attributes:
        declarators: Declarators in order
    """
    declarators: List[VariableDeclarator]
    module: InitVar[Optional[Module]] = None

    def __post_init__(self, module):
        if not self.declarators:
            logger.warning("VariableStatement created without declarators")
        for declarator in self.declarators:
            self.become_parent_of(declarator)
        if module is not None:
            module.push(self)

    def serialize(self) -> str:
        rendered = [declarator.serialize() for declarator in self.declarators]
        return "var " + DEFAULT_SETTINGS.declarator_separator.join(rendered) + ";"


@dataclass(eq=False)
class FunctionNode(Node):
    """Function declaration or expression.

    Attributes:
        name: Function name, empty for an anonymous function
        params: Parameter names in declaration order
        body: Body block (an absent-body BlockStatement when omitted)
    """
    name: str = ""
    params: List[str] = field(default_factory=list)
    body: Optional[BlockStatement] = None
    module: InitVar[Optional[Module]] = None

    def __post_init__(self, module):
        if self.name is None:
            self.name = ""
        if self.params is None:
            self.params = []
        if self.body is None:
            self.body = BlockStatement()

        self.become_parent_of(self.body)

        if module is not None:
            module.push(self)

    def serialize(self) -> str:
        out = "function " + self.name + "(" + ", ".join(self.params) + ") "
        out += self.body.serialize()
        return out
