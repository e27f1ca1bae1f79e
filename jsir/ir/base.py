"""
Base node contract for jsir.

Every IR node derives from Node, which gives composite nodes a uniform way
to render children and to record which node owns them.
"""

import weakref
from typing import Optional


class InvalidArgument(ValueError):
    """Exception raised when a node is constructed with a bad field value."""
    pass


class Node:
    """Base class that all IR nodes share a common interface from.

    The parent back-reference is held weakly and is bookkeeping only:
    rendering is purely top-down and never consults it.
    """

    _parent_ref = None

    def serialize(self) -> str:
        """Render this node as source text.

        Returns:
            str: The source text; empty for the bare base class
        """
        return ""

    def __str__(self) -> str:
        return self.serialize()

    def become_parent_of(self, child: Optional["Node"]) -> None:
        """Record this node as the parent of ``child``.

        Args:
            child: The child node, or None (ignored)
        """
        if child is not None:
            child.set_parent(self)

    def set_parent(self, parent: Optional["Node"]) -> None:
        """Replace the parent back-reference.

        Args:
            parent: The new parent, or None to clear it
        """
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self) -> Optional["Node"]:
        """The node that last adopted this one, if it is still alive."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()
