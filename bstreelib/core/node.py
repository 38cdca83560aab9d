"""BSTNode for bstreelib.

The BSTNode is intentionally kept simple - it's primarily a data container.
Placement, search and rewiring logic live in BinarySearchTree, which is the
sole owner of every node it creates.
"""

from typing import Any, List, Optional


class BSTNode:
    """A single node of a binary search tree.

    Each node owns at most two children. Ownership is strict: a node is
    referenced by exactly one parent slot (or by the tree's root), there are
    no parent pointers and no shared subtrees.

    The value is fixed once the node is created. Moving a value around the
    tree means moving the node that holds it.
    """

    __slots__ = ("_value", "left", "right")

    def __init__(self, value: Any,
                 left: Optional["BSTNode"] = None,
                 right: Optional["BSTNode"] = None):
        """Create a node.

        Args:
            value: The node's value; must be comparable with its neighbours
            left: Subtree of smaller values
            right: Subtree of greater values
        """
        self._value = value
        self.left = left
        self.right = right

    @property
    def value(self) -> Any:
        """The value held by this node (read-only)."""
        return self._value

    def is_leaf(self) -> bool:
        """Check if this node has no children.

        Returns:
            bool: True if both child slots are empty
        """
        return self.left is None and self.right is None

    def children(self) -> List["BSTNode"]:
        """Return the existing children, left first."""
        return [child for child in (self.left, self.right) if child is not None]

    def __str__(self) -> str:
        """String representation defaults to the value's."""
        return str(self._value)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(value={self._value!r})"
