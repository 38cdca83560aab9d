"""Test fixtures for bstreelib consumers.

These fixtures provide controlled access to tree structure for testing
purposes without making shape inspection part of the tree's own API.
"""

from typing import Any, List, Optional, Tuple

from ..core.node import BSTNode
from ..core.traverser import InOrderTraverser, PreOrderTraverser


class TreeTestHelper:
    """Public test fixture for tree verification.

    Example:
        tree = BinarySearchTree([5, 3, 2, 4, 7, 6, 8])
        helper = TreeTestHelper(tree)

        tree.delete(5)
        assert helper.satisfies_ordering()
        assert TreeTestHelper.digits(tree.pre_order()) == "632478"
    """

    def __init__(self, tree):
        """Initialize with the tree under test.

        Args:
            tree: A BinarySearchTree
        """
        self._tree = tree

    @staticmethod
    def digits(rendering: str) -> str:
        """Strip a rendered traversal down to its digit characters.

        Lets tests compare orders independent of the separator.
        """
        return "".join(ch for ch in rendering if ch.isdigit())

    def values(self) -> List[Any]:
        """Return the stored values in ascending (in-order) order."""
        return list(InOrderTraverser().values(self._tree.root))

    def node_count(self) -> int:
        return sum(1 for _ in PreOrderTraverser().traverse(self._tree.root))

    def satisfies_ordering(self) -> bool:
        """Check the ordering invariant over the whole tree.

        Every node must lie strictly between the bounds inherited from its
        ancestors, which also rules out duplicates.

        Returns:
            True if the tree is a valid binary search tree
        """
        if self._tree.root is None:
            return True

        # (node, lower bound, upper bound); None means unbounded
        stack: List[Tuple[BSTNode, Optional[BSTNode], Optional[BSTNode]]] = [
            (self._tree.root, None, None)
        ]
        while stack:
            node, low, high = stack.pop()
            if low is not None and not low.value < node.value:
                return False
            if high is not None and not node.value < high.value:
                return False
            if node.left is not None:
                stack.append((node.left, low, node))
            if node.right is not None:
                stack.append((node.right, node, high))
        return True

    def shape(self) -> Optional[Tuple]:
        """Return the tree as nested ``(value, left, right)`` tuples.

        Empty subtrees are None, so ``(2, (1, None, None), None)`` is a
        root of 2 with a single left child of 1.
        """
        def _shape(node: Optional[BSTNode]):
            if node is None:
                return None
            return (node.value, _shape(node.left), _shape(node.right))

        return _shape(self._tree.root)
