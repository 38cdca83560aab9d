"""Depth-first traversal strategies for bstreelib.

Traversers implement the three classic walks over a binary search tree.
They use an explicit stack instead of recursion, so a degenerate tree (every
value inserted in sorted order) can be walked at any height.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple, Union
from .node import BSTNode
from ..config import TraversalOrder


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies.

    Traversers are stateless; a single instance can walk any number of
    trees. They never modify the nodes they visit.
    """

    order: TraversalOrder

    @abstractmethod
    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        """Traverse the subtree starting from root.

        Args:
            root: Starting node for traversal (None = empty tree)

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def values(self, root: Optional[BSTNode]) -> Iterator:
        """Yield only the node values, in traversal order."""
        for node, _ in self.traverse(root):
            yield node.value


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node, then its left subtree, then its right subtree.
    Re-inserting values in this order rebuilds the same tree shape.
    """

    order = TraversalOrder.PRE_ORDER

    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        if root is None:
            return
        stack: List[Tuple[BSTNode, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            yield (node, depth)

            # Right goes on first so left is popped first
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal strategy.

    Visits the left subtree, then the node, then the right subtree. On a
    valid binary search tree this yields values in ascending order.
    """

    order = TraversalOrder.IN_ORDER

    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        stack: List[Tuple[BSTNode, int]] = []
        current = root
        depth = 0

        while stack or current is not None:
            # Slide down the left spine
            while current is not None:
                stack.append((current, depth))
                current = current.left
                depth += 1

            node, node_depth = stack.pop()
            yield (node, node_depth)

            current = node.right
            depth = node_depth + 1


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits both subtrees before the node itself. Every node is yielded
    after all of its descendants.
    """

    order = TraversalOrder.POST_ORDER

    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        if root is None:
            return
        # Third element marks nodes whose children are already scheduled
        stack: List[Tuple[BSTNode, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield (node, depth)
                continue

            stack.append((node, depth, True))
            if node.right is not None:
                stack.append((node.right, depth + 1, False))
            if node.left is not None:
                stack.append((node.left, depth + 1, False))


_STRATEGIES = {
    'pre': PreOrderTraverser,
    'pre_order': PreOrderTraverser,
    'preorder': PreOrderTraverser,
    'in': InOrderTraverser,
    'in_order': InOrderTraverser,
    'inorder': InOrderTraverser,
    'post': PostOrderTraverser,
    'post_order': PostOrderTraverser,
    'postorder': PostOrderTraverser,
}


def parse_order(strategy: Union[TraversalOrder, str]) -> TraversalOrder:
    """Convert a strategy name or enum to a TraversalOrder.

    Args:
        strategy: TraversalOrder member or name such as "pre" or "in_order"

    Returns:
        The matching TraversalOrder

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalOrder):
        return strategy

    strategy_lower = str(strategy).lower().replace("-", "_")
    if strategy_lower not in _STRATEGIES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(_STRATEGIES.keys())}"
        )
    return _STRATEGIES[strategy_lower].order


# Factory function for creating traversers by name
def create_traverser(strategy: Union[TraversalOrder, str]) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: TraversalOrder or name (pre, in, post, pre_order, ...)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    order = parse_order(strategy)
    for traverser_class in (PreOrderTraverser, InOrderTraverser, PostOrderTraverser):
        if traverser_class.order is order:
            return traverser_class()
    raise ValueError(f"No traverser registered for {order}")
