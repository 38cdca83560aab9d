"""BinarySearchTree for bstreelib.

The tree owns its nodes outright: it creates them on insertion, rewires
them on deletion, and nothing outside the tree holds references into it
(the ``root`` property is for inspection only).
"""

import logging
from typing import Any, Iterable, Optional, Tuple, Union

from .node import BSTNode
from .traverser import PreOrderTraverser, create_traverser
from ..config import SuccessorPolicy, TraversalOrder, TreeConfig
from ..errors import DuplicateValueError, InvalidConfigError, NotFoundError

logger = logging.getLogger(__name__)


class BinarySearchTree:
    """Unbalanced binary search tree over totally ordered values.

    Values must support ``==`` and ``<`` against each other. Duplicates are
    rejected. The shape depends on insertion order; inserting sorted input
    produces a linked-list shaped tree, which every operation here handles
    without recursion.

    Example:
        >>> tree = BinarySearchTree([6, 2, 1, 4, 3, 5, 7, 9, 8])
        >>> tree.in_order()
        '1, 2, 3, 4, 5, 6, 7, 8, 9'
        >>> tree.delete(6)
        >>> tree.search(6)
        False
    """

    def __init__(self,
                 values: Optional[Iterable[Any]] = None,
                 *,
                 config: Optional[TreeConfig] = None):
        """Create a tree, optionally bulk-loading values.

        Values are inserted in iteration order. If any of them is a
        duplicate the whole construction fails.

        Args:
            values: Values to insert (None = empty tree)
            config: Tree configuration (defaults to TreeConfig())

        Raises:
            DuplicateValueError: If values contains the same value twice
            InvalidConfigError: If config fails validation
        """
        self.config = config if config is not None else TreeConfig()
        self._check_config()

        self._root: Optional[BSTNode] = None

        if values is not None:
            for value in values:
                self.insert(value)

    @classmethod
    def with_root(cls, value: Any, *, config: Optional[TreeConfig] = None) -> 'BinarySearchTree':
        """Create a tree holding a single value."""
        tree = cls(config=config)
        tree._root = BSTNode(value)
        return tree

    @classmethod
    def from_values(cls, values: Iterable[Any], *,
                    config: Optional[TreeConfig] = None) -> 'BinarySearchTree':
        """Create a tree by inserting each of values in order."""
        return cls(values, config=config)

    @property
    def root(self) -> Optional[BSTNode]:
        """The root node, or None for an empty tree."""
        return self._root

    @property
    def is_empty(self) -> bool:
        return self._root is None

    # Mutation

    def insert(self, value: Any) -> None:
        """Insert a value, keeping the ordering invariant.

        Args:
            value: Value to insert

        Raises:
            DuplicateValueError: If value is already in the tree. The tree
                is left unchanged.
        """
        if self._root is None:
            self._root = BSTNode(value)
            logger.debug("Inserted %r as root", value)
            return

        current = self._root
        depth = 0
        while True:
            if value == current.value:
                logger.debug("Rejected duplicate %r at depth %d", value, depth)
                raise DuplicateValueError(value)

            depth += 1
            if value < current.value:
                if current.left is None:
                    current.left = BSTNode(value)
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = BSTNode(value)
                    break
                current = current.right

        logger.debug("Inserted %r at depth %d", value, depth)

    def delete(self, value: Any) -> None:
        """Remove the node holding value.

        Handles the three classic cases: a leaf is unlinked, a node with one
        child is replaced by that child, and a node with two children is
        replaced by its in-order successor. What happens to the successor's
        own right subtree depends on ``config.successor_policy``.

        Args:
            value: Value to remove

        Raises:
            NotFoundError: If value is not in the tree. The tree is left
                unchanged.
            InvalidConfigError: If config was changed to an invalid state
                after construction. The tree is left unchanged.
        """
        self._check_config()

        parent, target = self._locate(value)
        if target is None:
            logger.debug("Delete failed, %r not found", value)
            raise NotFoundError(value)

        if target.left is None and target.right is None:
            self._replace_child(parent, target, None)
            case = "leaf"
        elif target.left is None or target.right is None:
            child = target.left if target.left is not None else target.right
            self._replace_child(parent, target, child)
            case = "one child"
        else:
            self._replace_child(parent, target, self._detach_successor(target))
            case = "two children"

        # The removed node no longer owns anything
        target.left = None
        target.right = None
        logger.debug("Deleted %r (%s)", value, case)

    # Queries

    def search(self, value: Any) -> bool:
        """Check whether value is in the tree.

        Args:
            value: Value to look for

        Returns:
            True if some node holds value
        """
        return self._locate(value)[1] is not None

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    # Rendering

    def render(self, order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> str:
        """Render the tree's values in the given depth-first order.

        Args:
            order: TraversalOrder or strategy name ("pre", "in_order", ...)

        Returns:
            Values joined by the configured separator; "" for an empty tree

        Raises:
            ValueError: If order is not a known strategy
        """
        traverser = create_traverser(order)
        return self.config.render.render(traverser.values(self._root))

    def pre_order(self) -> str:
        """Node, then left subtree, then right subtree."""
        return self.render(TraversalOrder.PRE_ORDER)

    def in_order(self) -> str:
        """Left subtree, node, right subtree; ascending order."""
        return self.render(TraversalOrder.IN_ORDER)

    def post_order(self) -> str:
        """Left subtree, right subtree, then node."""
        return self.render(TraversalOrder.POST_ORDER)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self._root!r})"

    # Private helpers

    def _check_config(self) -> None:
        """Raise InvalidConfigError if config fails validation."""
        problems = self.config.validate()
        if problems:
            raise InvalidConfigError(problems)

    def _locate(self, value: Any) -> Tuple[Optional[BSTNode], Optional[BSTNode]]:
        """Find the node holding value and its parent.

        Returns:
            (parent, node); node is None if value is absent, parent is
            None if node is the root
        """
        parent = None
        current = self._root
        while current is not None:
            if value == current.value:
                return parent, current
            parent = current
            current = current.left if value < current.value else current.right
        return parent, None

    def _replace_child(self, parent: Optional[BSTNode],
                       old: BSTNode, new: Optional[BSTNode]) -> None:
        """Put new into the slot old occupies under parent (or the root)."""
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _detach_successor(self, target: BSTNode) -> BSTNode:
        """Unlink target's in-order successor and give it target's children.

        The successor is the leftmost node of target's right subtree, so it
        never has a left child of its own.

        Returns:
            The successor, ready to take target's place
        """
        successor_parent = None
        successor = target.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left

        promote = self.config.successor_policy is not SuccessorPolicy.DISCARD
        displaced = successor.right

        if successor_parent is not None:
            successor_parent.left = displaced if promote else None
            successor.right = target.right
        elif not promote:
            successor.right = None

        if not promote and displaced is not None:
            dropped = sum(1 for _ in PreOrderTraverser().traverse(displaced))
            logger.warning(
                "Deleting %r dropped %d node(s) under successor %r (successor_policy=discard)",
                target.value, dropped, successor.value,
            )

        # Successor comes from the right subtree, so this is never a self-assignment
        successor.left = target.left
        return successor
