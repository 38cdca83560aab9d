"""High-level API for bstreelib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of use in
simple cases.
"""

from typing import Any, Dict, Iterable, Optional, Union

from .config import RenderConfig, SuccessorPolicy, TraversalOrder, TreeConfig
from .core.traverser import PreOrderTraverser
from .core.tree import BinarySearchTree


def build_tree(
    values: Optional[Iterable[Any]] = None,
    successor_policy: Union[SuccessorPolicy, str] = SuccessorPolicy.PROMOTE,
    separator: str = ", ",
    **kwargs
) -> BinarySearchTree:
    """Simple interface for creating a populated tree.

    Args:
        values: Values to insert in order (None = empty tree)
        successor_policy: SuccessorPolicy or its name ("promote", "discard")
        separator: Separator used when rendering traversals
        **kwargs: Additional RenderConfig options (e.g. formatter)

    Returns:
        A new BinarySearchTree

    Raises:
        DuplicateValueError: If values contains duplicates
        InvalidConfigError: If the resulting configuration is invalid

    Example:
        >>> tree = build_tree([5, 3, 7], separator=" ")
        >>> tree.pre_order()
        '5 3 7'
    """
    config = TreeConfig(
        successor_policy=_parse_policy(successor_policy),
        render=RenderConfig(separator=separator),
    )

    # Apply any additional kwargs to the render config
    for key, value in kwargs.items():
        if hasattr(config.render, key):
            setattr(config.render, key, value)

    return BinarySearchTree(values, config=config)


def render_tree(
    tree: BinarySearchTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
) -> str:
    """Render a tree's values in a depth-first order.

    Args:
        tree: Tree to render
        order: TraversalOrder or name (pre, in, post, pre_order, ...)

    Returns:
        Rendered values, "" for an empty tree
    """
    return tree.render(order)


def get_tree_stats(tree: BinarySearchTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    ``max_depth`` is the number of edges on the longest root-to-leaf path,
    so a single node has depth 0 and an empty tree reports -1.

    Args:
        tree: Tree to inspect

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(build_tree([2, 1, 3]))
        >>> stats['total_nodes'], stats['leaf_nodes'], stats['max_depth']
        (3, 2, 1)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': -1,
        'depths': {},
        'min_value': None,
        'max_value': None,
    }

    for node, depth in PreOrderTraverser().traverse(tree.root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    if tree.root is not None:
        stats['min_value'] = _extreme(tree.root, 'left').value
        stats['max_value'] = _extreme(tree.root, 'right').value

    return stats


# Helper functions

def _extreme(node, side: str):
    """Follow one side of the tree down to its last node."""
    while getattr(node, side) is not None:
        node = getattr(node, side)
    return node


def _parse_policy(policy: Union[SuccessorPolicy, str]) -> SuccessorPolicy:
    """Parse successor policy from string or enum.

    Args:
        policy: Policy as enum or string

    Returns:
        SuccessorPolicy enum value
    """
    if isinstance(policy, SuccessorPolicy):
        return policy

    try:
        return SuccessorPolicy(str(policy).lower())
    except ValueError:
        raise ValueError(f"Unknown successor policy: {policy}") from None
