"""Core data structures for bstreelib.

This module contains the node, the tree that owns nodes, and the
traversal strategies used to walk and render it.
"""

from .node import BSTNode
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    create_traverser,
    parse_order,
)
from .tree import BinarySearchTree

__all__ = [
    "BSTNode",
    "BinarySearchTree",
    "TreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
    "parse_order",
]
