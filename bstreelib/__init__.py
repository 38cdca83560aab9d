"""bstreelib - Unbalanced Binary Search Tree Library.

bstreelib provides a generic, in-memory binary search tree over any totally
ordered values, with insertion, deletion, membership search and the three
depth-first traversals rendered as strings.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bstreelib import BinarySearchTree

    tree = BinarySearchTree([6, 2, 1, 4, 3, 5, 7, 9, 8])
    tree.in_order()     # '1, 2, 3, 4, 5, 6, 7, 8, 9'
━━━━━━━━━━━━━━━━━━━━━━━━━━

The library logs through the standard ``logging`` module under the
``bstreelib`` logger and stays silent until the application configures it.
"""

import logging

__version__ = "0.1.0"

# Core components
from .core.node import BSTNode
from .core.tree import BinarySearchTree
from .core.traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)

# Configuration and errors
from .config import (
    TreeConfig,
    RenderConfig,
    TraversalOrder,
    SuccessorPolicy,
)
from .errors import (
    BSTError,
    DuplicateValueError,
    NotFoundError,
    InvalidConfigError,
)

# High-level API
from .api import (
    build_tree,
    render_tree,
    get_tree_stats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    'BSTNode',
    'BinarySearchTree',
    'TreeTraverser',
    'PreOrderTraverser',
    'InOrderTraverser',
    'PostOrderTraverser',
    'create_traverser',
    # Config
    'TreeConfig',
    'RenderConfig',
    'TraversalOrder',
    'SuccessorPolicy',
    # Errors
    'BSTError',
    'DuplicateValueError',
    'NotFoundError',
    'InvalidConfigError',
    # API
    'build_tree',
    'render_tree',
    'get_tree_stats',
]
