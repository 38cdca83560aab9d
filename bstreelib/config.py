"""Configuration system for bstreelib.

This module defines how users tune a tree: how the two-children deletion
treats the successor's own subtree, and how traversals are rendered.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List


class TraversalOrder(Enum):
    """Which depth-first order to walk the tree in."""
    PRE_ORDER = "pre_order"     # Node, left, right
    IN_ORDER = "in_order"       # Left, node, right (ascending)
    POST_ORDER = "post_order"   # Left, right, node


class SuccessorPolicy(Enum):
    """What happens to the in-order successor's right subtree on deletion.

    The successor never has a left child, but it may have a right subtree.
    """
    PROMOTE = "promote"   # Re-attach the successor's right subtree (lossless)
    DISCARD = "discard"   # Drop the successor's own children (legacy behavior)


@dataclass
class RenderConfig:
    """Configuration for turning a traversal into a string."""

    separator: str = ", "
    formatter: Callable[[Any], str] = str

    def render(self, values) -> str:
        """Join formatted values with the separator.

        Args:
            values: Iterable of node values in traversal order

        Returns:
            Rendered string; empty for an empty iterable
        """
        return self.separator.join(self.formatter(value) for value in values)


@dataclass
class TreeConfig:
    """Complete configuration for a BinarySearchTree.

    The defaults give a lossless tree rendering values as ``"1, 2, 3"``.
    """

    successor_policy: SuccessorPolicy = SuccessorPolicy.PROMOTE
    render: RenderConfig = field(default_factory=RenderConfig)

    # Convenience constructors for common configurations

    @classmethod
    def legacy(cls) -> 'TreeConfig':
        """Create config that reproduces the legacy successor handling.

        Two-children deletion drops the successor's own right subtree.

        Returns:
            TreeConfig with SuccessorPolicy.DISCARD
        """
        return cls(successor_policy=SuccessorPolicy.DISCARD)

    @classmethod
    def compact(cls, separator: str = ",") -> 'TreeConfig':
        """Create config rendering traversals without padding.

        Args:
            separator: Separator placed between values

        Returns:
            TreeConfig with the given separator
        """
        return cls(render=RenderConfig(separator=separator))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.successor_policy, SuccessorPolicy):
            errors.append(
                f"successor_policy must be a SuccessorPolicy, got {self.successor_policy!r}"
            )

        if not isinstance(self.render, RenderConfig):
            errors.append(f"render must be a RenderConfig, got {self.render!r}")
            return errors

        if not isinstance(self.render.separator, str):
            errors.append("separator must be a string")

        if not callable(self.render.formatter):
            errors.append("formatter must be callable")

        return errors
