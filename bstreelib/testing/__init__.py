"""Testing utilities for bstreelib consumers."""

from .fixtures import TreeTestHelper

__all__ = ['TreeTestHelper']
