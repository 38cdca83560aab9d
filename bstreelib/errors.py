"""Exceptions raised by bstreelib.

Every error is raised before the tree is touched, so a caller that catches
one can keep using the tree as it was.
"""

from typing import Any, List


class BSTError(Exception):
    """Base class for all bstreelib errors."""
    pass


class DuplicateValueError(BSTError, ValueError):
    """Raised when inserting a value that is already in the tree."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Cannot insert {value!r}: value already exists in the tree")


class NotFoundError(BSTError, LookupError):
    """Raised when deleting a value that is not in the tree."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Cannot delete {value!r}: value not found in the tree")


class InvalidConfigError(BSTError, ValueError):
    """Raised when a tree is given a configuration that fails validation."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__(f"Invalid configuration: {'; '.join(self.problems)}")
