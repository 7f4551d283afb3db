"""Exceptions raised by the tree map."""

LEAF_ONLY_MESSAGE = "ERROR: Only leaf nodes can be removed."


class TreeMapError(Exception):
    """Base class for tree map errors."""


class InvalidOperation(TreeMapError, ValueError):
    """Raised when remove() targets a node that still has children.

    The map is left exactly as it was before the call.
    """

    def __init__(self, message: str = LEAF_ONLY_MESSAGE):
        super().__init__(message)
