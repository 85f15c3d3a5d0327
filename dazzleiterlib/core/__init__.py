"""Core abstractions for DazzleIterLib.

This module contains the shared iteration contract and the data
structures the iterators walk.
"""

from .iterator import TraversalIterator, IteratorExhaustedError
from .node import BinaryTreeNode

__all__ = [
    "TraversalIterator",
    "IteratorExhaustedError",
    "BinaryTreeNode",
]
