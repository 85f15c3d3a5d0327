"""In-order iteration over a binary tree.

Uses an explicit stack instead of recursion, so tree depth is bounded by
available memory rather than the interpreter's recursion limit.
"""

import logging
from typing import List, Optional

from ..core.iterator import TraversalIterator
from ..core.node import BinaryTreeNode

logger = logging.getLogger(__name__)


class OrderedTreeIterator(TraversalIterator[int]):
    """In-order (left subtree, node, right subtree) tree iterator.

    The stack holds the ancestors that still owe a visit, with the next
    node to visit on top. Staging happens through ``_lean_left``: push a
    node and each of its successive left descendants.

    Example:
        >>> root = BinaryTreeNode(2, BinaryTreeNode(1), BinaryTreeNode(3))
        >>> list(OrderedTreeIterator(root))
        [1, 2, 3]
    """

    def __init__(self, root: Optional[BinaryTreeNode]):
        """Initialize iterator and stage the leftmost node.

        Args:
            root: Root of the tree, or None for an empty tree
        """
        super().__init__()
        self._stack: List[BinaryTreeNode] = []
        self._lean_left(root)
        logger.debug("OrderedTreeIterator created, %d nodes staged", len(self._stack))

    def _lean_left(self, node: Optional[BinaryTreeNode]) -> None:
        """Push node and all its successive left children onto the stack."""
        while node is not None:
            self._stack.append(node)
            node = node.left

    def has_next(self) -> bool:
        return bool(self._stack)

    def _advance(self) -> int:
        node = self._stack.pop()
        self._lean_left(node.right)
        return node.value

    @property
    def pending(self) -> int:
        """Number of ancestors currently staged on the stack."""
        return len(self._stack)

    def __repr__(self) -> str:
        return (f"OrderedTreeIterator(yielded={self.yielded_count}, "
                f"pending={len(self._stack)})")
