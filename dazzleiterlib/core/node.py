"""BinaryTreeNode structure for DazzleIterLib.

The node is intentionally kept simple - it's a data container. Navigation
order is decided by the iterator that walks it, not by the node itself.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Sequence, Tuple


@dataclass(repr=False, eq=False)
class BinaryTreeNode:
    """A node in a binary tree.

    Each node exclusively owns its two children; trees built from these
    nodes must not share subtrees or contain cycles.
    """

    value: int
    left: Optional['BinaryTreeNode'] = None
    right: Optional['BinaryTreeNode'] = None

    def __repr__(self) -> str:
        """Shallow representation; children are shown as set or unset."""
        left = "<set>" if self.left is not None else "None"
        right = "<set>" if self.right is not None else "None"
        return f"BinaryTreeNode(value={self.value!r}, left={left}, right={right})"

    def __eq__(self, other: object) -> bool:
        """Trees are equal if they have the same shape and values.

        Compared with an explicit stack so deep trees don't hit the
        recursion limit.
        """
        if not isinstance(other, BinaryTreeNode):
            return NotImplemented
        pairs: List[Tuple[Optional[BinaryTreeNode], Optional[BinaryTreeNode]]] = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if a is None or b is None:
                if a is not b:
                    return False
                continue
            if a.value != b.value:
                return False
            pairs.append((a.left, b.left))
            pairs.append((a.right, b.right))
        return True

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    @classmethod
    def from_level_order(cls, values: Sequence[Optional[int]]) -> Optional['BinaryTreeNode']:
        """Build a tree from a level-order list of values.

        ``None`` entries mark missing children. Children are only listed
        for nodes that exist, so ``[1, None, 2, 3]`` puts 3 under 2.

        Args:
            values: Level-order values, root first

        Returns:
            The root node, or None for an empty list or a ``None`` root

        Example:
            >>> root = BinaryTreeNode.from_level_order([1, 2, 3, 4, 5])
            >>> root.left.right.value
            5
        """
        if not values or values[0] is None:
            return None

        root = cls(values[0])
        pending: Deque['BinaryTreeNode'] = deque([root])
        index = 1

        while pending and index < len(values):
            parent = pending.popleft()

            if index < len(values) and values[index] is not None:
                parent.left = cls(values[index])
                pending.append(parent.left)
            index += 1

            if index < len(values) and values[index] is not None:
                parent.right = cls(values[index])
                pending.append(parent.right)
            index += 1

        return root
