#!/usr/bin/env python3
"""
Iterator pattern walkthrough.

This example demonstrates:
- Breadth-first traversal of an adjacency-list graph
- In-order traversal of a binary tree
- Linear traversal of an array

Each iterator is drained with the same has_next()/next() loop.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzleiterlib import (
    BinaryTreeNode,
    FrontierGraphIterator,
    OrderedTreeIterator,
    SequenceIterator,
    TraversalIterator,
)


def print_drained(title: str, iterator: TraversalIterator) -> None:
    """Print every element of an iterator on one line."""
    print(f"{title}:")
    while iterator.has_next():
        print(iterator.next(), end=" ")
    print("\n")


def main():
    graph = {
        1: [2, 3],
        2: [4, 5],
        3: [6, 7],
        4: [],
        5: [],
        6: [],
        7: [],
    }
    print_drained("Graph BFS Traversal", FrontierGraphIterator(graph, 1))

    #       1
    #      / \
    #     2   3
    #    / \
    #   4   5
    root = BinaryTreeNode(1)
    root.left = BinaryTreeNode(2, BinaryTreeNode(4), BinaryTreeNode(5))
    root.right = BinaryTreeNode(3)
    print_drained("Tree Inorder Traversal", OrderedTreeIterator(root))

    array = [10, 20, 30, 40, 50]
    print_drained("Array Traversal", SequenceIterator(array))


if __name__ == "__main__":
    main()
