"""Configuration system for DazzleIterLib.

This module defines how users specify which traversal they want and how
far to drain it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class IterationStrategy(Enum):
    """Which iterator to build over a source structure."""
    SEQUENCE = "sequence"       # Front to back over an array
    IN_ORDER = "in_order"       # Left subtree, node, right subtree
    BREADTH_FIRST = "bfs"       # Graph, level by level from a start node


@dataclass
class IterationConfig:
    """Complete configuration for one iteration.

    The IterationPlan validates this configuration against the source
    structure before building an iterator.
    """

    strategy: IterationStrategy = IterationStrategy.SEQUENCE
    start: Optional[int] = None     # Start node, breadth-first only
    limit: Optional[int] = None     # Stop after N elements (None = drain fully)

    # Convenience constructors for common configurations

    @classmethod
    def sequence(cls, limit: Optional[int] = None) -> 'IterationConfig':
        """Create config for linear iteration over an array."""
        return cls(strategy=IterationStrategy.SEQUENCE, limit=limit)

    @classmethod
    def in_order(cls, limit: Optional[int] = None) -> 'IterationConfig':
        """Create config for in-order iteration over a binary tree."""
        return cls(strategy=IterationStrategy.IN_ORDER, limit=limit)

    @classmethod
    def breadth_first(cls, start: int, limit: Optional[int] = None) -> 'IterationConfig':
        """Create config for breadth-first iteration over a graph.

        Args:
            start: Node to begin the traversal from
            limit: Maximum number of nodes to yield
        """
        return cls(strategy=IterationStrategy.BREADTH_FIRST, start=start, limit=limit)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.strategy == IterationStrategy.BREADTH_FIRST:
            if self.start is None:
                errors.append("start node required for breadth-first iteration")
        elif self.start is not None:
            errors.append(f"start node only applies to breadth-first iteration, "
                          f"not {self.strategy.value}")

        if self.limit is not None and self.limit < 0:
            errors.append("limit cannot be negative")

        return errors
