"""Breadth-first iteration over an adjacency-list graph.

The graph is a mapping from node identifier to an ordered sequence of
neighbor identifiers. Nodes missing from the mapping have no neighbors.
"""

import logging
from collections import deque
from typing import Deque, Mapping, Sequence, Set

from ..core.iterator import TraversalIterator

logger = logging.getLogger(__name__)


class FrontierGraphIterator(TraversalIterator[int]):
    """Breadth-first graph iterator.

    Visits all nodes at distance N from the start before any node at
    distance N+1. Ties are broken by discovery order: neighbors are
    scanned in adjacency-list order, parents in the order they were
    dequeued.

    Nodes are marked visited when they are enqueued, not when they are
    returned, so each node enters the frontier at most once. This also
    makes cyclic graphs terminate.
    """

    def __init__(self, graph: Mapping[int, Sequence[int]], start: int):
        """Initialize iterator with the start node on the frontier.

        Args:
            graph: Adjacency lists keyed by node identifier
            start: Node to begin the traversal from. It need not be a
                key of ``graph``.
        """
        super().__init__()
        self._graph = graph
        self._frontier: Deque[int] = deque([start])
        self._visited: Set[int] = {start}
        logger.debug("FrontierGraphIterator created from node %r (%d nodes in graph)",
                     start, len(graph))

    def has_next(self) -> bool:
        return bool(self._frontier)

    def _advance(self) -> int:
        node = self._frontier.popleft()

        for neighbor in self._graph.get(node, ()):
            if neighbor not in self._visited:
                self._visited.add(neighbor)
                self._frontier.append(neighbor)

        return node

    @property
    def discovered(self) -> int:
        """Number of distinct nodes enqueued so far, start included."""
        return len(self._visited)

    def __repr__(self) -> str:
        return (f"FrontierGraphIterator(yielded={self.yielded_count}, "
                f"frontier={len(self._frontier)}, discovered={len(self._visited)})")
