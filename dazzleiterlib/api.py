"""High-level API for DazzleIterLib.

Simple functional interfaces wrapping the iterator classes and the
IterationPlan for common cases.
"""

from typing import Any, Iterator, List, Optional, Union

from .config import IterationConfig, IterationStrategy
from .core.iterator import TraversalIterator
from .planning import IterationPlan, parse_strategy


def drain(iterator: TraversalIterator, limit: Optional[int] = None) -> List[Any]:
    """Collect the remaining elements of an iterator.

    Uses the explicit ``has_next()``/``next()`` contract, so it never
    triggers IteratorExhaustedError.

    Args:
        iterator: Iterator to drain
        limit: Stop after this many elements (None = until exhausted)

    Returns:
        Elements in the order the iterator produced them

    Example:
        >>> from dazzleiterlib import SequenceIterator
        >>> drain(SequenceIterator([10, 20, 30]))
        [10, 20, 30]
    """
    values = []
    while iterator.has_next():
        if limit is not None and len(values) >= limit:
            break
        values.append(iterator.next())
    return values


def iterate(
    source: Any,
    strategy: Union[IterationStrategy, str] = "sequence",
    start: Optional[int] = None,
    limit: Optional[int] = None,
) -> Iterator[Any]:
    """Simple interface for iterating a structure.

    Args:
        source: Array, tree root or graph mapping
        strategy: Strategy enum or name (sequence, tree, bfs, ...)
        start: Start node for breadth-first iteration
        limit: Maximum number of elements to yield

    Yields:
        Element values in traversal order

    Raises:
        ValueError: If strategy name is not recognized
        ConfigurationError: If the options don't fit the source

    Example:
        >>> graph = {1: [2, 3], 2: [4]}
        >>> list(iterate(graph, "bfs", start=1))
        [1, 2, 3, 4]
    """
    config = IterationConfig(
        strategy=parse_strategy(strategy),
        start=start,
        limit=limit,
    )
    plan = IterationPlan(config, source)
    yield from plan.execute()


def collect_values(
    source: Any,
    strategy: Union[IterationStrategy, str] = "sequence",
    start: Optional[int] = None,
    limit: Optional[int] = None,
) -> List[Any]:
    """Like iterate(), but returns a list."""
    return list(iterate(source, strategy, start=start, limit=limit))
