"""Iteration planning for DazzleIterLib.

The IterationPlan validates that an IterationConfig fits a source
structure and builds the matching iterator.
"""

import logging
from collections.abc import Mapping, Sequence
from itertools import islice
from typing import Any, Iterator, Optional, Union

from .config import IterationConfig, IterationStrategy
from .core.iterator import TraversalIterator
from .core.node import BinaryTreeNode
from .iterators import FrontierGraphIterator, OrderedTreeIterator, SequenceIterator

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a configuration can't be applied to a source structure."""
    pass


_STRATEGY_ALIASES = {
    'sequence': IterationStrategy.SEQUENCE,
    'array': IterationStrategy.SEQUENCE,
    'in_order': IterationStrategy.IN_ORDER,
    'inorder': IterationStrategy.IN_ORDER,
    'tree': IterationStrategy.IN_ORDER,
    'bfs': IterationStrategy.BREADTH_FIRST,
    'breadth_first': IterationStrategy.BREADTH_FIRST,
    'graph': IterationStrategy.BREADTH_FIRST,
}


def parse_strategy(strategy: Union[IterationStrategy, str]) -> IterationStrategy:
    """Resolve a strategy enum or name.

    Raises:
        ValueError: If strategy is not a recognized name or enum member
    """
    if isinstance(strategy, IterationStrategy):
        return strategy
    if not isinstance(strategy, str):
        raise ValueError(
            f"Iteration strategy must be an IterationStrategy or a name, "
            f"got {type(strategy).__name__}"
        )

    strategy_lower = strategy.lower()
    if strategy_lower not in _STRATEGY_ALIASES:
        raise ValueError(
            f"Unknown iteration strategy: {strategy}. "
            f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
        )
    return _STRATEGY_ALIASES[strategy_lower]


def create_iterator(strategy: Union[IterationStrategy, str],
                    source: Any,
                    start: Optional[int] = None) -> TraversalIterator:
    """Create an iterator instance by strategy.

    Only the strategy name and the breadth-first start node are checked
    here; use IterationPlan for checked construction.

    Args:
        strategy: Strategy enum or name (sequence, tree, bfs, ...)
        source: Array, tree root or graph mapping
        start: Start node, used by breadth-first only

    Returns:
        TraversalIterator instance

    Raises:
        ValueError: If strategy name is not recognized, or breadth-first
            iteration is requested without a start node
    """
    resolved = parse_strategy(strategy)

    if resolved == IterationStrategy.SEQUENCE:
        return SequenceIterator(source)
    if resolved == IterationStrategy.IN_ORDER:
        return OrderedTreeIterator(source)
    if start is None:
        raise ValueError("start node required for breadth-first iteration")
    return FrontierGraphIterator(source, start)


class IterationPlan:
    """Validated plan for iterating one source structure.

    Checks the configuration and the source shape up front so a
    mismatch fails before any element is produced. Each call to
    ``iterator()`` or ``execute()`` starts a fresh, independent pass.
    """

    def __init__(self, config: IterationConfig, source: Any):
        """Create and validate an iteration plan.

        Args:
            config: Iteration configuration
            source: Array, tree root or graph mapping

        Raises:
            ConfigurationError: If config is invalid or doesn't fit source
        """
        self.config = config
        self.source = source

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        source_issue = self._validate_source()
        if source_issue:
            raise ConfigurationError(f"Source mismatch: {source_issue}")

        logger.debug("IterationPlan ready: strategy=%s start=%r limit=%r",
                     config.strategy.value, config.start, config.limit)

    def _validate_source(self) -> Optional[str]:
        """Check that the source structure matches the strategy.

        Returns:
            Description of the problem, or None if the source fits
        """
        strategy = self.config.strategy
        source = self.source

        if strategy == IterationStrategy.SEQUENCE:
            if isinstance(source, (str, bytes)) or not isinstance(source, Sequence):
                return f"sequence iteration needs a sequence, got {type(source).__name__}"
        elif strategy == IterationStrategy.IN_ORDER:
            if source is not None and not isinstance(source, BinaryTreeNode):
                return f"in-order iteration needs a BinaryTreeNode or None, got {type(source).__name__}"
        elif strategy == IterationStrategy.BREADTH_FIRST:
            if not isinstance(source, Mapping):
                return f"breadth-first iteration needs a mapping, got {type(source).__name__}"

        return None

    def iterator(self) -> TraversalIterator:
        """Build a fresh iterator for this plan."""
        return create_iterator(self.config.strategy, self.source, self.config.start)

    def execute(self) -> Iterator[Any]:
        """Run the iteration, yielding values up to the configured limit."""
        it = self.iterator()
        if self.config.limit is None:
            yield from it
        else:
            yield from islice(it, self.config.limit)

    def describe(self) -> str:
        """Human-readable description of the plan."""
        parts = [f"strategy={self.config.strategy.value}"]
        if self.config.start is not None:
            parts.append(f"start={self.config.start}")
        if self.config.limit is not None:
            parts.append(f"limit={self.config.limit}")
        return f"IterationPlan({', '.join(parts)})"
