"""DazzleIterLib - Iterator Pattern Traversal Library.

DazzleIterLib walks in-memory structures through one shared contract:
``has_next()`` asks whether another element exists, ``next()`` takes it.

Available iterators:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Arrays:
    SequenceIterator([10, 20, 30])

Binary trees (in-order):
    OrderedTreeIterator(root)

Graphs (breadth-first):
    FrontierGraphIterator({1: [2, 3]}, start=1)
━━━━━━━━━━━━━━━━━━━━━━━━━━

All iterators also work with ``for`` loops and ``list()``.
"""

import logging

__version__ = "0.1.0"

# Core components
from .core import TraversalIterator, IteratorExhaustedError, BinaryTreeNode
from .iterators import SequenceIterator, OrderedTreeIterator, FrontierGraphIterator

# Configuration and planning
from .config import IterationConfig, IterationStrategy
from .planning import IterationPlan, ConfigurationError, create_iterator

# High-level API
from .api import drain, iterate, collect_values

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "TraversalIterator",
    "IteratorExhaustedError",
    "BinaryTreeNode",
    "SequenceIterator",
    "OrderedTreeIterator",
    "FrontierGraphIterator",
    # Config
    "IterationConfig",
    "IterationStrategy",
    "IterationPlan",
    "ConfigurationError",
    "create_iterator",
    # API
    "drain",
    "iterate",
    "collect_values",
]
