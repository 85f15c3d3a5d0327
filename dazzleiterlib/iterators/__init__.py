"""Concrete iterators: linear, in-order tree and breadth-first graph."""

from .sequence import SequenceIterator
from .tree import OrderedTreeIterator
from .graph import FrontierGraphIterator

__all__ = [
    "SequenceIterator",
    "OrderedTreeIterator",
    "FrontierGraphIterator",
]
