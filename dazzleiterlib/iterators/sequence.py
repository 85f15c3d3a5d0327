"""Linear iteration over a fixed sequence."""

import logging
from typing import Sequence, TypeVar

from ..core.iterator import TraversalIterator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SequenceIterator(TraversalIterator[T]):
    """Iterator over an ordered sequence, front to back.

    Keeps a cursor into the sequence. The sequence itself is never
    copied or modified.
    """

    def __init__(self, sequence: Sequence[T]):
        """Initialize iterator with a cursor at position 0.

        Args:
            sequence: Ordered elements to walk
        """
        super().__init__()
        self._sequence = sequence
        self._index = 0
        logger.debug("SequenceIterator created over %d elements", len(sequence))

    def has_next(self) -> bool:
        return self._index < len(self._sequence)

    def _advance(self) -> T:
        value = self._sequence[self._index]
        self._index += 1
        return value

    @property
    def position(self) -> int:
        """Index of the element the next call to ``next()`` returns."""
        return self._index

    def __repr__(self) -> str:
        return (f"SequenceIterator(position={self._index}, "
                f"length={len(self._sequence)})")
