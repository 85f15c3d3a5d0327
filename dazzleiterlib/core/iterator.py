"""TraversalIterator abstraction for DazzleIterLib.

Every iterator in the library exposes the same two-method contract:
``has_next()`` to ask whether another element exists, and ``next()`` to
take it. The contract is generic over the element type.

Iterators also speak the Python iteration protocol, so they can be used
directly in ``for`` loops, ``list()`` calls and ``itertools`` pipelines.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Iterator, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IteratorExhaustedError(LookupError):
    """Raised when ``next()`` is called on an iterator with no elements left.

    Callers using the ``while it.has_next(): it.next()`` loop never see
    this. The iterator's state is left untouched when it is raised.
    """
    pass


class TraversalIterator(ABC, Generic[T]):
    """Abstract base class for single-pass, forward-only iterators.

    Subclasses own their traversal state (cursor, stack, frontier) and
    implement two hooks:

    - ``has_next()`` reports whether another element exists
    - ``_advance()`` produces exactly one element and updates state

    ``next()`` is implemented here and enforces the exhaustion policy
    uniformly across all variants.
    """

    def __init__(self):
        self._yielded = 0

    @abstractmethod
    def has_next(self) -> bool:
        """Check if there are more elements to iterate over.

        Must be a pure query: calling it repeatedly without an
        intervening ``next()`` always returns the same value.

        Returns:
            bool: True if ``next()`` will produce an element
        """
        pass

    @abstractmethod
    def _advance(self) -> T:
        """Produce the next element and advance internal state.

        Only called when ``has_next()`` is True.
        """
        pass

    def next(self) -> T:
        """Return the next element in the iteration.

        Returns:
            The next element

        Raises:
            IteratorExhaustedError: If ``has_next()`` is False
        """
        if not self.has_next():
            logger.debug("%s exhausted after %d elements",
                         self.__class__.__name__, self._yielded)
            raise IteratorExhaustedError(
                f"{self.__class__.__name__} has no more elements "
                f"(yielded {self._yielded})"
            )
        value = self._advance()
        self._yielded += 1
        return value

    @property
    def yielded_count(self) -> int:
        """Number of elements produced so far."""
        return self._yielded

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return (f"{self.__class__.__name__}(yielded={self._yielded}, "
                f"has_next={self.has_next()})")
