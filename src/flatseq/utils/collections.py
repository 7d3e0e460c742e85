"""Methods to help manipulate collections."""

from typing import Any, Optional

from flatseq.iterators.flattening import FlatteningIterator
from flatseq.structures.config import FlattenConfig


def flatten(
    *elems: Any, config: Optional[FlattenConfig] = None
) -> FlatteningIterator:
    """Lazily flattens a nested collection of iterators and iterables.

    Args:
        elems: Nested items to flatten.
        config: Classification options.

    Returns:
        An iterator over the leaves, in depth-first order.
    """
    return FlatteningIterator(*elems, config=config)
