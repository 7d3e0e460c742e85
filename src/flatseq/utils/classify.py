"""Classification of items pulled during a traversal."""

from array import array
from collections.abc import Iterable, Iterator
from enum import Enum, unique
from typing import Any, Final, Tuple

from torch import Tensor

from flatseq.structures.config import FlattenConfig

ARRAY_TYPES: Final[Tuple[type, ...]] = (Tensor, array)


@unique
class ItemKind(str, Enum):
    """How a traversed item is handled."""

    ITERATOR = "iterator"
    ARRAY = "array"
    ITERABLE = "iterable"
    LEAF = "leaf"


def is_array(item: Any) -> bool:
    """Return whether `item` is a native array."""
    return isinstance(item, ARRAY_TYPES)


def array_ndim(item: Any) -> int:
    """Return the number of dimensions of a native array.

    Args:
        item: A tensor or an `array.array`.

    Returns:
        The number of dimensions (`array.array` is always 1-D).
    """
    if isinstance(item, Tensor):
        return item.dim()
    return 1


def classify(item: Any, config: FlattenConfig) -> ItemKind:
    """Classify an item pulled from a frame.

    Precedence: atomic types, iterators, native arrays, iterables, leaves.
    An object which is both an iterator and an iterable is an iterator.

    Args:
        item: The pulled item.
        config: Classification options.

    Returns:
        The kind of the item.
    """
    if isinstance(item, config.leaf_types):
        return ItemKind.LEAF
    if isinstance(item, Iterator):
        return ItemKind.ITERATOR
    if is_array(item):
        # 0-d tensors are scalars and cannot be iterated.
        if config.descend_arrays and array_ndim(item) > 0:
            return ItemKind.ARRAY
        return ItemKind.LEAF
    if isinstance(item, Iterable):
        return ItemKind.ITERABLE
    return ItemKind.LEAF
