"""Lazy depth-first flattening of nested sequences."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from flatseq.exceptions import (
    ExhaustedTraversalError,
    UnsupportedOperationError,
)
from flatseq.structures.config import FlattenConfig
from flatseq.structures.frame import Frame
from flatseq.structures.lookahead import Lookahead
from flatseq.utils.classify import ItemKind, classify

logger = logging.getLogger(__name__)


class FlatteningIterator:
    """An iterator that flattens out nested iterators, iterables and arrays.

    Leaves are produced lazily in depth-first, left-to-right order:

        >>> list(FlatteningIterator([1, 2], [[3], iter([4])], 5))
        [1, 2, 3, 4, 5]

    Strings, bytes and mappings are leaves, as are any types listed in
    `FlattenConfig.atomic_types`. Tensors are descended to their 0-d
    elements unless `FlattenConfig.descend_arrays` is disabled.

    NOTE: Instances are not thread-safe; callers sharing one across threads
        must synchronize externally. Containers which (directly or
        indirectly) contain themselves are traversed forever. Errors raised
        while iterating an item propagate to the caller and the item is
        retried on the next pull, never skipped.

    Args:
        items: The top-level items to flatten.
        config: Classification options.
    """

    def __init__(
        self, *items: Any, config: Optional[FlattenConfig] = None
    ) -> None:
        """Seed the traversal with a frame over `items`."""
        self.config = config if config is not None else FlattenConfig()
        self._frames: List[Frame] = [Frame.over(items)]
        self._lookahead = Lookahead.absent()

    def __iter__(self) -> FlatteningIterator:
        """Return the iterator itself."""
        return self

    def __next__(self) -> Any:
        """Return the next leaf.

        Raises:
            ExhaustedTraversalError: If there are no leaves left. This is a
                `StopIteration`, so loops terminate normally.
        """
        return self.next()

    @property
    def depth(self) -> int:
        """Number of frames on the stack."""
        return len(self._frames)

    def has_next(self) -> bool:
        """Return whether any leaves are left.

        This may pop exhausted frames and buffer the next leaf, but repeated
        calls have no additional side effects.
        """
        self._advance()
        return self._lookahead.present

    def next(self) -> Any:
        """Return the next leaf.

        Returns:
            The next leaf in depth-first, left-to-right order.

        Raises:
            ExhaustedTraversalError: If there are no leaves left.
        """
        self._advance()
        if not self._lookahead.present:
            raise ExhaustedTraversalError()
        value = self._lookahead.value
        self._lookahead = Lookahead.absent()
        return value

    def remove(self) -> None:
        """Removal is not supported.

        Raises:
            UnsupportedOperationError: Always.
        """
        raise UnsupportedOperationError(
            "FlatteningIterator is read-only and does not support removal."
        )

    def _advance(self) -> None:
        """Buffer the next leaf, or pop frames until the stack is empty."""
        frames = self._frames
        while not self._lookahead.present and frames:
            frame = frames[-1]
            pulled = frame.peek()
            if not pulled.present:
                frames.pop()
                logger.debug(f"Finished frame at depth {frame.depth}.")
                if not frames:
                    logger.debug("Traversal exhausted.")
                continue

            item = pulled.value
            kind = classify(item, self.config)
            if kind is ItemKind.LEAF:
                self._lookahead = pulled
            else:
                frames.append(Frame.over(item, depth=frame.depth + 1))
                logger.debug(
                    f"Descending into {type(item).__name__} ({kind.value}) "
                    f"at depth {frame.depth + 1}."
                )
            frame.consume()
