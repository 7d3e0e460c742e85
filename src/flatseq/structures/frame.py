"""A single level of a depth-first traversal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from flatseq.structures.lookahead import ABSENT, Lookahead


@dataclass
class Frame:
    """Cursor into one source sequence.

    The frame holds a reference to the source's iterator, never a copy of
    its elements. An item stays pending on the frame from `peek` until
    `consume`, so it is not lost if handling it fails.

    Args:
        source: Iterator over the sequence being walked.
        depth: Nesting level of the sequence (0 for the top-level items).
        pending: The peeked item which has not been consumed yet.
    """

    source: Iterator[Any]
    depth: int = 0
    pending: Lookahead = field(default=ABSENT, compare=False)

    @classmethod
    def over(cls, items: Iterable[Any], depth: int = 0) -> Frame:
        """Build a frame walking `items`.

        Iterators are their own `iter()`, so items already consumed by the
        caller are not replayed.
        """
        return cls(source=iter(items), depth=depth)

    def peek(self) -> Lookahead:
        """Return the pending item, pulling it from the source if needed.

        Returns:
            The item, or the absent slot once the source is exhausted.
        """
        if not self.pending.present:
            try:
                self.pending = Lookahead.of(next(self.source))
            except StopIteration:
                return Lookahead.absent()
        return self.pending

    def consume(self) -> None:
        """Drop the pending item."""
        self.pending = Lookahead.absent()
