"""Single-slot lookahead buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Lookahead:
    """Either one buffered value or an explicit absence.

    Args:
        present: Whether a value is buffered.
        value: The buffered value. Always `None` when absent.
    """

    present: bool = False
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> Lookahead:
        """Buffer `value`, which may itself be falsy or `None`."""
        return cls(present=True, value=value)

    @classmethod
    def absent(cls) -> Lookahead:
        """Return the empty slot."""
        return ABSENT


ABSENT = Lookahead()
