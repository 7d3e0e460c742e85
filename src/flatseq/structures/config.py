"""Configuration for classifying traversed items."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property
from typing import Final, Tuple, Union

from hydra.utils import get_class

from flatseq.exceptions import ConfigurationError

DEFAULT_ATOMIC_TYPES: Final[Tuple[type, ...]] = (
    str,
    bytes,
    bytearray,
    Mapping,
)


@dataclass(frozen=True)
class FlattenConfig:
    """Options controlling which items are descended into.

    Args:
        descend_arrays: Descend into native arrays (tensors and
            `array.array`) along their first dimension. When `False`, every
            array is yielded whole as a leaf.
        atomic_types: Additional iterable types to yield as leaves. Entries
            may be classes or dotted import paths.
    """

    descend_arrays: bool = True
    atomic_types: Tuple[Union[type, str], ...] = ()

    def __post_init__(self) -> None:
        """Resolve dotted paths in `atomic_types` to classes."""
        resolved = tuple(
            _resolve_type(atomic_type) for atomic_type in self.atomic_types
        )
        # Frozen dataclass.
        object.__setattr__(self, "atomic_types", resolved)

    @cached_property
    def leaf_types(self) -> Tuple[type, ...]:
        """All types which are always yielded as leaves."""
        return DEFAULT_ATOMIC_TYPES + tuple(self.atomic_types)  # type: ignore


def _resolve_type(atomic_type: Union[type, str]) -> type:
    """Resolve a class or a dotted path to a class.

    Args:
        atomic_type: A class, or the import path of one.

    Returns:
        The class.

    Raises:
        ConfigurationError: If the path cannot be imported or does not name
            a class.
    """
    if isinstance(atomic_type, type):
        return atomic_type
    if not isinstance(atomic_type, str):
        raise ConfigurationError(
            f"Invalid atomic type: {atomic_type!r}. "
            "Expected a class or a dotted import path."
        )
    try:
        return get_class(atomic_type)
    except (ImportError, ValueError) as err:
        raise ConfigurationError(
            f"Cannot resolve atomic type `{atomic_type}`."
        ) from err
