"""Errors raised while flattening nested sequences."""


class FlattenError(Exception):
    """Base class for all flattening errors."""


class ExhaustedTraversalError(FlattenError, StopIteration):
    """Raised when a leaf is requested from an exhausted traversal.

    Subclasses `StopIteration` so the traversal terminates `for` loops and
    other consumers of the iterator protocol normally.
    """


class UnsupportedOperationError(FlattenError, NotImplementedError):
    """Raised by operations the traversal deliberately does not offer."""


class ConfigurationError(FlattenError, ValueError):
    """Raised when a flattening configuration cannot be built."""
