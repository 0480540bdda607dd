"""Exceptions raised by the constrained random generators."""


class ConstrainedRandomError(ValueError):
    """Base class for precondition violations reported to the caller."""


class InvalidRange(ConstrainedRandomError):
    """Raised when a requested range is empty or not representable."""


class UnsupportedWidth(ConstrainedRandomError):
    """Raised when a wide integer generator is built with a non-positive width."""
