"""Domain exceptions: all public errors of stackerr itself.

These are usage errors raised by the library, never the traced errors it
builds (those live in stackerr.domain.errors).
"""


class StackErrError(Exception):
    """Base for all stackerr usage errors.

    Allows: except StackErrError to catch all library errors.
    """


class NilCauseError(StackErrError, ValueError):
    """Wrapping nothing is invalid.

    Raised by wrap_error() when cause is None.
    Inherits ValueError for semantic correctness.
    """

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("cannot wrap a None cause")


class InvalidSkipError(StackErrError, ValueError):
    """Skip depth must be >= 0.

    Raised by every *_depth constructor and capture primitive.

    Attributes:
        skip: Invalid skip value.
    """

    def __init__(self, skip: int) -> None:
        """Initialize with invalid skip."""
        self.skip = skip
        super().__init__(f"skip must be >= 0, got {skip}")


class InvalidDepthError(StackErrError, ValueError):
    """Capture depth must be >= 1.

    Attributes:
        depth: Invalid depth value.
    """

    def __init__(self, depth: int) -> None:
        """Initialize with invalid depth."""
        self.depth = depth
        super().__init__(f"depth must be >= 1, got {depth}")


class EmptyJoinError(StackErrError, ValueError):
    """JoinError requires at least one cause."""

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("JoinError requires at least one cause")
