"""Domain layer: value objects, error variants and library exceptions."""

from stackerr.domain.capture import DeltaAnnotation, FullCapture, Location, StackPosition
from stackerr.domain.errors import (
    HasDeltaAnnotation,
    HasFullCapture,
    HasMultiCause,
    HasSingleCause,
    BaseJoinError,
    JoinError,
    RootError,
    WrapError,
)
from stackerr.domain.exceptions import (
    EmptyJoinError,
    InvalidDepthError,
    InvalidSkipError,
    NilCauseError,
    StackErrError,
)
from stackerr.domain.hierarchy import Hierarchy, Link, interpolate, safe_text

__all__ = [
    "BaseJoinError",
    "DeltaAnnotation",
    "EmptyJoinError",
    "FullCapture",
    "HasDeltaAnnotation",
    "HasFullCapture",
    "HasMultiCause",
    "HasSingleCause",
    "Hierarchy",
    "InvalidDepthError",
    "InvalidSkipError",
    "JoinError",
    "Link",
    "Location",
    "NilCauseError",
    "RootError",
    "StackErrError",
    "StackPosition",
    "WrapError",
    "interpolate",
    "safe_text",
]
