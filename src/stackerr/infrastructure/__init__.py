"""Infrastructure layer: interpreter frame access."""

from stackerr.infrastructure.frames import (
    MAX_DEPTH,
    capture_delta,
    capture_stack,
    delta_from_capture,
    resolve_location,
)

__all__ = [
    "MAX_DEPTH",
    "capture_delta",
    "capture_stack",
    "delta_from_capture",
    "resolve_location",
]
