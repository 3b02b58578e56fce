"""Infrastructure layer: interpreter frame access.

Turns live frames into StackPosition tokens and tokens back into Locations.
Stateless adapter, the only module that touches sys._getframe.

Skip convention (threaded explicitly by every caller): skip=0 makes index 0
of the result the frame that called the primitive; each extra unit hides
one more frame.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from stackerr.domain.capture import DeltaAnnotation, Location, StackPosition
from stackerr.domain.exceptions import InvalidDepthError, InvalidSkipError

if TYPE_CHECKING:
    from types import CodeType, FrameType

    from stackerr.domain.capture import FullCapture

MAX_DEPTH = 64


def _frame_at(skip: int) -> FrameType | None:
    """Frame `skip` levels above the primitive's caller, None if too shallow."""
    if skip < 0:
        raise InvalidSkipError(skip)
    try:
        # +2: _frame_at itself and the public primitive
        return sys._getframe(skip + 2)
    except ValueError:
        return None


def _position(frame: FrameType) -> StackPosition:
    return StackPosition(code=frame.f_code, offset=frame.f_lasti)


def capture_stack(skip: int = 0, depth: int = MAX_DEPTH) -> FullCapture:
    """Record the current call stack, innermost first.

    Args:
        skip: Frames to hide above the caller of capture_stack.
        depth: Maximum number of positions kept. Deeper stacks are
            truncated silently.

    Returns:
        Positions, index 0 = capture point. Empty when the stack is
        shallower than skip.

    Raises:
        InvalidSkipError: skip < 0.
        InvalidDepthError: depth < 1.
    """
    if depth < 1:
        raise InvalidDepthError(depth)
    frame = _frame_at(skip)
    callers: list[StackPosition] = []
    while frame is not None and len(callers) < depth:
        callers.append(_position(frame))
        frame = frame.f_back
    return tuple(callers)


def capture_delta(skip: int = 0) -> DeltaAnnotation:
    """Record the two positions around the caller of capture_delta.

    Message and fields are attached afterward via with_message().

    Raises:
        InvalidSkipError: skip < 0.
    """
    frame = _frame_at(skip)
    if frame is None:
        return DeltaAnnotation()
    outer = frame.f_back
    return DeltaAnnotation(
        caller=_position(frame),
        caller_caller=_position(outer) if outer is not None else None,
    )


def delta_from_capture(callers: FullCapture) -> DeltaAnnotation:
    """Derive the creation-site annotation from an existing capture."""
    return DeltaAnnotation(
        caller=callers[0] if len(callers) > 0 else None,
        caller_caller=callers[1] if len(callers) > 1 else None,
    )


def _line_for_offset(code: CodeType, offset: int) -> int:
    for start, end, line in code.co_lines():
        if start <= offset < end:
            return line or 0
    return 0


def resolve_location(position: StackPosition | None) -> Location:
    """Resolve a position to filename, line and qualified function name.

    A None position resolves to the empty Location.
    """
    if position is None:
        return Location()
    code = position.code
    return Location(
        filename=code.co_filename,
        line=_line_for_offset(code, position.offset),
        func=code.co_qualname,
    )
