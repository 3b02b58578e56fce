"""Cause-chain traversal over traced and foreign errors.

Single cause: HasSingleCause.wrapped_cause, else native __cause__.
Multiple causes: HasMultiCause.wrapped_causes, else native
BaseExceptionGroup.exceptions. Exception groups are multi-cause only.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeAlias

from stackerr.domain.errors import (
    HasDeltaAnnotation,
    HasFullCapture,
    HasMultiCause,
    HasSingleCause,
)

Target: TypeAlias = BaseException | type[BaseException] | Callable[[BaseException], bool]


def single_cause(err: BaseException) -> BaseException | None:
    """Next link of a single-cause chain, None for groups and chain ends."""
    if isinstance(err, HasSingleCause):
        return err.wrapped_cause
    if isinstance(err, BaseExceptionGroup):
        return None
    cause = getattr(err, "__cause__", None)
    return cause if isinstance(cause, BaseException) else None


def multi_causes(err: BaseException) -> tuple[BaseException, ...] | None:
    """Branches of a multi-cause error, None when err is not one."""
    if isinstance(err, HasMultiCause):
        return tuple(err.wrapped_causes)
    if isinstance(err, BaseExceptionGroup):
        return tuple(err.exceptions)
    return None


def find_anchor(err: BaseException | None) -> HasFullCapture | None:
    """First error in the single-cause chain (err included) owning a capture.

    Returns:
        The anchor, or None when the chain ends or loops back first.
    """
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, HasFullCapture) and err.stack_callers:
            return err
        seen.add(id(err))
        err = single_cause(err)
    return None


def next_delta_annotated(err: BaseException | None) -> HasDeltaAnnotation | None:
    """Next ancestor (immediate cause included) exposing a delta annotation.

    Returns:
        The ancestor, or None on an absent or foreign cause.
    """
    while err is not None:
        err = single_cause(err)
        if not isinstance(err, HasDeltaAnnotation):
            return None
        if err.stack_delta is not None:
            return err
    return None


def iter_chain(err: BaseException | None) -> Iterator[BaseException]:
    """Every error reachable from err, depth-first, err first."""
    stack = [err] if err is not None else []
    seen: set[int] = set()
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        causes = multi_causes(current)
        if causes is not None:
            stack.extend(reversed(causes))
            continue
        cause = single_cause(current)
        if cause is not None:
            stack.append(cause)


def _matches(err: BaseException, target: Target) -> bool:
    if isinstance(target, BaseException):
        return err is target
    if isinstance(target, type):
        return isinstance(err, target)
    return target(err)


def contains(err: BaseException | None, target: Target) -> bool:
    """Does the chain/tree of err contain target.

    Args:
        err: Error to search.
        target: Exception instance (identity), exception class
            (isinstance) or predicate.
    """
    return any(_matches(e, target) for e in iter_chain(err))
