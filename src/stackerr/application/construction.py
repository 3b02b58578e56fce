"""Construction surface: new, wrap and merge.

Every public function has a *_depth twin taking an explicit skip so helper
layers can hide their own frames. skip is threaded, never inferred: each
layer adds exactly the frames it owns.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from stackerr.application.traversal import find_anchor
from stackerr.domain.errors import BaseJoinError, RootError, WrapError
from stackerr.domain.exceptions import InvalidSkipError, NilCauseError
from stackerr.infrastructure.frames import capture_delta, capture_stack, delta_from_capture

log = logger.bind(name="stackerr.construction")


def _check_skip(skip: int) -> None:
    if skip < 0:
        raise InvalidSkipError(skip)


def new_root(
    skip: int,
    cause: BaseException | None,
    fields: Mapping[str, Any] | None,
    message: str,
    args: tuple[Any, ...],
) -> RootError:
    """Create a RootError with a fresh full capture.

    Args:
        skip: Frames above the caller of new_root to hide.
        cause: Wrapped cause, None for an origin error.
        fields: Opaque structured data.
        message: %-style template.
        args: Template arguments.
    """
    callers = capture_stack(skip + 1)
    delta = delta_from_capture(callers).with_message(fields, message, args)
    return RootError(callers, delta, cause)


def wrap(
    skip: int,
    cause: BaseException | None,
    fields: Mapping[str, Any] | None,
    message: str,
    args: tuple[Any, ...],
) -> RootError | WrapError:
    """Annotate cause with the caller's location, message and fields.

    Returns:
        WrapError when cause is already anchored, otherwise a RootError
        anchoring the foreign cause.

    Raises:
        NilCauseError: cause is None.
    """
    if cause is None:
        raise NilCauseError
    if find_anchor(cause) is None:
        log.debug("anchoring foreign {}", type(cause).__qualname__)
        return new_root(skip + 1, cause, fields, message, args)
    delta = capture_delta(skip + 1).with_message(fields, message, args)
    return WrapError(delta, cause)


def merge(skip: int, errors: tuple[BaseException | None, ...]) -> BaseException | None:
    """Merge errors into one, filtering None.

    Returns:
        None for no live error, a wrap of the single live error, otherwise a
        join in argument order: JoinError when every error is an Exception,
        BaseJoinError otherwise. A join first argument gets the rest
        appended (copy-on-append, the original stays untouched).
    """
    live = [e for e in errors if e is not None]
    if not live:
        return None
    if len(live) == 1:
        log.debug("single live error in merge, wrapping")
        return wrap(skip + 1, live[0], None, "", ())

    first, rest = live[0], live[1:]
    if isinstance(first, BaseJoinError):
        log.debug("appending {} error(s) to existing join", len(rest))
        return first.with_causes(rest)
    return BaseJoinError(live, capture_stack(skip + 1))


def new_error(message: str = "", *args: Any, fields: Mapping[str, Any] | None = None) -> RootError:
    """Create an origin error at the caller's location.

    Example:
        raise new_error("user %s not found", user_id, fields={"db": "main"})
    """
    return new_root(1, None, fields, message, args)


def new_error_depth(
    skip: int,
    message: str = "",
    *args: Any,
    fields: Mapping[str, Any] | None = None,
) -> RootError:
    """new_error() hiding `skip` extra frames of helper code."""
    _check_skip(skip)
    return new_root(skip + 1, None, fields, message, args)


def wrap_error(
    cause: BaseException | None,
    message: str = "",
    *args: Any,
    fields: Mapping[str, Any] | None = None,
) -> RootError | WrapError:
    """Wrap cause at the caller's location.

    Raises:
        NilCauseError: cause is None.
    """
    return wrap(1, cause, fields, message, args)


def wrap_error_depth(
    skip: int,
    cause: BaseException | None,
    message: str = "",
    *args: Any,
    fields: Mapping[str, Any] | None = None,
) -> RootError | WrapError:
    """wrap_error() hiding `skip` extra frames of helper code."""
    _check_skip(skip)
    return wrap(skip + 1, cause, fields, message, args)


def merge_errors(*errors: BaseException | None) -> BaseException | None:
    """Merge errors at the caller's location. None entries are ignored."""
    return merge(1, errors)


def merge_errors_depth(skip: int, *errors: BaseException | None) -> BaseException | None:
    """merge_errors() hiding `skip` extra frames of helper code."""
    _check_skip(skip)
    return merge(skip + 1, errors)
