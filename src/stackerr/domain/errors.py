"""Domain layer: the three traced error variants.

RootError and BaseJoinError are anchors: they own a full stack capture.
WrapError owns only a DeltaAnnotation and sits on top of an anchor.

Capabilities are expressed as small protocols, implemented independently by
each variant. Foreign exceptions implement none of them and are reached
through the native __cause__ / ExceptionGroup.exceptions links instead.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from stackerr.domain.exceptions import EmptyJoinError, NilCauseError

if TYPE_CHECKING:
    from stackerr.domain.capture import DeltaAnnotation, FullCapture

JOIN_MESSAGE = "merged errors"


@runtime_checkable
class HasFullCapture(Protocol):
    """Owns a full stack capture (anchor)."""

    @property
    def stack_callers(self) -> FullCapture: ...


@runtime_checkable
class HasDeltaAnnotation(Protocol):
    """Owns at most one delta annotation."""

    @property
    def stack_delta(self) -> DeltaAnnotation | None: ...


@runtime_checkable
class HasSingleCause(Protocol):
    """Wraps at most one cause."""

    @property
    def wrapped_cause(self) -> BaseException | None: ...


@runtime_checkable
class HasMultiCause(Protocol):
    """Wraps an ordered sequence of causes."""

    @property
    def wrapped_causes(self) -> tuple[BaseException, ...]: ...


class _Rendered:
    """str() renders the concise form, format(err, "+") the full trace."""

    __slots__ = ()

    def __str__(self) -> str:
        from stackerr.application.renderers.string import render_string
        from stackerr.application.traversal import find_anchor

        # unanchored (empty capture) would render itself as external forever
        if find_anchor(self) is None:  # type: ignore[arg-type]
            return super().__str__()
        return render_string(self, include_trace=False)  # type: ignore[arg-type]

    def __format__(self, format_spec: str) -> str:
        from stackerr.application.renderers.string import render_string

        if format_spec == "+":
            return render_string(self, include_trace=True)  # type: ignore[arg-type]
        return format(str(self), format_spec)


class RootError(_Rendered, Exception):
    """Origin of a traced chain, or the first anchor over a foreign error.

    Attributes:
        stack_callers: Full capture taken at creation
        stack_delta: Annotation of the creation site
        wrapped_cause: Foreign or traced cause, None for a leaf
    """

    def __init__(
        self,
        callers: FullCapture,
        delta: DeltaAnnotation | None,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize from an existing capture and annotation."""
        super().__init__(delta.message if delta is not None else "")
        self._callers = tuple(callers)
        self._delta = delta
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def stack_callers(self) -> FullCapture:
        return self._callers

    @property
    def stack_delta(self) -> DeltaAnnotation | None:
        return self._delta

    @property
    def wrapped_cause(self) -> BaseException | None:
        return self._cause


class WrapError(_Rendered, Exception):
    """Cheap annotation over an anchored cause.

    Attributes:
        stack_delta: Annotation of the wrap site
        wrapped_cause: The wrapped error (never None)
    """

    def __init__(self, delta: DeltaAnnotation, cause: BaseException) -> None:
        """Initialize with annotation and cause. FAIL-FIRST on None cause."""
        if cause is None:
            raise NilCauseError
        super().__init__(delta.message)
        self._delta = delta
        self._cause = cause
        self.__cause__ = cause

    @property
    def stack_delta(self) -> DeltaAnnotation:
        return self._delta

    @property
    def wrapped_cause(self) -> BaseException:
        return self._cause


class BaseJoinError(_Rendered, BaseExceptionGroup):
    """Several independent errors merged into one.

    Native exception group, so `except*` and the standard traceback printer
    see every branch. Like BaseExceptionGroup, constructing one over
    Exception causes only gives the JoinError subclass; a BaseException
    cause (KeyboardInterrupt, SystemExit) keeps the base class so it is not
    swallowed by `except Exception`. Immutable: appending returns a new
    group that shares the original capture (see with_causes()).

    Attributes:
        stack_callers: Full capture taken at the first merge
        wrapped_causes: Causes in merge order (never empty)
    """

    def __new__(cls, causes: Sequence[BaseException], callers: FullCapture) -> BaseJoinError:
        if not causes:
            raise EmptyJoinError
        if cls is BaseJoinError and all(isinstance(c, Exception) for c in causes):
            cls = JoinError
        self = super().__new__(cls, JOIN_MESSAGE, tuple(causes))
        self._callers = tuple(callers)
        return self

    def __init__(self, causes: Sequence[BaseException], callers: FullCapture) -> None:
        super().__init__(JOIN_MESSAGE, tuple(causes))

    @property
    def stack_callers(self) -> FullCapture:
        return self._callers

    @property
    def wrapped_causes(self) -> tuple[BaseException, ...]:
        return self.exceptions

    def with_causes(self, extra: Sequence[BaseException]) -> BaseJoinError:
        """Return a group with extra causes appended, same capture."""
        return BaseJoinError((*self.exceptions, *extra), self._callers)

    def derive(self, excs: Sequence[BaseException]) -> BaseJoinError:
        """Keep the capture when split() / subgroup() rebuild the group."""
        return BaseJoinError(excs, self._callers)


class JoinError(BaseJoinError, ExceptionGroup):
    """BaseJoinError whose causes are all Exception instances."""
