"""Domain layer: reconstructed hierarchy of a traced error.

Renderer-agnostic output of stackerr.application.unpack. Built on every
render request, never stored on the error itself.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from stackerr.domain.capture import Location

log = logger.bind(name="stackerr.hierarchy")


def safe_text(value: Any, convert: Callable[[Any], str] = str) -> str:
    """convert(value), or a placeholder when it raises (traceback's convention)."""
    try:
        return convert(value)
    except Exception as exc:
        log.debug("{}() of {} failed: {!r}", convert.__name__, type(value).__qualname__, exc)
        return f"<{type(value).__qualname__} {convert.__name__}() failed>"


def interpolate(message: str, args: tuple[Any, ...]) -> str:
    """Apply %-style args to message, logging's convention.

    No args: message verbatim. Mismatched or unprintable args never raise;
    the template is kept and a %!(BADARGS ...) marker appended.
    """
    if not args:
        return message
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return message % values
    except Exception as exc:
        log.debug("message interpolation failed for {!r}: {!r}", message, exc)
        return f"{message} %!(BADARGS {', '.join(safe_text(a, repr) for a in args)})"


@dataclass(frozen=True, slots=True)
class Link:
    """One wrap site: location + message + fields.

    Attributes:
        message: %-style template
        message_args: Template arguments
        fields: Opaque structured data, None when absent
        location: Where the wrap happened
    """

    message: str
    message_args: tuple[Any, ...]
    fields: Mapping[str, Any] | None
    location: Location

    @property
    def text(self) -> str:
        """Interpolated message."""
        return interpolate(self.message, self.message_args)


@dataclass(frozen=True, slots=True)
class Hierarchy:
    """Frames, links and branches of one traced error.

    Attributes:
        external: Terminal foreign error, None when absent
        call_frames: Locations outer-to-inner, no immediate repeats
        links: Wrap sites carrying a message or fields, outer-to-inner
        sub_hierarchies: Branches of a merge point (never exactly one)
    """

    external: BaseException | None = None
    call_frames: tuple[Location, ...] = field(default=())
    links: tuple[Link, ...] = field(default=())
    sub_hierarchies: tuple[Hierarchy, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.sub_hierarchies) == 1:
            raise ValueError("a single sub-hierarchy must be flattened into its parent")
        for prev, cur in zip(self.call_frames, self.call_frames[1:], strict=False):
            if prev == cur:
                raise ValueError(f"call_frames must not repeat adjacent locations: {cur}")

    @property
    def is_leaf(self) -> bool:
        """True when only an external error (or nothing) is carried."""
        return not self.call_frames and not self.links and not self.sub_hierarchies
