"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

import sys
from collections.abc import Mapping
from typing import Any

from stackerr.domain.capture import Location, StackPosition
from stackerr.domain.hierarchy import Hierarchy, Link

# Default test file path - consistent across all tests
DEFAULT_TEST_FILE = "/test/file.py"


def here() -> Location:
    """Location of the caller's current line.

    Put on the same line as the call under test:
        err, loc = new_error("x"), here()
    """
    frame = sys._getframe(1)
    code = frame.f_code
    return Location(filename=code.co_filename, line=frame.f_lineno, func=code.co_qualname)


def _sample() -> None:
    """Code object donor for make_position()."""


def make_position(offset: int = 0) -> StackPosition:
    """Create a StackPosition on a fixed code object."""
    return StackPosition(code=_sample.__code__, offset=offset)


def make_location(
    line: int = 1,
    func: str = "func",
    filename: str = DEFAULT_TEST_FILE,
) -> Location:
    """Create a Location for tests."""
    return Location(filename=filename, line=line, func=func)


def make_link(
    message: str = "msg",
    *args: Any,
    fields: Mapping[str, Any] | None = None,
    location: Location | None = None,
) -> Link:
    """Create a Link for tests."""
    return Link(
        message=message,
        message_args=args,
        fields=fields,
        location=location if location is not None else make_location(),
    )


def make_hierarchy(
    *,
    external: BaseException | None = None,
    call_frames: tuple[Location, ...] = (),
    links: tuple[Link, ...] = (),
    sub_hierarchies: tuple[Hierarchy, ...] = (),
) -> Hierarchy:
    """Create a Hierarchy for tests."""
    return Hierarchy(
        external=external,
        call_frames=call_frames,
        links=links,
        sub_hierarchies=sub_hierarchies,
    )
