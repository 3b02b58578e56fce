"""Shared pieces of the renderers.

interleave() merges a hierarchy's frames and links into one ordered stream:
each link is preceded by every frame up to and including its own location,
which is emitted once even when several links share it.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from stackerr.domain.capture import Location
    from stackerr.domain.hierarchy import Hierarchy, Link


class EntryKind(Enum):
    """Kinds of entries produced by interleave()."""

    FRAME = "FRAME"
    SITE = "SITE"
    LINK = "LINK"


def interleave(hierarchy: Hierarchy) -> Iterator[tuple[EntryKind, Location | Link]]:
    """Yield frames, wrap sites and links of one hierarchy node in order."""
    frames = hierarchy.call_frames
    index = 0
    for link in hierarchy.links:
        if index == 0 or frames[index - 1] != link.location:
            while index < len(frames) - 1 and frames[index] != link.location:
                yield EntryKind.FRAME, frames[index]
                index += 1
            yield EntryKind.SITE, link.location
            index += 1
        yield EntryKind.LINK, link
    while index < len(frames):
        yield EntryKind.FRAME, frames[index]
        index += 1


def qualified_type_name(err: BaseException) -> str:
    """module.QualName of err's concrete type."""
    cls = type(err)
    return f"{cls.__module__}.{cls.__qualname__}"


class RendererProtocol(Protocol):
    """Contract for all renderers.

    Output is a value, never printed. Caller decides destination.
    """

    def render(self, err: BaseException | None) -> object:
        """Render err.

        Args:
            err: Traced or foreign error, None renders as empty.

        Returns:
            Rendered representation.
        """
        ...
