"""Hierarchy reconstruction: traced error -> Hierarchy.

Frames come from the anchor's full capture; wrap annotations are spliced in
where their caller_caller equals the frame just outside the one being
emitted. Positions are matched by identity, never by depth counting, so
frames the library itself adds in between do not shift anything.

A floor (position already rendered by the parent call) trims the shared
stack prefix from child captures. A single child is flattened into its
parent, so a long chain of wraps renders as one flat stack.

A floor missing from the child capture (the child was captured on an
unrelated stack) renders the child's full stack rather than nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from stackerr.application.traversal import find_anchor, multi_causes, next_delta_annotated, single_cause
from stackerr.domain.errors import HasDeltaAnnotation
from stackerr.domain.hierarchy import Hierarchy, Link
from stackerr.infrastructure.frames import resolve_location

if TYPE_CHECKING:
    from stackerr.domain.capture import FullCapture, Location, StackPosition

log = logger.bind(name="stackerr.unpack")


class _Builder:
    """Mutable accumulator, frozen into a Hierarchy at the end."""

    def __init__(self) -> None:
        self.external: BaseException | None = None
        self.call_frames: list[Location] = []
        self.links: list[Link] = []
        self.sub_hierarchies: list[Hierarchy] = []

    def add_frame(self, location: Location) -> None:
        """Append location unless it repeats the last one."""
        if self.call_frames and self.call_frames[-1] == location:
            return
        self.call_frames.append(location)

    def adopt(self, child: Hierarchy) -> None:
        """Flatten a single child into this node."""
        for location in child.call_frames:
            self.add_frame(location)
        self.links.extend(child.links)
        self.external = child.external
        self.sub_hierarchies = list(child.sub_hierarchies)

    def build(self) -> Hierarchy:
        return Hierarchy(
            external=self.external,
            call_frames=tuple(self.call_frames),
            links=tuple(self.links),
            sub_hierarchies=tuple(self.sub_hierarchies),
        )


def _start_index(callers: FullCapture, floor: StackPosition | None) -> int:
    """Index to start emitting from: just inside floor, else deepest."""
    deepest = len(callers) - 1
    if floor is None:
        return deepest
    for index in range(deepest, -1, -1):
        if callers[index] == floor:
            return index - 1
    log.debug("floor {!r} not in capture, rendering full stack", floor)
    return deepest


def _first_annotated(err: BaseException) -> HasDeltaAnnotation | None:
    if isinstance(err, HasDeltaAnnotation) and err.stack_delta is not None:
        return err
    return next_delta_annotated(err)


def unpack(err: BaseException | None) -> Hierarchy:
    """Reconstruct the hierarchy of err.

    Never fails: foreign or partial errors degrade to smaller hierarchies.
    """
    return _unpack(err, None, frozenset())


def _unpack(
    err: BaseException | None,
    floor: StackPosition | None,
    path: frozenset[int],
) -> Hierarchy:
    anchor = find_anchor(err)
    # a cause chain that leads back to an anchor above it ends the branch
    if anchor is None or id(anchor) in path:
        return Hierarchy(external=err)

    callers = anchor.stack_callers
    builder = _Builder()
    cursor = _first_annotated(err) if err is not None else None

    for index in range(_start_index(callers, floor), -1, -1):
        if index < len(callers) - 1:
            outer = callers[index + 1]
            while cursor is not None and cursor.stack_delta.caller_caller == outer:
                delta = cursor.stack_delta
                location = resolve_location(delta.caller)
                if delta.has_content:
                    builder.links.append(
                        Link(
                            message=delta.message,
                            message_args=delta.message_args,
                            fields=delta.fields,
                            location=location,
                        )
                    )
                builder.add_frame(location)
                cursor = next_delta_annotated(cursor)
        builder.add_frame(resolve_location(callers[index]))

    child_floor = callers[1] if len(callers) > 1 else None
    causes = multi_causes(anchor)
    if causes is None:
        cause = single_cause(anchor)
        causes = (cause,) if cause is not None else ()
    child_path = path | {id(anchor)}
    children = [_unpack(cause, child_floor, child_path) for cause in causes]

    if len(children) == 1:
        builder.adopt(children[0])
    else:
        builder.sub_hierarchies.extend(children)

    return builder.build()
