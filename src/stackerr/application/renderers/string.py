"""String renderer: Hierarchy -> text for logs.

Without trace: messages, fields and external errors joined by error_sep.
With trace: every frame and wrap site, indented per branch depth, branches
labelled #0, #1, ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stackerr.application.renderers._base import EntryKind, interleave
from stackerr.application.renderers.options import FormatOptions, StringFormat
from stackerr.application.unpack import unpack
from stackerr.domain.hierarchy import safe_text

if TYPE_CHECKING:
    from stackerr.domain.hierarchy import Hierarchy, Link


class StringRenderer:
    """Renders traced errors as text."""

    def __init__(self, fmt: StringFormat | None = None) -> None:
        """Initialize renderer.

        Args:
            fmt: Text layout. Uses StringFormat.default() without trace if None.
        """
        self._fmt = fmt or StringFormat.default(FormatOptions())

    def render(self, err: BaseException | None) -> str:
        """Format err as a string."""
        return self.render_hierarchy(unpack(err))

    def render_hierarchy(self, hierarchy: Hierarchy) -> str:
        """Format an already reconstructed hierarchy."""
        parts: list[str] = []
        self._render(hierarchy, 1, parts)
        text = "".join(parts)
        if self._fmt.error_sep:
            text = text.removesuffix(self._fmt.error_sep)
        return text

    def _link_text(self, link: Link) -> str:
        pieces = [link.text]
        if link.fields:
            pieces.append(self._fmt.field_formatter(link.fields))
        return self._fmt.field_sep.join(p for p in pieces if p)

    def _render(self, hierarchy: Hierarchy, level: int, parts: list[str]) -> None:
        fmt = self._fmt
        location_formatter = fmt.options.location_formatter
        indent = fmt.pre_stack_sep * level

        if fmt.options.include_trace:
            for kind, value in interleave(hierarchy):
                match kind:
                    case EntryKind.FRAME:
                        parts.append(indent + location_formatter(value) + fmt.stack_elem_sep)  # type: ignore[arg-type]
                    case EntryKind.SITE:
                        parts.append(indent + location_formatter(value) + fmt.msg_stack_sep)  # type: ignore[arg-type]
                    case EntryKind.LINK:
                        parts.append(fmt.pre_stack_sep * (level - 1) + self._link_text(value) + fmt.error_sep)  # type: ignore[arg-type]
        else:
            for link in hierarchy.links:
                parts.append(self._link_text(link) + fmt.error_sep)

        if hierarchy.external is not None:
            parts.append(indent + safe_text(hierarchy.external) + fmt.error_sep)

        for i, sub in enumerate(hierarchy.sub_hierarchies):
            if fmt.options.include_trace:
                parts.append(f"{indent}#{i}{fmt.stack_elem_sep}")
            self._render(sub, level + 1, parts)


def render_string(err: BaseException | None, include_trace: bool = False) -> str:
    """Render err with the default layout."""
    fmt = StringFormat.default(FormatOptions(include_trace=include_trace))
    return StringRenderer(fmt).render(err)


def render_custom_string(err: BaseException | None, fmt: StringFormat) -> str:
    """Render err with a caller-supplied layout."""
    return StringRenderer(fmt).render(err)
