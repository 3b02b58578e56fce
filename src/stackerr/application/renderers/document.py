"""Document renderer: Hierarchy -> nested dicts/lists for log pipelines.

Shape (every key optional):
    stack:    [formatted location, ...]             trace only
    wrap:     [{msg, fields?, src?}, ...]           src trace only
    external: str(foreign error)
    type:     module.QualName of the foreign error  trace only
    join:     [child document, ...]
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from stackerr.application.renderers._base import qualified_type_name
from stackerr.application.renderers.options import FormatOptions, JSONFormat
from stackerr.application.unpack import unpack
from stackerr.domain.hierarchy import safe_text

if TYPE_CHECKING:
    from stackerr.domain.hierarchy import Hierarchy, Link


class DocumentRenderer:
    """Renders traced errors as JSON-compatible documents."""

    def __init__(self, fmt: JSONFormat | None = None) -> None:
        """Initialize renderer.

        Args:
            fmt: Document options. Default: no trace.
        """
        self._fmt = fmt or JSONFormat.default(FormatOptions())

    def render(self, err: BaseException | None) -> dict[str, Any]:
        """Build the document for err."""
        return self.render_hierarchy(unpack(err))

    def render_hierarchy(self, hierarchy: Hierarchy) -> dict[str, Any]:
        """Build the document for an already reconstructed hierarchy."""
        options = self._fmt.options
        doc: dict[str, Any] = {}

        if options.include_trace and hierarchy.call_frames:
            doc["stack"] = [options.location_formatter(loc) for loc in hierarchy.call_frames]
        if hierarchy.links:
            doc["wrap"] = [self._link_to_dict(link) for link in hierarchy.links]
        if hierarchy.external is not None:
            doc["external"] = safe_text(hierarchy.external)
            if options.include_trace:
                doc["type"] = qualified_type_name(hierarchy.external)
        if hierarchy.sub_hierarchies:
            doc["join"] = [self.render_hierarchy(sub) for sub in hierarchy.sub_hierarchies]

        return doc

    def _link_to_dict(self, link: Link) -> dict[str, Any]:
        """Convert Link to dict."""
        entry: dict[str, Any] = {"msg": link.text}
        if link.fields:
            entry["fields"] = dict(link.fields)
        if self._fmt.options.include_trace:
            entry["src"] = self._fmt.options.location_formatter(link.location)
        return entry


class JsonRenderer:
    """Renders the document as a JSON string.

    Field values are opaque; anything json cannot encode is passed through
    str(), with a placeholder when str() raises.
    """

    def __init__(self, fmt: JSONFormat | None = None, *, indent: int | None = 2) -> None:
        """Initialize renderer.

        Args:
            fmt: Document options.
            indent: JSON indentation. None for compact output.
        """
        self._document = DocumentRenderer(fmt)
        self._indent = indent

    def render(self, err: BaseException | None) -> str:
        """Format err as a JSON string."""
        return json.dumps(self._document.render(err), indent=self._indent, default=safe_text)


def render_document(err: BaseException | None, include_trace: bool = False) -> dict[str, Any]:
    """Render err as a document with default options."""
    fmt = JSONFormat.default(FormatOptions(include_trace=include_trace))
    return DocumentRenderer(fmt).render(err)


def render_custom_document(err: BaseException | None, fmt: JSONFormat) -> dict[str, Any]:
    """Render err as a document with caller-supplied options."""
    return DocumentRenderer(fmt).render(err)


def render_json(
    err: BaseException | None,
    include_trace: bool = False,
    *,
    indent: int | None = 2,
) -> str:
    """Render err as a JSON string."""
    fmt = JSONFormat.default(FormatOptions(include_trace=include_trace))
    return JsonRenderer(fmt, indent=indent).render(err)
