"""Renderers for traced errors.

String and document renderers use stdlib only.
ConsoleRenderer draws the hierarchy with rich.
"""

from stackerr.application.renderers._base import RendererProtocol
from stackerr.application.renderers.console import ConsoleConfig, ConsoleRenderer, render_console
from stackerr.application.renderers.document import (
    DocumentRenderer,
    JsonRenderer,
    render_custom_document,
    render_document,
    render_json,
)
from stackerr.application.renderers.options import (
    FormatOptions,
    JSONFormat,
    StringFormat,
    default_field_formatter,
    default_location_formatter,
)
from stackerr.application.renderers.string import StringRenderer, render_custom_string, render_string

__all__ = [
    "ConsoleConfig",
    "ConsoleRenderer",
    "DocumentRenderer",
    "FormatOptions",
    "JSONFormat",
    "JsonRenderer",
    "RendererProtocol",
    "StringFormat",
    "StringRenderer",
    "default_field_formatter",
    "default_location_formatter",
    "render_console",
    "render_custom_document",
    "render_custom_string",
    "render_document",
    "render_json",
    "render_string",
]
