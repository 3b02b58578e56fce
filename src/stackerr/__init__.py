"""stackerr - exceptions with call-stack capture and structured wrap context."""

__version__ = "0.1.0"

from loguru import logger

from stackerr.application.construction import (
    merge_errors,
    merge_errors_depth,
    new_error,
    new_error_depth,
    wrap_error,
    wrap_error_depth,
)
from stackerr.application.renderers import (
    ConsoleConfig,
    ConsoleRenderer,
    DocumentRenderer,
    FormatOptions,
    JSONFormat,
    JsonRenderer,
    StringFormat,
    StringRenderer,
    render_console,
    render_custom_document,
    render_custom_string,
    render_document,
    render_json,
    render_string,
)
from stackerr.application.traversal import contains, find_anchor, iter_chain, next_delta_annotated
from stackerr.application.unpack import unpack
from stackerr.domain.capture import Location
from stackerr.domain.errors import BaseJoinError, JoinError, RootError, WrapError
from stackerr.domain.exceptions import InvalidSkipError, NilCauseError, StackErrError
from stackerr.domain.hierarchy import Hierarchy, Link

# Library: silent until the application calls logger.enable("stackerr").
logger.disable("stackerr")

__all__ = [
    "BaseJoinError",
    "ConsoleConfig",
    "ConsoleRenderer",
    "DocumentRenderer",
    "FormatOptions",
    "Hierarchy",
    "InvalidSkipError",
    "JSONFormat",
    "JoinError",
    "JsonRenderer",
    "Link",
    "Location",
    "NilCauseError",
    "RootError",
    "StackErrError",
    "StringFormat",
    "StringRenderer",
    "WrapError",
    "__version__",
    "contains",
    "find_anchor",
    "iter_chain",
    "merge_errors",
    "merge_errors_depth",
    "new_error",
    "new_error_depth",
    "next_delta_annotated",
    "render_console",
    "render_custom_document",
    "render_custom_string",
    "render_document",
    "render_json",
    "render_string",
    "unpack",
    "wrap_error",
    "wrap_error_depth",
]
