"""Formatting configuration shared by all renderers.

All configs are frozen dataclasses with defaults for every field.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from stackerr.domain.capture import Location
from stackerr.domain.hierarchy import safe_text

LocationFormatter: TypeAlias = Callable[[Location], str]
FieldFormatter: TypeAlias = Callable[[Mapping[str, Any]], str]


def default_location_formatter(location: Location) -> str:
    """filename:line (func)."""
    return f"{location.filename}:{location.line} ({location.func})"


def default_field_formatter(fields: Mapping[str, Any]) -> str:
    """Space-separated key=value pairs, insertion order."""
    return " ".join(f"{key}={safe_text(value)}" for key, value in fields.items())


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Options common to every renderer.

    Attributes:
        location_formatter: Location -> display string.
        include_trace: Emit frames and sources, not only messages.
    """

    location_formatter: LocationFormatter = default_location_formatter
    include_trace: bool = False


@dataclass(frozen=True, slots=True)
class StringFormat:
    """Text layout for the string renderer.

    Attributes:
        options: Common options.
        msg_stack_sep: After a wrap-site location, before its message.
        pre_stack_sep: Indentation unit, repeated per depth level.
        stack_elem_sep: After each plain frame.
        error_sep: After each message and external error.
        field_sep: Between a message and its formatted fields.
        field_formatter: Fields -> display string.
    """

    options: FormatOptions = field(default_factory=FormatOptions)
    msg_stack_sep: str = ""
    pre_stack_sep: str = ""
    stack_elem_sep: str = ""
    error_sep: str = ": "
    field_sep: str = " "
    field_formatter: FieldFormatter = default_field_formatter

    @classmethod
    def default(cls, options: FormatOptions) -> StringFormat:
        """Newline/tab layout with trace, ': '-joined without."""
        if options.include_trace:
            return cls(
                options=options,
                msg_stack_sep="\n",
                pre_stack_sep="\t",
                stack_elem_sep="\n",
                error_sep="\n",
            )
        return cls(options=options)


@dataclass(frozen=True, slots=True)
class JSONFormat:
    """Layout for the document renderer.

    Attributes:
        options: Common options.
    """

    options: FormatOptions = field(default_factory=FormatOptions)

    @classmethod
    def default(cls, options: FormatOptions) -> JSONFormat:
        return cls(options=options)
