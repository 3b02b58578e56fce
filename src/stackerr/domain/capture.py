"""Domain layer: immutable value objects for stack captures.

StackPosition is an opaque identity token for one point in the call stack.
Location is its resolved, human-readable form. DeltaAnnotation records the
two positions around a wrap site plus the message and fields attached there.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import CodeType
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True, eq=False)
class StackPosition:
    """Opaque stack position: code object + offset of its last instruction.

    Equality is code-object identity plus offset. Two functions with
    byte-identical bodies are still different positions.

    Attributes:
        code: Code object of the frame.
        offset: Byte offset of the frame's last executed instruction.
    """

    code: CodeType
    offset: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StackPosition):
            return NotImplemented
        return self.code is other.code and self.offset == other.offset

    def __hash__(self) -> int:
        return hash((id(self.code), self.offset))

    def __repr__(self) -> str:
        return f"StackPosition({self.code.co_qualname}@{self.offset})"


FullCapture: TypeAlias = tuple[StackPosition, ...]


@dataclass(frozen=True, slots=True)
class Location:
    """Resolved frame location (filename, line, func).

    The empty Location (all fields empty) stands for a null position.

    Attributes:
        filename: Path of the source file ("" when unknown)
        line: Line number (0 when unknown)
        func: Qualified function name ("" when unknown)
    """

    filename: str = ""
    line: int = 0
    func: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line < 0:
            raise ValueError(f"line must be >= 0, got {self.line}")

    @property
    def is_empty(self) -> bool:
        """True for the location of a null position."""
        return not self.filename and not self.line and not self.func

    def __str__(self) -> str:
        """Format as filename:line (func)."""
        return f"{self.filename}:{self.line} ({self.func})"


@dataclass(frozen=True, slots=True)
class DeltaAnnotation:
    """Lightweight record of a wrap site.

    Attributes:
        caller: Position of the annotation's own creation site
        caller_caller: Position of that site's caller
        fields: Opaque structured data, None when absent
        message: %-style template (may be empty)
        message_args: Arguments interpolated into message
    """

    caller: StackPosition | None = None
    caller_caller: StackPosition | None = None
    fields: Mapping[str, Any] | None = None
    message: str = ""
    message_args: tuple[Any, ...] = field(default=())

    @property
    def has_content(self) -> bool:
        """True when the annotation carries a message, args or fields."""
        return bool(self.message or self.message_args or self.fields)

    def with_message(
        self,
        fields: Mapping[str, Any] | None,
        message: str,
        message_args: tuple[Any, ...],
    ) -> DeltaAnnotation:
        """Return a copy with message and fields attached."""
        return replace(self, fields=fields, message=message, message_args=tuple(message_args))
