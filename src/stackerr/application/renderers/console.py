"""Console renderer: traced error -> rich tree string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from stackerr.application.renderers._base import EntryKind, interleave, qualified_type_name
from stackerr.application.renderers.options import default_field_formatter
from stackerr.application.unpack import unpack
from stackerr.domain.hierarchy import safe_text

if TYPE_CHECKING:
    from stackerr.application.renderers.options import FieldFormatter, LocationFormatter
    from stackerr.domain.capture import Location
    from stackerr.domain.hierarchy import Hierarchy, Link


def format_location_short(loc: Location) -> str:
    """Format location as short string: file:line func."""
    file_part = loc.filename.split("/")[-1] if loc.filename else "?"
    func_part = loc.func or "?"
    return f"{file_part}:{loc.line} {func_part}"


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console renderer.

    Attributes:
        show_trace: Show frames and wrap sites, not only messages.
        location_formatter: Location -> display string.
        field_formatter: Fields -> display string.
        width: Console width in characters.
        color: Emit ANSI styles.
    """

    show_trace: bool = True
    location_formatter: LocationFormatter = format_location_short
    field_formatter: FieldFormatter = default_field_formatter
    width: int = 120
    color: bool = True


class ConsoleRenderer:
    """Renders the hierarchy as a rich tree, one branch per merged error.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Renderer configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def render(self, err: BaseException | None) -> str:
        """Format err as a rich tree."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )
        title = qualified_type_name(err) if err is not None else "no error"
        tree = Tree(Text(title, style="bold red"))
        self._add(tree, unpack(err))
        console.print(tree)
        return output.getvalue()

    def _link_label(self, link: Link) -> Text:
        label = Text(link.text, style="bold")
        if link.fields:
            label.append(" " + self._config.field_formatter(link.fields), style="yellow")
        return label

    def _add(self, node: Tree, hierarchy: Hierarchy) -> None:
        fmt = self._config.location_formatter
        if self._config.show_trace:
            for kind, value in interleave(hierarchy):
                match kind:
                    case EntryKind.FRAME:
                        node.add(Text(fmt(value), style="dim"))  # type: ignore[arg-type]
                    case EntryKind.SITE:
                        node.add(Text(fmt(value), style="cyan"))  # type: ignore[arg-type]
                    case EntryKind.LINK:
                        node.add(self._link_label(value))  # type: ignore[arg-type]
        else:
            for link in hierarchy.links:
                node.add(self._link_label(link))

        if hierarchy.external is not None:
            ext = hierarchy.external
            node.add(Text(f"{qualified_type_name(ext)}: {safe_text(ext)}", style="red"))

        for i, sub in enumerate(hierarchy.sub_hierarchies):
            self._add(node.add(Text(f"#{i}", style="magenta")), sub)


def render_console(err: BaseException | None, include_trace: bool = True) -> str:
    """Render err as a rich tree with default configuration."""
    return ConsoleRenderer(ConsoleConfig(show_trace=include_trace)).render(err)
