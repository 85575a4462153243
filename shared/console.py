"""
Prism Console Interface
========================

Rich-powered console abstraction giving every Prism command the same
presentation layer: a compact banner, section rules, severity-coloured
messages and key/value or tabular result blocks.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all Prism output
# ---------------------------------------------------------------------------
_PRISM_THEME = Theme(
    {
        "prism.banner": "bold bright_cyan",
        "prism.section": "bold bright_magenta",
        "prism.success": "bold green",
        "prism.warning": "bold yellow",
        "prism.error": "bold red",
        "prism.dim": "dim white",
        "prism.key": "bold bright_white",
    }
)

_TAGLINE = "Binary Content Characterization"


class PrismConsole:
    """Unified console interface for Prism commands.

    Usage::

        con = PrismConsole()
        con.banner()
        con.section("Digests")
        con.key_values({"md5": "d41d8cd98f00b204e9800998ecf8427e"})
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet: Suppress all output (JSON mode, library use).
        """
        self._console = Console(theme=_PRISM_THEME, quiet=quiet, highlight=False)

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the Prism banner panel."""
        self._console.print(
            Panel(
                f"[prism.banner]PRISM[/prism.banner]  {_TAGLINE}\n"
                f"[prism.dim]Version: {version}[/prism.dim]",
                border_style="bright_cyan",
                padding=(0, 2),
            )
        )

    def section(self, title: str) -> None:
        """Print a section header rule."""
        self._console.rule(f"  {title}  ", style="prism.section")

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[prism.success][✔] SUCCESS:[/prism.success] {message}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[prism.warning][⚠] WARNING:[/prism.warning] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[prism.error][✘] ERROR:[/prism.error] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Structured blocks
    # ------------------------------------------------------------------ #

    def key_values(self, pairs: dict[str, Any], *, title: str | None = None) -> None:
        """Render a two-column key/value grid.

        Args:
            pairs: Ordered mapping of labels to values; values are stringified.
            title: Optional title shown above the grid.
        """
        grid = Table(title=title, show_header=False, box=None, padding=(0, 2))
        grid.add_column(style="prism.key", no_wrap=True)
        grid.add_column(overflow="fold")
        for key, value in pairs.items():
            grid.add_row(key, str(value))
        self._console.print(grid)

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Row tuples; each element is stringified.
        """
        tbl = Table(
            title=title,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            padding=(0, 1),
        )
        for col_name in columns:
            tbl.add_column(col_name)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

