"""Output formatting utilities for the CLI."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterable

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
    }
)

_STATUS_STYLES = {"SUCCESS": "ok", "FAILED": "err", "CANCELED": "warn"}

console = Console(theme=_THEME)


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and tables."""

    def info(self, msg: str) -> None:
        """Print an info message."""
        console.print(f"[title]›[/] {msg}")

    @contextmanager
    def status(self, msg: str):
        """Show a transient status spinner while work is in progress."""
        with console.status(msg, spinner="dots"):
            yield

    def success(self, msg: str) -> None:
        """Print a success message."""
        console.print(f"[ok]✓[/] {msg}")

    def warn(self, msg: str) -> None:
        """Print a warning message."""
        console.print(f"[warn]⚠[/] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[err]✗[/] {msg}")

    def builds_table(self, builds: Iterable[Any], title: str = "Builds") -> None:
        """
        Expects objects with .job_name .number .display_name .status
        (like buildops.core.builds.Build)
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Job", style="meta")
        t.add_column("Number", style="ok", no_wrap=True)
        t.add_column("Display name")
        t.add_column("Status")

        for b in builds:
            status = getattr(b.status, "value", str(b.status))
            style = _STATUS_STYLES.get(status, "meta")
            t.add_row(
                b.job_name,
                str(b.number),
                b.display_name,
                f"[{style}]{status}[/{style}]",
            )

        console.print(t)

    def permalinks_table(
        self, permalinks: Iterable[Any], title: str = "Permalinks"
    ) -> None:
        """Expects objects with .name and .label"""
        t = Table(title=title, show_lines=False)
        t.add_column("Name", style="ok", no_wrap=True)
        t.add_column("Label")

        for p in permalinks:
            t.add_row(p.name, p.label)

        console.print(t)

    def selectors_table(self, entries: Iterable[Any], title: str = "Selectors") -> None:
        """Expects registry entries with .short_name .label .priority"""
        t = Table(title=title, show_lines=False)
        t.add_column("Name", style="ok", no_wrap=True)
        t.add_column("Label")
        t.add_column("Priority", style="meta", justify="right")

        for e in entries:
            t.add_row(e.short_name, e.label, str(e.priority))

        console.print(t)


out = Out()
