"""Terminal output for the installer.

The install pipeline only talks to a :class:`Reporter`. The base class
prints nothing, which keeps the catalog, resolver and copy engine usable
without a terminal; :class:`ConsoleReporter` renders to a rich console.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, TextColumn
from rich.table import Table
from rich.text import Text

from .models import InstallReport, SkillDescriptor

LOGO = [
    "███████╗██╗  ██╗██╗██╗     ██╗     ███████╗ ██╗    ██╗███████╗",
    "██╔════╝██║ ██╔╝██║██║     ██║     ██╔════╝ ██║    ██║██╔════╝",
    "███████╗█████╔╝ ██║██║     ██║     ███████╗ ██║ █╗ ██║███████╗",
    "╚════██║██╔═██╗ ██║██║     ██║     ╚════██║ ██║███╗██║╚════██║",
    "███████║██║  ██╗██║███████╗███████╗███████║ ╚███╔███╔╝███████║",
    "╚══════╝╚═╝  ╚═╝╚═╝╚══════╝╚══════╝╚══════╝  ╚══╝╚══╝ ╚══════╝",
]
TAGLINE = "agent skills for AI"

LIST_DESCRIPTION_WIDTH = 55
PICKER_DESCRIPTION_WIDTH = 50

PROGRESS_WIDTH = 30
PROGRESS_LABELS = [
    "reading manifests",
    "resolving skills",
    "copying files",
    "writing to disk",
    "verifying",
]


def _plural(count: int) -> str:
    return f"{count} skill{'' if count == 1 else 's'}"


class Reporter:
    """Receives progress notices from the install pipeline."""

    def target(self, path: Path) -> None:
        """The install directory has been resolved."""

    def skipped(self, name: str) -> None:
        """A requested name is not in the catalog."""

    def nothing_selected(self) -> None:
        """The selection was empty; nothing will be installed."""

    def finished(self, report: InstallReport) -> None:
        """The batch completed."""


class ConsoleReporter(Reporter):
    """Renders install progress with rich.

    Args:
        console: Where to print.
        animate: Draw a progress bar before the summary. Only honoured on an
            interactive terminal.
    """

    def __init__(self, console: Console, animate: bool = True) -> None:
        self.console = console
        self.animate = animate

    def target(self, path: Path) -> None:
        self.console.print(f"\n  [dim]{escape(str(path))}[/dim]\n")

    def skipped(self, name: str) -> None:
        self.console.print(f"  [yellow]skip[/yellow] {escape(name)} [dim](not found)[/dim]")

    def nothing_selected(self) -> None:
        self.console.print("  [dim]Nothing selected.[/dim]")

    def finished(self, report: InstallReport) -> None:
        if self.animate and self.console.is_terminal:
            self._play_progress()
        self.console.print(f"  [bold green]{_plural(report.count)} installed[/bold green]\n")
        for name in report.installed:
            self.console.print(f"  [green]+[/green] {escape(name)}")
        self.console.print("\n  [dim]skills.ws[/dim]\n")

    def _play_progress(self) -> None:
        # Progress hides the cursor while live and restores it on exit.
        with Progress(
            TextColumn("  "),
            BarColumn(bar_width=PROGRESS_WIDTH, style="bright_black", complete_style="cyan"),
            TextColumn("[dim]{task.percentage:>3.0f}%[/dim]"),
            TextColumn("[dim]{task.description}[/dim]"),
            console=self.console,
            transient=True,
        ) as progress:
            task = progress.add_task(PROGRESS_LABELS[0], total=PROGRESS_WIDTH)
            for step in range(1, PROGRESS_WIDTH + 1):
                label = PROGRESS_LABELS[min(step * len(PROGRESS_LABELS) // PROGRESS_WIDTH, len(PROGRESS_LABELS) - 1)]
                progress.update(task, advance=1, description=label)
                time.sleep(0.025)


def _logo_line(line: str) -> Text:
    text = Text()
    for ch in line:
        if ch == "█":
            text.append(ch, style="cyan")
        elif ch == " ":
            text.append(ch)
        else:
            text.append(ch, style="bright_black")
    return text


def print_banner(console: Console) -> None:
    """Print the block logo and tagline.

    On a terminal the logo is revealed line by line with the cursor hidden;
    the cursor is always shown again afterwards.
    """
    reveal = console.is_terminal
    if reveal:
        console.show_cursor(False)
    try:
        console.print()
        for line in LOGO:
            console.print(Text("  ") + _logo_line(line))
            if reveal:
                time.sleep(0.03)
        console.print(f"\n  [dim]{TAGLINE}[/dim]\n")
    finally:
        if reveal:
            console.show_cursor(True)


def print_catalog(
    console: Console,
    skills: Sequence[SkillDescriptor],
    numbered: bool = False,
) -> None:
    """Print the catalog, one skill per row.

    Args:
        console: Where to print.
        skills: Catalog in display order.
        numbered: Prefix 1-based indices for the interactive picker.
    """
    width = PICKER_DESCRIPTION_WIDTH if numbered else LIST_DESCRIPTION_WIDTH
    table = Table(box=None, show_header=False, padding=(0, 1, 0, 2))
    if numbered:
        table.add_column(justify="right", style="bright_black", no_wrap=True)
    table.add_column(style="green", no_wrap=True, min_width=24)
    table.add_column(style="dim")

    for index, skill in enumerate(skills, start=1):
        row = [escape(skill.name), escape(skill.short_description(width))]
        if numbered:
            row.insert(0, str(index))
        table.add_row(*row)

    console.print(table)


def print_usage(console: Console, skill_count: int) -> None:
    """Short usage summary for the ``help`` command."""
    console.print("  [bold]Usage:[/bold]\n")
    console.print("    [cyan]skills-ws[/cyan]                    Interactive picker")
    console.print("    [cyan]skills-ws list[/cyan]               List all skills")
    console.print("    [cyan]skills-ws install <name>[/cyan]     Install specific skill(s)")
    console.print("    [cyan]skills-ws install all[/cyan]        Install everything")
    console.print("    [cyan]skills-ws info <name>[/cyan]        Show a skill's manifest and files")
    console.print(f"\n  [dim]{_plural(skill_count)} | skills.ws[/dim]\n")
